from typing import Any, Mapping, Optional

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import ClientError

from helpers.config import S3Config, load_s3_config


def sus_file_key(hash: str) -> str:
    return f"SusFile/{hash}"


def build_s3_client(config: Optional[S3Config] = None):
    config = config or load_s3_config()
    return boto3.client(
        "s3",
        endpoint_url=config.endpoint,
        aws_access_key_id=config.access_key,
        aws_secret_access_key=config.secret_key,
        region_name=config.region,
        config=BotoConfig(
            signature_version="s3v4",
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            retries={"mode": "standard", "total_max_attempts": 1},
        ),
    )


def _error_response(d: Any) -> Optional[Mapping]:
    response = d.response if isinstance(d, ClientError) else d
    if isinstance(response, Mapping):
        return response
    return None


def s3_error_code(d: Any) -> Optional[str]:
    response = _error_response(d)
    if response is None:
        return None
    error = response.get("Error")
    if not isinstance(error, Mapping):
        return None
    code = error.get("Code")
    return code if isinstance(code, str) else None


def is_s3_error(d: Any) -> bool:
    """
    True only for an S3 error carrying a string Error.Code and
    ResponseMetadata with a numeric (int or float) HTTPStatusCode.
    Accepts a botocore ClientError or its raw response dict.
    """
    if not d:
        return False
    response = _error_response(d)
    if response is None:
        return False
    if not s3_error_code(response):
        return False
    metadata = response.get("ResponseMetadata")
    if not isinstance(metadata, Mapping):
        return False
    status_code = metadata.get("HTTPStatusCode")
    return isinstance(status_code, (int, float)) and not isinstance(status_code, bool)
