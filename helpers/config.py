import os
from dataclasses import dataclass
from typing import Optional


SUS_BUCKET = os.getenv("SUS_BUCKET", "sus-files")

S3_ENDPOINT = os.getenv("S3_ENDPOINT", "http://localhost:9000")
S3_ACCESS_KEY = os.getenv("S3_ACCESS_KEY", "minioadmin")
S3_SECRET_KEY = os.getenv("S3_SECRET_KEY", "minioadmin")
S3_REGION = os.getenv("S3_REGION", "us-east-1")

# seconds
S3_CONNECT_TIMEOUT = float(os.getenv("S3_CONNECT_TIMEOUT", "10"))
S3_READ_TIMEOUT = float(os.getenv("S3_READ_TIMEOUT", "60"))


@dataclass(frozen=True)
class S3Config:
    endpoint: Optional[str]
    access_key: Optional[str]
    secret_key: Optional[str]
    region: str
    bucket: str
    connect_timeout: float
    read_timeout: float


def load_s3_config() -> S3Config:
    return S3Config(
        endpoint=S3_ENDPOINT or None,
        access_key=S3_ACCESS_KEY or None,
        secret_key=S3_SECRET_KEY or None,
        region=S3_REGION,
        bucket=SUS_BUCKET,
        connect_timeout=S3_CONNECT_TIMEOUT,
        read_timeout=S3_READ_TIMEOUT,
    )
