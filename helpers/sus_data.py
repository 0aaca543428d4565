from __future__ import annotations

import asyncio
import io
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Union

import sonolus_converters

from helpers.compression import gzip_string
from helpers.config import SUS_BUCKET
from helpers.storage import is_s3_error, s3_error_code, sus_file_key
from helpers.streams import stream_to_string


@dataclass(frozen=True)
class SusDataError:
    status_code: int
    error: str
    code: str

    @property
    def body(self) -> Dict[str, str]:
        return {"error": self.error, "code": self.code}


FILE_NOT_FOUND = SusDataError(404, "File not found", "file_not_found")
INTERNAL_SERVER_ERROR = SusDataError(
    500, "Internal Server Error", "internal_server_error"
)
UNEXPECTED_MISSING_BAR = SusDataError(
    400, "Unexpected missing bar", "unexpected_missing_bar"
)

MISSING_BAR_MESSAGE = "Unexpected missing bar"


def parse_sus(text: str) -> Any:
    return sonolus_converters.sus.load(io.StringIO(text))


def export_level_data(score: Any) -> bytes:
    with tempfile.TemporaryDirectory() as tmp:
        out_path = Path(tmp) / "level_data"
        sonolus_converters.LevelData.next_sekai.export(
            out_path, score, as_compressed=False
        )
        return gzip_string(out_path.read_text(encoding="utf-8"))


async def get_sus_data(
    s3,
    hash: str,
    *,
    bucket: str = SUS_BUCKET,
    parser: Callable[[str], Any] = parse_sus,
    run_blocking: Callable[..., Any] = asyncio.to_thread,
) -> Union[Any, SusDataError]:
    """
    Fetches SusFile/<hash> from the bucket and parses it.

    Returns the parsed level data, or one of the SusDataError variants.
    Never raises for store, stream or parser failures; the caller turns the
    error into a response.
    """
    key = sus_file_key(hash)
    try:
        content = await run_blocking(s3.get_object, Bucket=bucket, Key=key)
    except Exception as e:
        if s3_error_code(e) == "NoSuchKey":
            print(f"No such key: {key}")
            return FILE_NOT_FOUND
        if is_s3_error(e):
            metadata = e.response["ResponseMetadata"]
            print(
                f"S3 GetObject Error: {metadata['HTTPStatusCode']} / {s3_error_code(e)}"
            )
        else:
            print(f"Unknown error while getting file: {e}")
        return INTERNAL_SERVER_ERROR

    body = content["Body"]
    try:
        text = await run_blocking(stream_to_string, body)
    except Exception as e:
        # logged apart from parse failures so a dropped connection is not
        # reported as a bad chart
        print(f"Error while reading SUS file: {e}")
        return INTERNAL_SERVER_ERROR
    finally:
        await run_blocking(body.close)

    try:
        data = await run_blocking(parser, text)
    except Exception as e:
        print(f"Error while parsing SUS file: {e}")
        if MISSING_BAR_MESSAGE in str(e):
            return UNEXPECTED_MISSING_BAR
        return INTERNAL_SERVER_ERROR
    return data
