import io

import pytest

from helpers.streams import stream_to_string


class _ChunkStream:
    """Hands out one queued chunk per read(), then b"" (or raises)."""

    def __init__(self, chunks, error=None):
        self._chunks = list(chunks)
        self._error = error

    def read(self, _size=-1):
        if self._chunks:
            return self._chunks.pop(0)
        if self._error is not None:
            raise self._error
        return b""


def test_chunks_joined_in_arrival_order():
    assert stream_to_string(_ChunkStream([b"ab", b"cd", b"ef"])) == "abcdef"


def test_multibyte_char_split_across_chunks():
    encoded = "譜面".encode("utf-8")
    stream = _ChunkStream([encoded[:2], encoded[2:4], encoded[4:]])
    assert stream_to_string(stream) == "譜面"


def test_error_before_end_propagates():
    err = OSError("connection reset")
    with pytest.raises(OSError) as exc_info:
        stream_to_string(_ChunkStream([b"ab", b"cd"], error=err))
    assert exc_info.value is err


def test_bytesio_with_small_chunk_size():
    assert stream_to_string(io.BytesIO(b"#00002: 4\n"), chunk_size=3) == "#00002: 4\n"


def test_empty_stream():
    assert stream_to_string(io.BytesIO(b"")) == ""


def test_invalid_utf8_is_replaced_not_raised():
    stream = _ChunkStream([b"#TITLE \"", b"\x82\xa0", b"\"\n"])
    assert stream_to_string(stream) == "#TITLE \"\ufffd\ufffd\"\n"
