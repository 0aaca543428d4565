from typing import IO, List

CHUNK_SIZE = 64 * 1024


def stream_to_string(stream: IO[bytes], chunk_size: int = CHUNK_SIZE) -> str:
    """
    Reads the whole stream, then decodes once.
    Chunks are joined in the order they arrive; errors from read() propagate.
    Bytes that are not valid UTF-8 become U+FFFD instead of failing.
    """
    chunks: List[bytes] = []
    while chunk := stream.read(chunk_size):
        chunks.append(bytes(chunk))
    return b"".join(chunks).decode("utf-8", errors="replace")
