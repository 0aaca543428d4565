import gzip


def gzip_string(data: str) -> bytes:
    # mtime=0 keeps the header stable, same input -> same bytes
    return gzip.compress(data.encode("utf-8"), mtime=0)
