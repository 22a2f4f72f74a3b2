from __future__ import annotations

import zlib

from .errors import CorruptStream


def decompress(data: bytes) -> bytes:
    """Inflate a zlib stream. Bytes after the end of the stream are ignored."""
    obj = zlib.decompressobj()
    try:
        payload = obj.decompress(data)
        payload += obj.flush()
    except zlib.error as e:
        raise CorruptStream(str(e)) from e
    if not obj.eof:
        raise CorruptStream("stream ended before the end-of-stream marker")
    return payload


def compress(data: bytes) -> bytes:
    """Deflate at the default level. Same output as ``zlib.compress(data)``."""
    obj = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION)
    return obj.compress(data) + obj.flush()
