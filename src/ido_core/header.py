"""Fixed-length opaque container header."""
from __future__ import annotations

import binascii
import re
from typing import BinaryIO

from .errors import MalformedHeader, TruncatedInput
from .protocol import HEADER_LEN

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def read_header(source: bytes | bytearray | memoryview | BinaryIO) -> bytes:
    """Read the HEADER_LEN-byte header from a buffer or an open binary file.

    A file object is left positioned right after the header.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        header = bytes(source[:HEADER_LEN])
    else:
        header = source.read(HEADER_LEN)

    if len(header) < HEADER_LEN:
        raise TruncatedInput(f"got {len(header)} of {HEADER_LEN} header bytes")
    return header


def render_hex(header: bytes) -> str:
    return header.hex()


def parse_hex(text: str) -> bytes:
    """Parse separator-free hex. The header is opaque, so its length is not checked."""
    if len(text) % 2:
        raise MalformedHeader(f"odd number of hex digits ({len(text)})")
    if not _HEX_RE.fullmatch(text):
        raise MalformedHeader("non-hex character in header")
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as e:
        raise MalformedHeader(str(e)) from e
