"""Legacy Korean text transcoding.

Both directions always succeed. The second element of the returned tuple
reports whether anything had to be replaced on the way.
"""
from __future__ import annotations

from .protocol import LEGACY_ENCODING


def decode_legacy(data: bytes) -> tuple[str, bool]:
    try:
        return data.decode(LEGACY_ENCODING), False
    except UnicodeDecodeError:
        return data.decode(LEGACY_ENCODING, errors="replace"), True


def encode_legacy(text: str) -> tuple[bytes, bool]:
    # Unmappable characters become numeric character references (&#NNNN;),
    # which survive inside markup.
    try:
        return text.encode(LEGACY_ENCODING), False
    except UnicodeEncodeError:
        return text.encode(LEGACY_ENCODING, errors="xmlcharrefreplace"), True
