"""IDO container codec.

A container is ``[header | zlib payload]``. Decoding yields exactly one
artifact:

- ``BinaryAsset`` for recognised texture payloads. The header is dropped and
  there is no way back to a container from this form.
- ``TextDocument`` for legacy text. The header travels with the text as a
  trailing ``<!-- IDO HEADER: ... -->`` comment so that an edited document
  can be compiled back into a container with the original header.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union
from warnings import warn

from .classify import PayloadKind, classify
from .compression import compress, decompress
from .errors import LossyTranscode, MalformedHeaderMarker, MissingHeaderMarker
from .header import parse_hex, read_header, render_hex
from .protocol import HEADER_LEN, HEADER_MARKER, HEADER_MARKER_END
from .transcode import decode_legacy, encode_legacy


@dataclass(frozen=True)
class BinaryAsset:
    data: bytes
    kind: PayloadKind

    @property
    def extension(self) -> str:
        return self.kind.extension


@dataclass(frozen=True)
class TextDocument:
    body: str
    header: bytes
    had_loss: bool = False

    @property
    def header_hex(self) -> str:
        return render_hex(self.header)

    def render(self) -> str:
        return f"{self.body}\n{HEADER_MARKER}{self.header_hex}{HEADER_MARKER_END}"


Artifact = Union[BinaryAsset, TextDocument]


def decode(container: bytes) -> Artifact:
    header = read_header(container)
    payload = decompress(container[HEADER_LEN:])

    kind = classify(payload)
    if kind.is_binary:
        return BinaryAsset(payload, kind)

    body, had_loss = decode_legacy(payload)
    if had_loss:
        warn("Some characters could not be decoded perfectly.", LossyTranscode, stacklevel=2)
    return TextDocument(body, header, had_loss)


def split_document(text: str) -> tuple[str, bytes]:
    """Separate an edited document into its trimmed body and header bytes.

    The last marker wins: markup may legitimately contain the marker text.
    """
    start = text.rfind(HEADER_MARKER)
    if start == -1:
        raise MissingHeaderMarker()

    hex_start = start + len(HEADER_MARKER)
    end = text.find(HEADER_MARKER_END, hex_start)
    if end == -1:
        raise MalformedHeaderMarker()

    header = parse_hex(text[hex_start:end])
    return text[:start].strip(), header


def encode(document: str | TextDocument) -> bytes:
    if isinstance(document, TextDocument):
        document = document.render()
    elif not isinstance(document, str):
        raise TypeError(f"cannot encode {type(document).__name__}; only text documents compile")

    body, header = split_document(document)

    raw, had_loss = encode_legacy(body)
    if had_loss:
        warn("Some characters could not be mapped to the legacy encoding.", LossyTranscode, stacklevel=2)

    return header + compress(raw)
