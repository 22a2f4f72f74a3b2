"""IDO Core - container codec for .ido game assets."""
from .classify import PayloadKind, classify
from .compression import compress, decompress
from .container import Artifact, BinaryAsset, TextDocument, decode, encode, split_document
from .errors import (
    ERRORS,
    CorruptStream,
    IdoError,
    IdoWarning,
    IOFailure,
    LossyTranscode,
    MalformedHeader,
    MalformedHeaderMarker,
    MalformedDocument,
    MissingHeaderMarker,
    RecordSizeMismatch,
    TruncatedInput,
)
from .header import parse_hex, read_header, render_hex
from .transcode import decode_legacy, encode_legacy

__all__ = [
    "PayloadKind",
    "classify",
    "compress",
    "decompress",
    "Artifact",
    "BinaryAsset",
    "TextDocument",
    "decode",
    "encode",
    "split_document",
    "ERRORS",
    "IdoError",
    "IdoWarning",
    "TruncatedInput",
    "CorruptStream",
    "MissingHeaderMarker",
    "MalformedHeaderMarker",
    "MalformedDocument",
    "MalformedHeader",
    "IOFailure",
    "LossyTranscode",
    "RecordSizeMismatch",
    "read_header",
    "render_hex",
    "parse_hex",
    "decode_legacy",
    "encode_legacy",
]
