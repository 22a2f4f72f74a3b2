"""IDO error taxonomy.

Every fatal condition is an ``IdoError`` carrying a stable code from
``ERRORS``. Recoverable conditions are warnings and never abort.
"""
from __future__ import annotations

ERRORS = {
    "E_TRUNCATED_INPUT": "Container is shorter than the fixed header",
    "E_CORRUPT_STREAM": "Compressed payload is not a valid zlib stream",
    "E_MISSING_HEADER_MARKER": "Header marker not found in document",
    "E_MALFORMED_HEADER_MARKER": "End header marker not found in document",
    "E_MALFORMED_HEADER": "Embedded header is not valid hex",
    "E_MALFORMED_DOCUMENT": "Document is not valid UTF-8 text",
    "E_IO_FAILURE": "File could not be read or written",
}


class IdoError(ValueError):
    code = "E_IDO"

    def __init__(self, detail: str | None = None):
        message = ERRORS.get(self.code, "IDO error")
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.detail = detail


class TruncatedInput(IdoError):
    code = "E_TRUNCATED_INPUT"


class CorruptStream(IdoError):
    code = "E_CORRUPT_STREAM"


class MissingHeaderMarker(IdoError):
    code = "E_MISSING_HEADER_MARKER"


class MalformedHeaderMarker(IdoError):
    code = "E_MALFORMED_HEADER_MARKER"


class MalformedHeader(IdoError):
    code = "E_MALFORMED_HEADER"


class MalformedDocument(IdoError):
    code = "E_MALFORMED_DOCUMENT"


class IOFailure(IdoError):
    code = "E_IO_FAILURE"


class IdoWarning(UserWarning):
    pass


class LossyTranscode(IdoWarning):
    """Some characters could not be carried across the legacy encoding."""


class RecordSizeMismatch(IdoWarning):
    """Shop database length is not a whole number of records."""
