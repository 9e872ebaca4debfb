from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    PARSE_ERROR = "parse_error"
    IO_ERROR = "io_error"


class StoreError(Exception):
    """Raised by every accessor for filesystem and parse failures.

    ``kind`` tells callers what went wrong without inspecting the chained
    exception; ``path`` is the document involved, when there is one.
    """

    def __init__(self, kind: ErrorKind, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = Path(path) if path is not None else None

    @classmethod
    def from_os_error(cls, exc: OSError, path: Path | str) -> "StoreError":
        if isinstance(exc, FileNotFoundError):
            kind = ErrorKind.NOT_FOUND
            message = f"{Path(path).name} not found"
        elif isinstance(exc, PermissionError):
            kind = ErrorKind.PERMISSION_DENIED
            message = f"Permission denied for {Path(path).name}"
        else:
            kind = ErrorKind.IO_ERROR
            message = f"Could not access {Path(path).name}: {exc.strerror or exc}"
        return cls(kind, message, path)

    @classmethod
    def parse_error(cls, message: str, path: Path | str | None = None) -> "StoreError":
        return cls(ErrorKind.PARSE_ERROR, message, path)

    def __repr__(self) -> str:
        return f"StoreError({self.kind.value!r}, {self.message!r})"
