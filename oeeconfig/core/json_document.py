from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from oeeconfig.core.files import read_text, write_text
from oeeconfig.errors import StoreError


class JsonDocumentStore:
    """A single JSON file, re-read on every access and replaced on every write."""

    def __init__(self, path: Path | str, indent: int = 2, atomic: bool = True):
        self.path = Path(path)
        self.indent = indent
        self.atomic = atomic

    @property
    def name(self) -> str:
        return self.path.name

    def read_text(self) -> str:
        return read_text(self.path)

    def read(self) -> Any:
        raw = self.read_text()
        try:
            return json.loads(raw)
        except ValueError as e:
            raise StoreError.parse_error(f"{self.name} contains invalid JSON: {e}", self.path) from e

    def write(self, value: Any) -> None:
        try:
            text = json.dumps(value, indent=self.indent, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise StoreError.parse_error(f"Value is not JSON-serializable: {e}", self.path) from e
        self.write_text(text)

    def write_text(self, text: str) -> None:
        write_text(self.path, text, atomic=self.atomic)

    def read_object(self) -> dict:
        data = self.read()
        if not isinstance(data, dict):
            raise StoreError.parse_error(f"{self.name} does not hold a JSON object", self.path)
        return data

    def __repr__(self) -> str:
        return f"JsonDocumentStore({str(self.path)!r})"
