from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from oeeconfig.core.files import read_bytes, write_bytes
from oeeconfig.errors import ErrorKind, StoreError

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _as_env_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EnvStore:
    """The environment document.

    ``get``/``set`` treat the file as opaque bytes and never parse it; bytes
    that are not UTF-8 survive a round trip through the ``str`` API as
    surrogate escapes. The key/value helpers read it through python-dotenv
    and are only as good as the file's ``KEY=value`` layout.
    """

    def __init__(self, path: Path | str, atomic: bool = True):
        self.path = Path(path)
        self.atomic = atomic

    @property
    def name(self) -> str:
        return self.path.name

    def get_bytes(self) -> bytes:
        return read_bytes(self.path)

    def get(self) -> str:
        return self.get_bytes().decode("utf-8", "surrogateescape")

    def set(self, content: str | bytes) -> None:
        if isinstance(content, str):
            content = content.encode("utf-8", "surrogateescape")
        write_bytes(self.path, content, atomic=self.atomic)
        logger.info("%s replaced (%d bytes)", self.name, len(content))

    # key/value view

    def values(self) -> Dict[str, Optional[str]]:
        text = self.get_bytes().decode("utf-8", "replace")
        return dict(dotenv_values(stream=io.StringIO(text), interpolate=False))

    def get_value(self, key: str) -> Optional[str]:
        values = self.values()
        if key not in values:
            raise StoreError(ErrorKind.NOT_FOUND, f"Key {key} not found", self.path)
        return values[key]

    def set_value(self, key: str, value) -> None:
        self._check_key(key)
        self._rewrite(key, f"{key}={_quote(_as_env_value(value))}\n")
        logger.info("%s: set %s", self.name, key)

    def update(self, mapping: Mapping[str, object]) -> None:
        for key in mapping:
            self._check_key(key)
        for key, value in mapping.items():
            self.set_value(key, value)

    def replace(self, mapping: Mapping[str, object]) -> None:
        for key in mapping:
            self._check_key(key)
        lines = [f"{key}={_quote(_as_env_value(value))}" for key, value in mapping.items()]
        self.set("\n".join(lines) + ("\n" if lines else ""))

    def unset_value(self, key: str) -> None:
        # raises NotFound for a missing file or key before touching anything
        self.get_value(key)
        self._rewrite(key, None)
        logger.info("%s: removed %s", self.name, key)

    def _check_key(self, key: str) -> None:
        if not isinstance(key, str) or not _KEY_RE.fullmatch(key):
            raise StoreError.parse_error(f"Invalid environment key: {key!r}", self.path)

    def _rewrite(self, key: str, line: Optional[str]) -> None:
        """Replace (or drop, when ``line`` is None) the binding for ``key``.

        Every other line, comments and non-UTF-8 bytes included, is written
        back unchanged. A new key is appended at the end.
        """
        try:
            text = self.get()
        except StoreError as e:
            if e.kind is not ErrorKind.NOT_FOUND or line is None:
                raise
            text = ""

        out = []
        replaced = False
        for binding in parse_stream(io.StringIO(text)):
            if binding.key == key:
                if line is not None and not replaced:
                    out.append(line)
                replaced = True
            else:
                out.append(binding.original.string)

        if line is not None and not replaced:
            if out and not out[-1].endswith("\n"):
                out.append("\n")
            out.append(line)

        self.set("".join(out))
