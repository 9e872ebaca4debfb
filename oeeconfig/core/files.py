from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from oeeconfig.errors import StoreError

logger = logging.getLogger(__name__)


def read_bytes(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise StoreError.from_os_error(e, path) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def read_text(path: Path) -> str:
    data = read_bytes(path)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise StoreError.parse_error(f"{path.name} is not valid UTF-8", path) from e


def write_bytes(path: Path, data: bytes, atomic: bool = True) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if atomic:
            _atomic_write(path, data)
        else:
            with open(path, "wb") as f:
                f.write(data)
    except OSError as e:
        raise StoreError.from_os_error(e, path) from e

    logger.debug("Wrote %d bytes to %s (atomic=%s)", len(data), path, atomic)


def write_text(path: Path, text: str, atomic: bool = True) -> None:
    write_bytes(path, text.encode("utf-8"), atomic=atomic)


def _atomic_write(path: Path, data: bytes) -> None:
    # unique temp name per writer, so concurrent writes never share a file
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        _copy_mode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def _copy_mode(path: Path, tmp_name: str) -> None:
    try:
        mode = path.stat().st_mode
    except FileNotFoundError:
        return
    os.chmod(tmp_name, mode & 0o7777)
