from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from oeeconfig.core.json_document import JsonDocumentStore
from oeeconfig.errors import ErrorKind, StoreError

logger = logging.getLogger(__name__)


class OeeConfigStore:
    """Async access to the OEE configuration document.

    File I/O runs in a worker thread so callers on an event loop are never
    blocked. Every ``set`` replaces the whole document.
    """

    def __init__(self, path: Path | str, indent: int = 2, atomic: bool = True):
        self.document = JsonDocumentStore(path, indent=indent, atomic=atomic)

    @property
    def path(self) -> Path:
        return self.document.path

    @property
    def name(self) -> str:
        return self.document.name

    async def get(self) -> str:
        return await asyncio.to_thread(self.document.read_text)

    async def set(self, data: Any) -> None:
        await asyncio.to_thread(self.document.write, data)
        logger.info("%s replaced", self.name)

    async def get_value(self, key: str) -> Any:
        cfg = await asyncio.to_thread(self.document.read_object)
        if key not in cfg:
            raise StoreError(ErrorKind.NOT_FOUND, f"Key {key} not found", self.path)
        return cfg[key]

    async def put_value(self, key: str, value: Any) -> None:
        cfg = await asyncio.to_thread(self.document.read_object)
        if key not in cfg:
            raise StoreError(ErrorKind.NOT_FOUND, f"Key {key} not found", self.path)
        cfg[key] = value
        await asyncio.to_thread(self.document.write, cfg)
        logger.info("%s: updated %s", self.name, key)

    async def delete_value(self, key: str) -> None:
        cfg = await asyncio.to_thread(self.document.read_object)
        if key not in cfg:
            raise StoreError(ErrorKind.NOT_FOUND, f"Key {key} not found", self.path)
        del cfg[key]
        await asyncio.to_thread(self.document.write, cfg)
        logger.info("%s: deleted %s", self.name, key)
