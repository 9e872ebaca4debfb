from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from oeeconfig.core.files import read_text
from oeeconfig.errors import StoreError

logger = logging.getLogger(__name__)


def load_process_order(json_file_path: Path | str) -> Any:
    """Load a process order from a JSON file.

    Relative paths resolve against the current working directory. Nothing
    is cached; every call reads and parses the file again.
    """
    full_path = Path(json_file_path).resolve()
    data = read_text(full_path)
    try:
        order = json.loads(data)
    except ValueError as e:
        raise StoreError.parse_error(f"{full_path.name} contains invalid JSON: {e}", full_path) from e

    logger.debug("Loaded process order from %s", full_path)
    return order


class ProcessOrderLoader:
    def __init__(self, default_path: Path | str):
        self.default_path = Path(default_path)

    def load(self, path: Optional[Path | str] = None) -> Any:
        return load_process_order(path if path is not None else self.default_path)
