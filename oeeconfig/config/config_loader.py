import json
import logging
from copy import deepcopy
from pathlib import Path

from oeeconfig.paths import SETTINGS_PATH

logger = logging.getLogger(__name__)

SETTINGS_DEFAULTS = {
    "paths": {
        "env": ".env",
        "oee_config": "config/oeeConfig.json",
        "structure": "config/structure.json",
        "process_order": "data/processOrder.json",
    },
    "storage": {
        "json_indent": 2,
        "atomic_writes": True,
    },
    "server": {
        "host": "0.0.0.0",
        "port": 3000,
    },
    "debug": {
        "logs": False,
    },
}


def deep_update(base: dict, updates: dict) -> dict:
    for k, v in updates.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            deep_update(base[k], v)
        else:
            base[k] = v
    return base


def load_settings(path: Path | str | None = None) -> dict:
    path = Path(path) if path is not None else SETTINGS_PATH
    cfg = deepcopy(SETTINGS_DEFAULTS)

    try:
        user_cfg = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return cfg
    except (OSError, ValueError) as e:
        logger.warning("Could not read settings from %s, using defaults: %s", path, e)
        return cfg

    if isinstance(user_cfg, dict):
        deep_update(cfg, user_cfg)
    else:
        logger.warning("Ignoring settings in %s: top level is not an object", path)

    return cfg
