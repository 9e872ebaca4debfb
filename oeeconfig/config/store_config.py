from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from oeeconfig.paths import BASE_DIR, ENV_PATH, OEE_CONFIG_PATH, STRUCTURE_PATH, PROCESS_ORDER_PATH
from oeeconfig.config.config_loader import load_settings

_TRUE = {"1", "true", "yes", "on"}

# environment variable -> StoreConfig field
_PATH_OVERRIDES = {
    "OEE_ENV_PATH": "env_path",
    "OEE_CONFIG_PATH": "oee_config_path",
    "OEE_STRUCTURE_PATH": "structure_path",
    "OEE_PROCESS_ORDER_PATH": "process_order_path",
}


def _resolve(value, base_dir: Path) -> Path:
    p = Path(value).expanduser()
    if not p.is_absolute():
        p = base_dir / p
    return p


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE


@dataclass(frozen=True)
class StoreConfig:
    env_path: Path = ENV_PATH
    oee_config_path: Path = OEE_CONFIG_PATH
    structure_path: Path = STRUCTURE_PATH
    process_order_path: Path = PROCESS_ORDER_PATH
    json_indent: int = 2
    atomic_writes: bool = True
    debug_logs: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    @staticmethod
    def from_config(cfg: dict, base_dir: Path = BASE_DIR) -> "StoreConfig":
        paths = cfg.get("paths", {})
        storage = cfg.get("storage", {})
        server = cfg.get("server", {})
        debug = cfg.get("debug", {})

        return StoreConfig(
            env_path=_resolve(paths.get("env", ENV_PATH), base_dir),
            oee_config_path=_resolve(paths.get("oee_config", OEE_CONFIG_PATH), base_dir),
            structure_path=_resolve(paths.get("structure", STRUCTURE_PATH), base_dir),
            process_order_path=_resolve(paths.get("process_order", PROCESS_ORDER_PATH), base_dir),
            json_indent=int(storage.get("json_indent", 2)),
            atomic_writes=_as_bool(storage.get("atomic_writes", True)),
            debug_logs=_as_bool(debug.get("logs", False)),
            host=str(server.get("host", "0.0.0.0")),
            port=int(server.get("port", 3000)),
        )

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None, base_dir: Path = BASE_DIR) -> "StoreConfig":
        """Build the config from the settings file, then apply environment overrides.

        ``OEE_SETTINGS_PATH`` picks the settings file. Path overrides are
        resolved against ``base_dir`` like the ones in the file.
        """
        environ = os.environ if environ is None else environ

        cfg = load_settings(environ.get("OEE_SETTINGS_PATH") or None)
        config = StoreConfig.from_config(cfg, base_dir=base_dir)

        overrides = {}
        for var, field_name in _PATH_OVERRIDES.items():
            if environ.get(var):
                overrides[field_name] = _resolve(environ[var], base_dir)

        if environ.get("OEE_ATOMIC_WRITES"):
            overrides["atomic_writes"] = _as_bool(environ["OEE_ATOMIC_WRITES"])
        if environ.get("OEE_DEBUG_LOGS"):
            overrides["debug_logs"] = _as_bool(environ["OEE_DEBUG_LOGS"])
        if environ.get("HOST"):
            overrides["host"] = environ["HOST"]
        if environ.get("PORT"):
            overrides["port"] = int(environ["PORT"])

        return replace(config, **overrides)
