import json
from pathlib import Path

from oeeconfig.config.config_loader import SETTINGS_DEFAULTS, deep_update, load_settings
from oeeconfig.config.store_config import StoreConfig


def test_deep_update_merges_nested_dicts():
    base = {"paths": {"env": ".env", "structure": "s.json"}, "debug": {"logs": False}}
    deep_update(base, {"paths": {"env": "/etc/oee/.env"}, "debug": {"logs": True}})
    assert base == {"paths": {"env": "/etc/oee/.env", "structure": "s.json"}, "debug": {"logs": True}}


def test_load_settings_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "settings.json") == SETTINGS_DEFAULTS


def test_load_settings_merges_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"server": {"port": 8080}}), encoding="utf-8")

    cfg = load_settings(path)
    assert cfg["server"] == {"host": "0.0.0.0", "port": 8080}
    assert cfg["paths"] == SETTINGS_DEFAULTS["paths"]


def test_load_settings_malformed_file_gives_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{oops", encoding="utf-8")

    assert load_settings(path) == SETTINGS_DEFAULTS
    assert "using defaults" in caplog.text


def test_load_settings_does_not_mutate_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"storage": {"json_indent": 4}}), encoding="utf-8")
    load_settings(path)
    assert SETTINGS_DEFAULTS["storage"]["json_indent"] == 2


def test_from_config_resolves_relative_paths(tmp_path):
    config = StoreConfig.from_config(SETTINGS_DEFAULTS, base_dir=tmp_path)

    assert config.env_path == tmp_path / ".env"
    assert config.oee_config_path == tmp_path / "config" / "oeeConfig.json"
    assert config.structure_path == tmp_path / "config" / "structure.json"
    assert config.process_order_path == tmp_path / "data" / "processOrder.json"
    assert config.json_indent == 2
    assert config.atomic_writes is True
    assert config.port == 3000


def test_from_config_keeps_absolute_paths(tmp_path):
    cfg = {"paths": {"env": str(tmp_path / "elsewhere" / ".env")}}
    config = StoreConfig.from_config(cfg, base_dir=Path("/opt/oee"))
    assert config.env_path == tmp_path / "elsewhere" / ".env"


def test_from_env_reads_settings_file_and_overrides(tmp_path):
    settings = tmp_path / "settings.json"
    settings.write_text(
        json.dumps({"paths": {"structure": "plant/structure.json"}, "debug": {"logs": True}}),
        encoding="utf-8",
    )
    environ = {
        "OEE_SETTINGS_PATH": str(settings),
        "OEE_ENV_PATH": "secrets/.env",
        "OEE_ATOMIC_WRITES": "false",
        "PORT": "4000",
    }

    config = StoreConfig.from_env(environ, base_dir=tmp_path)

    assert config.structure_path == tmp_path / "plant" / "structure.json"
    assert config.env_path == tmp_path / "secrets" / ".env"
    assert config.atomic_writes is False
    assert config.debug_logs is True
    assert config.port == 4000


def test_from_env_without_settings(tmp_path):
    environ = {"OEE_SETTINGS_PATH": str(tmp_path / "missing.json")}
    config = StoreConfig.from_env(environ, base_dir=tmp_path)
    assert config == StoreConfig.from_config(SETTINGS_DEFAULTS, base_dir=tmp_path)
