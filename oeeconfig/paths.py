from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]
CONFIG_DIR = BASE_DIR / "config"
DATA_DIR = BASE_DIR / "data"

SETTINGS_PATH = CONFIG_DIR / "settings.json"

ENV_PATH = BASE_DIR / ".env"
OEE_CONFIG_PATH = CONFIG_DIR / "oeeConfig.json"
STRUCTURE_PATH = CONFIG_DIR / "structure.json"
PROCESS_ORDER_PATH = DATA_DIR / "processOrder.json"
