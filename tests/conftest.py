import pytest

from oeeconfig.config.store_config import StoreConfig
from oeeconfig.web.app import create_app


@pytest.fixture
def store_config(tmp_path):
    return StoreConfig(
        env_path=tmp_path / ".env",
        oee_config_path=tmp_path / "config" / "oeeConfig.json",
        structure_path=tmp_path / "config" / "structure.json",
        process_order_path=tmp_path / "data" / "processOrder.json",
    )


@pytest.fixture
def app(store_config):
    return create_app(store_config)


@pytest.fixture
def client(app):
    return app.test_client()
