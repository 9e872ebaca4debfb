from dataclasses import dataclass

from flask import current_app

from oeeconfig.config.store_config import StoreConfig
from oeeconfig.core.env_store import EnvStore
from oeeconfig.core.json_document import JsonDocumentStore
from oeeconfig.core.oee_config import OeeConfigStore
from oeeconfig.core.process_order import ProcessOrderLoader

EXTENSION_KEY = "oeeconfig"


@dataclass
class Stores:
    config: StoreConfig
    env: EnvStore
    oee_config: OeeConfigStore
    structure: JsonDocumentStore
    process_orders: ProcessOrderLoader

    @staticmethod
    def from_config(config: StoreConfig) -> "Stores":
        return Stores(
            config=config,
            env=EnvStore(config.env_path, atomic=config.atomic_writes),
            oee_config=OeeConfigStore(
                config.oee_config_path,
                indent=config.json_indent,
                atomic=config.atomic_writes,
            ),
            structure=JsonDocumentStore(
                config.structure_path,
                indent=config.json_indent,
                atomic=config.atomic_writes,
            ),
            process_orders=ProcessOrderLoader(config.process_order_path),
        )


def get_stores() -> Stores:
    return current_app.extensions[EXTENSION_KEY]
