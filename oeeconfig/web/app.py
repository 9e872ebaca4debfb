import logging

from flask import Flask

from oeeconfig.config.store_config import StoreConfig
from .errors import register_error_handlers
from .services.stores import EXTENSION_KEY, Stores
from .routes.env_api import env_bp
from .routes.oee_config_api import oee_config_bp
from .routes.structure_api import structure_bp
from .routes.settings_api import settings_bp


def _configure_logging(debug_logs: bool) -> logging.Logger:
    # configured before Flask creates app.logger, so Flask skips its own default handler
    logger = logging.getLogger("oeeconfig")
    logger.setLevel(logging.DEBUG if debug_logs else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
        logger.addHandler(handler)
    return logger


def create_app(config: StoreConfig | None = None) -> Flask:
    config = config if config is not None else StoreConfig.from_env()
    _configure_logging(config.debug_logs)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = Stores.from_config(config)

    app.register_blueprint(env_bp)
    app.register_blueprint(oee_config_bp)
    app.register_blueprint(structure_bp)
    app.register_blueprint(settings_bp)
    register_error_handlers(app)

    app.logger.debug("Serving %s, %s and %s", config.env_path, config.oee_config_path, config.structure_path)
    return app
