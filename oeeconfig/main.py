from oeeconfig.config.store_config import StoreConfig
from oeeconfig.web.app import create_app


def main():
    config = StoreConfig.from_env()
    app = create_app(config)
    app.logger.info("Server is running on port %s", config.port)
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
