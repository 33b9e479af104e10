"""
Process entry point.

Startup runs strictly in order and stops the process on the first fatal
failure:

1. Load configuration from the environment (and .env)
2. Build the shared TableGateway and the read API on top of it
3. Make sure the fortunes table exists, creating it if missing
4. Serve HTTP with uvicorn until the process is stopped

Usage:
    python -m fortune_api
"""

import logging
import sys

import uvicorn

from .api import create_app
from .config import DynamoDBConfig, ServerConfig
from .core import TableGateway, create_table_gateway
from .exceptions import FortuneApiError
from .handlers import FortuneReadApi

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def ensure_table(gateway: TableGateway) -> bool:
    """
    Create the fortunes table unless it already exists.

    Returns:
        True if the table was created, False if it already existed

    Raises:
        FortuneApiError: The existence check or the creation failed
    """
    if gateway.table_exists():
        logger.info(f"Table '{gateway.table_name}' found")
        return False

    logger.info(f"Table '{gateway.table_name}' not found. Creating a new one...")
    gateway.create_table()
    return True


def main() -> None:
    try:
        dynamodb_config = DynamoDBConfig.from_env()
        server_config = ServerConfig.from_env()
    except ValueError as e:
        configure_logging()
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(dynamodb_config.enable_debug_logging)

    gateway = create_table_gateway(dynamodb_config, server_config.table_name)

    try:
        ensure_table(gateway)
    except FortuneApiError as e:
        logger.critical(f"Couldn't provision table '{gateway.table_name}': {e}")
        sys.exit(1)

    app = create_app(FortuneReadApi(gateway), server_config)

    logger.info(f"Starting Fortune API on {server_config.host}:{server_config.port}")
    uvicorn.run(app, host=server_config.host, port=server_config.port)


if __name__ == "__main__":
    main()
