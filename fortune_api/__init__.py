from .config import DynamoDBConfig, ServerConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    FortuneApiError,
    ItemNotFoundError,
    NotFoundError,
    RetryableError,
    TableNotReadyError,
    ValidationError,
)
from .models import (
    Fortune,
    build_fortune_key,
)
from .core import (
    TableGateway,
    create_table_gateway,
)
from .handlers import (
    FortuneReadApi,
    FortuneWriteApi,
)
from .api import create_app

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",
    "ServerConfig",

    # Exceptions
    "ConflictError",
    "ConnectionError",
    "FortuneApiError",
    "ItemNotFoundError",
    "NotFoundError",
    "RetryableError",
    "TableNotReadyError",
    "ValidationError",

    # Models
    "Fortune",
    "build_fortune_key",

    # TableGateway architecture
    "TableGateway",
    "create_table_gateway",

    # Read/write APIs
    "FortuneReadApi",
    "FortuneWriteApi",

    # HTTP
    "create_app",
]
