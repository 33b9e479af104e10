from .config import DynamoDBConfig, ServerConfig

__all__ = [
    "DynamoDBConfig",
    "ServerConfig",
]
