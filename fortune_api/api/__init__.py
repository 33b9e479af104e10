from .app import create_app, get_fortune_read_api

__all__ = [
    "create_app",
    "get_fortune_read_api",
]
