# Base exception class
from .base import FortuneApiError

from .domain_exceptions import (
    ValidationError,
    ItemNotFoundError,
    NotFoundError,
    ConflictError,
    ConnectionError,
    RetryableError,
    TableNotReadyError,
)

__all__ = [
    # Base exception
    "FortuneApiError",

    # Domain exceptions (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "ItemNotFoundError",
    "NotFoundError",
    "RetryableError",
    "TableNotReadyError",
    "ValidationError",
]
