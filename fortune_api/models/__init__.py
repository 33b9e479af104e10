# Base mixins
from .base import DynamoDBMixin

from .fortune import (
    FORTUNE_KEY_ATTRIBUTE,
    FORTUNE_PROJECTION,
    Fortune,
    build_fortune_key,
)

__all__ = [
    "DynamoDBMixin",
    "FORTUNE_KEY_ATTRIBUTE",
    "FORTUNE_PROJECTION",
    "Fortune",
    "build_fortune_key",
]
