"""
Handler Layer

Application handlers split into reads (queries.py) and writes (commands.py)
per domain. Handlers build on the core TableGateway and the domain models:

handlers/ (this layer) -> core/ (infrastructure) -> DynamoDB
handlers/ (this layer) <- models/ (domain models)
"""

from .fortunes.queries import FortuneReadApi
from .fortunes.commands import FortuneWriteApi

__all__ = [
    'FortuneReadApi',
    'FortuneWriteApi',
]
