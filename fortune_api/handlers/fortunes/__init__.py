"""
Fortune read and write APIs.

Read API:
- Point lookup by id with an explicit not-found signal
- Projected scan of the whole table

Write API:
- Unconditional upsert
- Idempotent delete

Usage:
    gateway = create_table_gateway(config, "fortune-of-the-day")
    read_api = FortuneReadApi(gateway)
    write_api = FortuneWriteApi(gateway)
"""

from .queries import FortuneReadApi
from .commands import FortuneWriteApi

__all__ = [
    "FortuneReadApi",
    "FortuneWriteApi",
]
