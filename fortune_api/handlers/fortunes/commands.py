"""
Fortune Write API

The only code path that mutates the fortunes table. Writes are
unconditional: concurrent writers to the same id race and the last write
wins.
"""

import logging

from ...core import TableGateway
from ...models import Fortune

logger = logging.getLogger(__name__)


class FortuneWriteApi:
    """Write-only API for fortunes."""

    def __init__(self, gateway: TableGateway):
        """Initialize write API with the shared table gateway."""
        self.gateway = gateway

    def put(self, fortune: Fortune) -> Fortune:
        """
        Insert or replace a fortune.

        DynamoDB Operation: PutItem without ConditionExpression

        Args:
            fortune: Fortune to store

        Returns:
            The stored Fortune
        """
        self.gateway.put_item(fortune.to_dynamodb_item())
        logger.info(f"Stored fortune {fortune.id}")
        return fortune

    def delete(self, fortune: Fortune) -> None:
        """
        Delete a fortune by its key.

        DynamoDB Operation: DeleteItem

        Deleting a fortune that was never stored is not an error.
        """
        self.gateway.delete_item(fortune.key())
        logger.info(f"Deleted fortune {fortune.id}")
