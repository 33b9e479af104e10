"""
Fortune Read API

Point lookups by id and a projected full-table scan. Both sit on a shared
TableGateway; nothing here creates its own DynamoDB handle.
"""

import logging
from typing import List

from ...core import TableGateway
from ...exceptions import ItemNotFoundError
from ...models import FORTUNE_PROJECTION, Fortune, build_fortune_key
from ...utils import build_projection_expression

logger = logging.getLogger(__name__)


class FortuneReadApi:
    """
    Read-only API for fortunes.

    Access patterns:
    - GetItem on the primary key
    - Scan projected to ``id`` and ``name``
    """

    def __init__(self, gateway: TableGateway):
        """Initialize read API with the shared table gateway."""
        self.gateway = gateway
        self.default_projection = FORTUNE_PROJECTION

    def get(self, fortune_id: int) -> Fortune:
        """
        Get a fortune by id.

        DynamoDB Operation: GetItem with primary key

        Args:
            fortune_id: Fortune identifier

        Returns:
            The stored Fortune

        Raises:
            ItemNotFoundError: No fortune is stored under this id
            ValidationError: The stored item is not a valid Fortune
        """
        key = build_fortune_key(fortune_id)
        item = self.gateway.get_item(key)

        if item is None:
            logger.info(f"No fortune with id {fortune_id} in {self.gateway.table_name}")
            raise ItemNotFoundError(self.gateway.table_name, key)

        return Fortune.from_dynamodb_item(item)

    def scan(self) -> List[Fortune]:
        """
        List every fortune in the table.

        DynamoDB Operation: Scan with ProjectionExpression on ``id, name``

        Only the first page DynamoDB returns is used. When the response is
        truncated the result is partial and a warning is logged.

        Returns:
            Fortunes in the order DynamoDB returned them
        """
        proj_expr, expr_names = build_projection_expression(self.default_projection)
        response = self.gateway.scan(
            ProjectionExpression=proj_expr,
            ExpressionAttributeNames=expr_names
        )

        if response.get('LastEvaluatedKey'):
            logger.warning(
                f"Scan of {self.gateway.table_name} was truncated; returning the first page only"
            )

        return [Fortune.from_dynamodb_item(item) for item in response.get('Items', [])]
