"""
Base Model Components

DynamoDBMixin gives any Pydantic model a canonical conversion to and from
DynamoDB items as seen through the boto3 resource API.

boto3 hands back every DynamoDB Number as a ``Decimal``. Integral decimals
are turned back into ``int`` before validation so that models and JSON
responses carry plain integers. Going the other way, ``int`` and ``str``
values need no conversion; floats are rejected by boto3 and are converted
to ``Decimal`` here.
"""

import logging
from decimal import Decimal
from typing import Any, Dict

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class DynamoDBMixin(BaseModel):
    """
    Mixin providing DynamoDB serialization and deserialization functionality.

    Features:
    - Item serialization (to_dynamodb_item), dropping None values
    - Item deserialization (from_dynamodb_item), Decimal -> int/float
    - Recursive nested structure handling
    """

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Convert model to DynamoDB-compatible item.

        Returns:
            DynamoDB-compatible dictionary ready for storage

        Example:
            item = fortune.to_dynamodb_item()
            gateway.put_item(item)
        """
        dumped_item = self.model_dump(exclude_none=True)

        def convert_for_dynamodb(obj):
            if isinstance(obj, dict):
                return {k: convert_for_dynamodb(v) for k, v in obj.items()}
            elif isinstance(obj, list):
                return [convert_for_dynamodb(list_item) for list_item in obj]
            elif isinstance(obj, float):
                return Decimal(str(obj))
            return obj

        return convert_for_dynamodb(dumped_item)

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]):
        """
        Create model instance from DynamoDB item.

        Attributes the model does not declare are ignored.

        Args:
            item: DynamoDB item dictionary as returned by boto3

        Returns:
            Model instance with plain Python types

        Raises:
            ValidationError: If item data is invalid for the model
        """
        try:
            def convert_dynamodb_types(obj):
                if isinstance(obj, dict):
                    return {k: convert_dynamodb_types(v) for k, v in obj.items()}
                elif isinstance(obj, list):
                    return [convert_dynamodb_types(list_item) for list_item in obj]
                elif isinstance(obj, Decimal):
                    return int(obj) if obj == obj.to_integral_value() else float(obj)
                return obj

            converted_item = convert_dynamodb_types(item)
            fields = {k: v for k, v in converted_item.items() if k in cls.model_fields}
            return cls(**fields)

        except Exception as e:
            logger.error(f"Failed to convert DynamoDB item to {cls.__name__}: {e}")
            from ..exceptions import ValidationError
            raise ValidationError(f"Failed to convert DynamoDB item to {cls.__name__}: {e}") from e
