"""
Fortune domain model.

A fortune is a single row of the fortunes table: a caller-assigned integer
``id`` (the table's partition key) and its ``name`` text.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .base import DynamoDBMixin

# Partition key attribute of the fortunes table
FORTUNE_KEY_ATTRIBUTE = 'id'

# Attributes returned by list operations
FORTUNE_PROJECTION: List[str] = ['id', 'name']


def build_fortune_key(fortune_id: int) -> Dict[str, Any]:
    """Build the DynamoDB primary key for a fortune.

    A non-integer id here is a programming error, so it raises TypeError
    instead of a domain exception.
    """
    if isinstance(fortune_id, bool) or not isinstance(fortune_id, int):
        raise TypeError(f"Fortune id must be an int, got {type(fortune_id).__name__}")
    return {FORTUNE_KEY_ATTRIBUTE: fortune_id}


class Fortune(DynamoDBMixin, BaseModel):
    """A fortune record."""

    id: int = Field(..., description="Primary key, assigned by the caller")
    name: str = Field(default="", description="The fortune text")

    def key(self) -> Dict[str, Any]:
        """Primary key of this fortune."""
        return build_fortune_key(self.id)
