"""
Core infrastructure components for DynamoDB operations.

- TableGateway: Thin wrapper over boto3 DynamoDB operations
- Factory function for creating gateways
"""

from .table_gateway import TableGateway, create_table_gateway, map_botocore_error, map_dynamodb_error

__all__ = [
    "TableGateway",
    "create_table_gateway",
    "map_botocore_error",
    "map_dynamodb_error",
]
