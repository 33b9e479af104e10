"""
Thin DynamoDB Table Gateway

This module owns the one boto3 DynamoDB handle the service uses and exposes
the handful of table operations the fortune handlers are built from:

- Table provisioning: existence check, creation and wait-until-active
- Item operations: get, put and delete by primary key
- Scan as a raw pass-through

The gateway does not know what a Fortune is. It moves plain item
dictionaries and maps every botocore failure to a domain exception, so
the read/write handlers above it stay free of boto3 error handling.

A single gateway instance is created at startup and handed to every handler
that needs it. boto3 resources pool their own connections, so the instance
can be shared across request threads.
"""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from ..config import DynamoDBConfig
from ..exceptions import (
    ConnectionError,
    ConflictError,
    NotFoundError,
    RetryableError,
    TableNotReadyError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Fixed schema of the fortunes table
KEY_SCHEMA = [{'AttributeName': 'id', 'KeyType': 'HASH'}]
ATTRIBUTE_DEFINITIONS = [{'AttributeName': 'id', 'AttributeType': 'N'}]
PROVISIONED_THROUGHPUT = {'ReadCapacityUnits': 5, 'WriteCapacityUnits': 5}


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map DynamoDB ClientError to domain-specific exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "GetItem", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional resource identifier for context

    Returns:
        Appropriate domain exception
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error']['Message']

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code in ['ResourceNotFoundException', 'TableNotFoundException']:
        return NotFoundError(
            f"Table not found - {full_message}",
            resource_type='table',
            resource_name=table_name,
            original_error=error
        )

    elif error_code == 'ValidationException':
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code == 'ConditionalCheckFailedException':
        return ConflictError(f"Conditional check failed - {full_message}", resource_id, original_error=error)

    elif error_code in ['ResourceInUseException', 'TableAlreadyExistsException']:
        return ConflictError(f"Resource in use - {full_message}", resource_id, original_error=error)

    elif error_code == 'LimitExceededException':
        return ValidationError(f"DynamoDB limit exceeded - {full_message}", original_error=error)

    elif error_code in [
        'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
        'ThrottlingException', 'TooManyRequestsException'
    ]:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in [
        'InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException',
        'RequestTimeoutException'
    ]:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in [
        'UnrecognizedClientException', 'AccessDeniedException',
        'ExpiredTokenException', 'InvalidSignatureException', 'IncompleteSignatureException'
    ]:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


def map_botocore_error(error: BotoCoreError, operation: str, table_name: str) -> ConnectionError:
    """Map a client-side botocore failure (no response from DynamoDB) to ConnectionError.

    Covers unreachable endpoints, timeouts and missing credentials, none of
    which carry a DynamoDB error code.
    """
    return ConnectionError(
        f"{operation} on {table_name} failed before DynamoDB answered: {error}",
        original_error=error,
        context={'error_type': type(error).__name__}
    )


class TableGateway:
    """
    Thin gateway for a single DynamoDB table.

    Args:
        config: DynamoDB configuration
        table_name: Name of the DynamoDB table
        dynamodb: Optional pre-built boto3 DynamoDB resource
    """

    def __init__(self, config: DynamoDBConfig, table_name: str, dynamodb=None):
        self.config = config
        self.table_name = table_name
        self._dynamodb = dynamodb
        self._table = None

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    region_name=self.config.region_name
                )

                dynamodb_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                boto_config = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                dynamodb_config['config'] = boto_config

                self._dynamodb = session.resource('dynamodb', **dynamodb_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e
        return self._dynamodb

    @property
    def client(self):
        """Low-level client behind the resource, used for table management."""
        return self.dynamodb.meta.client

    @property
    def table(self):
        """boto3 DynamoDB Table resource for item operations."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise ConnectionError(f"Failed to access table '{self.table_name}': {e}", e) from e
        return self._table

    def table_exists(self) -> bool:
        """
        Check whether the table exists.

        DynamoDB Operation: DescribeTable

        Returns:
            True if the table exists, False if DynamoDB reports it missing

        Raises:
            FortuneApiError: Any other backend failure, mapped by map_dynamodb_error
        """
        try:
            self.client.describe_table(TableName=self.table_name)
        except ClientError as e:
            if e.response['Error']['Code'] == 'ResourceNotFoundException':
                logger.info(f"Table {self.table_name} does not exist.")
                return False
            logger.error(f"Couldn't determine existence of table {self.table_name}: {e}")
            raise map_dynamodb_error(e, "DescribeTable", self.table_name) from e
        except BotoCoreError as e:
            logger.error(f"Couldn't reach DynamoDB to describe {self.table_name}: {e}")
            raise map_botocore_error(e, "DescribeTable", self.table_name) from e
        return True

    def create_table(self) -> Dict[str, Any]:
        """
        Create the table and block until it is active.

        DynamoDB Operation: CreateTable, then DescribeTable polling via the
        boto3 ``table_exists`` waiter. The schema is fixed: a numeric hash
        key ``id`` with 5 read / 5 write provisioned capacity units.

        Returns:
            The TableDescription returned by CreateTable

        Raises:
            ConflictError: The table already exists
            TableNotReadyError: The table did not become active in time
        """
        try:
            response = self.client.create_table(
                TableName=self.table_name,
                KeySchema=KEY_SCHEMA,
                AttributeDefinitions=ATTRIBUTE_DEFINITIONS,
                ProvisionedThroughput=PROVISIONED_THROUGHPUT
            )
        except ClientError as e:
            logger.error(f"Couldn't create table {self.table_name}: {e}")
            raise map_dynamodb_error(e, "CreateTable", self.table_name) from e
        except BotoCoreError as e:
            logger.error(f"Couldn't reach DynamoDB to create {self.table_name}: {e}")
            raise map_botocore_error(e, "CreateTable", self.table_name) from e

        logger.info(
            f"Waiting up to {self.config.table_wait_timeout_seconds}s for table {self.table_name} to become active"
        )
        try:
            waiter = self.client.get_waiter('table_exists')
            waiter.wait(
                TableName=self.table_name,
                WaiterConfig={
                    'Delay': self.config.table_wait_delay_seconds,
                    'MaxAttempts': self.config.table_wait_max_attempts
                }
            )
        except WaiterError as e:
            logger.error(f"Wait for table {self.table_name} to exist failed: {e}")
            raise TableNotReadyError(self.table_name, self.config.table_wait_timeout_seconds, e) from e
        except BotoCoreError as e:
            logger.error(f"Couldn't reach DynamoDB while waiting for {self.table_name}: {e}")
            raise map_botocore_error(e, "DescribeTable", self.table_name) from e

        logger.info(f"Created table {self.table_name}")
        return response['TableDescription']

    def get_item(self, key: Dict[str, Any], **kwargs) -> Optional[Dict[str, Any]]:
        """
        Fetch one item by primary key.

        Args:
            key: Primary key of the item
            **kwargs: Extra boto3 get_item parameters (e.g. ProjectionExpression)

        Returns:
            The item, or None when no item exists for the key
        """
        try:
            response = self.table.get_item(Key=key, **kwargs)
        except ClientError as e:
            logger.error(f"Couldn't get item {key} from {self.table_name}: {e}")
            raise map_dynamodb_error(e, "GetItem", self.table_name, str(key)) from e
        except BotoCoreError as e:
            logger.error(f"Couldn't reach DynamoDB to get item {key} from {self.table_name}: {e}")
            raise map_botocore_error(e, "GetItem", self.table_name) from e
        return response.get('Item')

    def put_item(self, item: Dict[str, Any]) -> None:
        """
        Put item into DynamoDB table.

        Unconditional: an existing item with the same key is replaced.

        Args:
            item: Item to store
        """
        try:
            self.table.put_item(Item=item)
            logger.info(f"Put item in {self.table_name}: {item}")
        except ClientError as e:
            logger.error(f"Couldn't add item to {self.table_name}: {e}")
            raise map_dynamodb_error(e, "PutItem", self.table_name, str(item.get('id'))) from e
        except BotoCoreError as e:
            logger.error(f"Couldn't reach DynamoDB to add item to {self.table_name}: {e}")
            raise map_botocore_error(e, "PutItem", self.table_name) from e

    def delete_item(self, key: Dict[str, Any]) -> None:
        """
        Delete item from DynamoDB table.

        Deleting a key that does not exist succeeds silently.

        Args:
            key: Primary key of item to delete
        """
        try:
            self.table.delete_item(Key=key)
            logger.info(f"Deleted item from {self.table_name}: {key}")
        except ClientError as e:
            logger.error(f"Couldn't delete {key} from {self.table_name}: {e}")
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, str(key)) from e
        except BotoCoreError as e:
            logger.error(f"Couldn't reach DynamoDB to delete {key} from {self.table_name}: {e}")
            raise map_botocore_error(e, "DeleteItem", self.table_name) from e

    def scan(self, **kwargs) -> Dict[str, Any]:
        """
        Execute DynamoDB Scan operation.

        Raw pass-through to boto3 with error handling. Returns one page only.

        Args:
            **kwargs: All boto3 scan parameters

        Returns:
            Raw DynamoDB response
        """
        if 'ProjectionExpression' not in kwargs:
            logger.warning(f"Scan on {self.table_name} without ProjectionExpression - consider adding one")
        try:
            return self.table.scan(**kwargs)
        except ClientError as e:
            logger.error(f"Couldn't scan {self.table_name}: {e}")
            raise map_dynamodb_error(e, "Scan", self.table_name) from e
        except BotoCoreError as e:
            logger.error(f"Couldn't reach DynamoDB to scan {self.table_name}: {e}")
            raise map_botocore_error(e, "Scan", self.table_name) from e


def create_table_gateway(config: DynamoDBConfig, table_name: str) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: DynamoDB configuration
        table_name: Base table name, prefixed via config.get_table_name()

    Returns:
        Configured TableGateway instance
    """
    full_table_name = config.get_table_name(table_name)
    return TableGateway(config, full_table_name)
