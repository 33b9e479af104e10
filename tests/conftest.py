"""
Test configuration and fixtures for the Fortune API.

Provides common fixtures for testing the gateway, the read/write APIs and
the HTTP application against an in-memory DynamoDB (moto).
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import fortune_api
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from fortune_api import (
    DynamoDBConfig,
    FortuneReadApi,
    FortuneWriteApi,
    ServerConfig,
    TableGateway,
)

TABLE_NAME = 'fortune-of-the-day'
ALLOWED_ORIGIN = 'https://fortune.example.com'


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Fake credentials so nothing can reach a real AWS account."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')
    monkeypatch.delenv('DYNAMODB_ENDPOINT_URL', raising=False)
    monkeypatch.delenv('DYNAMODB_TABLE_PREFIX', raising=False)


@pytest.fixture
def mock_dynamodb_config():
    """DynamoDB configuration for mocked testing."""
    return DynamoDBConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        table_prefix="",
        table_wait_delay_seconds=1,
        table_wait_timeout_seconds=5
    )


@pytest.fixture
def server_config():
    """Server configuration with a test origin."""
    return ServerConfig(
        host="127.0.0.1",
        port=5000,
        allowed_origin=ALLOWED_ORIGIN,
        table_name=TABLE_NAME
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def fortune_table(mock_dynamodb_resource):
    """Create the fortunes table for testing."""
    table = mock_dynamodb_resource.create_table(
        TableName=TABLE_NAME,
        KeySchema=[
            {'AttributeName': 'id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'id', 'AttributeType': 'N'}
        ],
        BillingMode='PROVISIONED',
        ProvisionedThroughput={'ReadCapacityUnits': 5, 'WriteCapacityUnits': 5}
    )
    return table


@pytest.fixture
def table_gateway(mock_dynamodb_config, mock_dynamodb_resource):
    """Gateway bound to the mocked fortunes table (table not created)."""
    return TableGateway(mock_dynamodb_config, TABLE_NAME)


@pytest.fixture
def fortune_read_api(table_gateway, fortune_table):
    """Fortune read API with mocked DynamoDB."""
    return FortuneReadApi(table_gateway)


@pytest.fixture
def fortune_write_api(table_gateway, fortune_table):
    """Fortune write API with mocked DynamoDB."""
    return FortuneWriteApi(table_gateway)

