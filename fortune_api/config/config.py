import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class DynamoDBConfig(BaseModel):
    """Configuration for DynamoDB connection and table provisioning."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID (falls back to the boto3 credential chain when unset)"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    table_prefix: str = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TABLE_PREFIX", ""),
        description="Prefix to add to all table names"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=50,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of retry attempts botocore makes for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    # Table provisioning
    table_wait_delay_seconds: int = Field(
        default=20,
        ge=1,
        description="Polling interval while waiting for a new table to become active"
    )

    table_wait_timeout_seconds: int = Field(
        default=300,
        ge=1,
        description="Maximum time to wait for a new table to become active"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("DYNAMODB_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @property
    def table_wait_max_attempts(self) -> int:
        """Number of waiter polls that fit in the wait timeout."""
        return max(1, -(-self.table_wait_timeout_seconds // self.table_wait_delay_seconds))

    def get_table_name(self, base_name: str) -> str:
        """Get the full table name with prefix.

        Args:
            base_name: Base table name

        Returns:
            Full table name, prefixed when a prefix is configured
        """
        if self.table_prefix:
            return f"{self.table_prefix}_{base_name}"
        return base_name

    @classmethod
    def from_env(cls) -> 'DynamoDBConfig':
        """Create configuration from environment variables.

        Returns:
            DynamoDBConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls) -> 'DynamoDBConfig':
        """Create configuration for local DynamoDB development.

        Returns:
            DynamoDBConfig instance configured for DynamoDB Local
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            table_wait_delay_seconds=1,
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True,
        validate_default=True
    )


class ServerConfig(BaseModel):
    """Configuration for the HTTP server."""

    host: str = Field(
        default_factory=lambda: os.getenv("FORTUNE_API_HOST", "0.0.0.0"),
        description="Host to bind the API server to"
    )

    port: int = Field(
        default_factory=lambda: os.getenv("FORTUNE_API_PORT", "5000"),
        description="TCP port to listen on"
    )

    allowed_origin: str = Field(
        default_factory=lambda: os.getenv("FORTUNE_ALLOWED_ORIGIN", "https://fortune.lnkphm.online"),
        description="The single origin allowed to call the API from a browser"
    )

    table_name: str = Field(
        default_factory=lambda: os.getenv("FORTUNE_TABLE_NAME", "fortune-of-the-day"),
        description="Base name of the fortunes table"
    )

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        """Validate TCP port range."""
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator('allowed_origin', 'table_name')
    @classmethod
    def validate_not_empty(cls, v):
        """Reject empty strings."""
        if not v:
            raise ValueError("Value must not be empty")
        return v

    @classmethod
    def from_env(cls) -> 'ServerConfig':
        """Create configuration from environment variables."""
        return cls()

    model_config = ConfigDict(
        validate_assignment=True,
        validate_default=True
    )
