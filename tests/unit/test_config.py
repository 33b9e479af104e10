import os
from unittest.mock import patch

import pytest

from fortune_api.config import DynamoDBConfig, ServerConfig


class TestDynamoDBConfig:
    """Test cases for DynamoDBConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {"AWS_REGION": "us-west-2"}):
            config = DynamoDBConfig()

            assert config.region_name == "us-west-2"
            assert config.max_pool_connections == 50
            assert config.retries == 3
            assert config.timeout_seconds == 30.0
            assert config.table_wait_delay_seconds == 20
            assert config.table_wait_timeout_seconds == 300

    def test_config_from_env_vars(self):
        """Test configuration from environment variables."""
        env_vars = {
            "AWS_ACCESS_KEY_ID": "test_key",
            "AWS_SECRET_ACCESS_KEY": "test_secret",
            "AWS_REGION": "eu-west-1",
            "DYNAMODB_ENDPOINT_URL": "http://localhost:8000",
            "DYNAMODB_TABLE_PREFIX": "test",
            "DYNAMODB_DEBUG_LOGGING": "true"
        }

        with patch.dict(os.environ, env_vars):
            config = DynamoDBConfig.from_env()

            assert config.aws_access_key_id == "test_key"
            assert config.aws_secret_access_key == "test_secret"
            assert config.region_name == "eu-west-1"
            assert config.endpoint_url == "http://localhost:8000"
            assert config.table_prefix == "test"
            assert config.enable_debug_logging is True

    def test_table_name_generation(self):
        """Test table name generation with prefix."""
        config = DynamoDBConfig(table_prefix="myapp")

        assert config.get_table_name("fortune-of-the-day") == "myapp_fortune-of-the-day"

    def test_table_name_generation_no_prefix(self):
        """Test table name generation without prefix."""
        config = DynamoDBConfig(table_prefix="")

        assert config.get_table_name("fortune-of-the-day") == "fortune-of-the-day"

    def test_wait_attempts_cover_five_minutes(self):
        """Default waiter settings poll for the full five minutes."""
        config = DynamoDBConfig()

        assert config.table_wait_max_attempts == 15
        assert config.table_wait_max_attempts * config.table_wait_delay_seconds >= 300

    def test_wait_attempts_round_up(self):
        config = DynamoDBConfig(table_wait_delay_seconds=7, table_wait_timeout_seconds=20)

        assert config.table_wait_max_attempts == 3

    def test_local_development_config(self):
        """Test local development configuration."""
        config = DynamoDBConfig.for_local_development()

        assert config.aws_access_key_id == "local"
        assert config.aws_secret_access_key == "local"
        assert config.endpoint_url == "http://localhost:8000"
        assert config.enable_debug_logging is True

    def test_region_validation(self):
        """Test region validation."""
        with pytest.raises(ValueError, match="AWS region name is required"):
            DynamoDBConfig(region_name="")

    def test_empty_region_from_env_rejected(self):
        """Environment defaults go through the same validators."""
        with patch.dict(os.environ, {"AWS_REGION": ""}):
            with pytest.raises(ValueError, match="AWS region name is required"):
                DynamoDBConfig.from_env()


class TestServerConfig:
    """Test cases for ServerConfig."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = ServerConfig()

            assert config.host == "0.0.0.0"
            assert config.port == 5000
            assert config.allowed_origin == "https://fortune.lnkphm.online"
            assert config.table_name == "fortune-of-the-day"

    def test_from_env_vars(self):
        env_vars = {
            "FORTUNE_API_HOST": "127.0.0.1",
            "FORTUNE_API_PORT": "8080",
            "FORTUNE_ALLOWED_ORIGIN": "https://example.org",
            "FORTUNE_TABLE_NAME": "fortunes"
        }

        with patch.dict(os.environ, env_vars):
            config = ServerConfig.from_env()

            assert config.host == "127.0.0.1"
            assert config.port == 8080
            assert config.allowed_origin == "https://example.org"
            assert config.table_name == "fortunes"

    def test_port_validation(self):
        with pytest.raises(ValueError, match="Port must be between 1 and 65535"):
            ServerConfig(port=70000)

    def test_empty_origin_rejected(self):
        with pytest.raises(ValueError, match="must not be empty"):
            ServerConfig(allowed_origin="")

    @pytest.mark.parametrize("port", ["0", "65536", "-1", "http"])
    def test_invalid_port_from_env_rejected(self, port):
        with patch.dict(os.environ, {"FORTUNE_API_PORT": port}):
            with pytest.raises(ValueError):
                ServerConfig.from_env()

    def test_empty_origin_from_env_rejected(self):
        with patch.dict(os.environ, {"FORTUNE_ALLOWED_ORIGIN": ""}):
            with pytest.raises(ValueError, match="must not be empty"):
                ServerConfig.from_env()

    def test_empty_table_name_from_env_rejected(self):
        with patch.dict(os.environ, {"FORTUNE_TABLE_NAME": ""}):
            with pytest.raises(ValueError, match="must not be empty"):
                ServerConfig.from_env()
