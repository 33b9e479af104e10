"""
Domain-Specific Exceptions for the Fortune API

Every exception here extends FortuneApiError. Backend failures raised by
botocore are re-raised as one of these, so callers never handle ClientError
directly.

Organized by category:
1. Data Validation Errors
2. Resource Not Found Errors
3. Conflict Errors
4. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import FortuneApiError


# =============================================================================
# Data Validation Errors
# =============================================================================

class ValidationError(FortuneApiError):
    """Raised when data validation fails.

    Used for:
    - Stored items that cannot be converted into a Fortune
    - Requests DynamoDB rejects with ValidationException
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {
            'validation_errors': self.errors
        }
        super().__init__(message, original_error, context)


# =============================================================================
# Resource Not Found Errors
# =============================================================================

class ItemNotFoundError(FortuneApiError):
    """Raised when a specific item is not found in DynamoDB."""

    def __init__(self, table_name: str, key: dict, original_error: Optional[Exception] = None):
        """Initialize item not found error.

        Args:
            table_name: Name of the DynamoDB table
            key: The key that was not found
            original_error: The original exception that caused this error
        """
        self.table_name = table_name
        self.key = key
        message = f"Item not found in table '{table_name}' with key: {key}"
        context = {
            'table_name': table_name,
            'key': key
        }
        super().__init__(message, original_error, context)


class NotFoundError(FortuneApiError):
    """Raised when a DynamoDB resource such as a table or index is not found."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_name: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize not found error.

        Args:
            message: Human-readable error message
            resource_type: Type of resource not found (e.g., 'table', 'index')
            resource_name: Name of the resource not found
            original_error: The original exception that caused this error
        """
        self.resource_type = resource_type
        self.resource_name = resource_name
        context = {}
        if resource_type:
            context['resource_type'] = resource_type
        if resource_name:
            context['resource_name'] = resource_name
        super().__init__(message, original_error, context)


# =============================================================================
# Conflict Errors
# =============================================================================

class ConflictError(FortuneApiError):
    """Raised when DynamoDB refuses an operation because of existing state.

    Used for:
    - ResourceInUseException (e.g. creating a table that already exists)
    - ConditionalCheckFailedException
    """

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_id: ID of the conflicting resource
            original_error: The original exception that caused this error
        """
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(FortuneApiError):
    """Raised when connection to DynamoDB fails.

    Used for:
    - Network connectivity issues
    - Authentication/authorization failures
    - Invalid endpoint configurations
    - Unknown backend error codes
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(FortuneApiError):
    """Raised when an operation fails for a temporary reason such as throttling.

    Nothing in this package retries on it; botocore's own retry budget has
    already been spent by the time it is raised.
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            retry_after_seconds: Suggested retry delay in seconds
            original_error: The original exception that caused this error
        """
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)


class TableNotReadyError(FortuneApiError):
    """Raised when a newly created table does not become active in time."""

    def __init__(self, table_name: str, timeout_seconds: int, original_error: Optional[Exception] = None):
        self.table_name = table_name
        self.timeout_seconds = timeout_seconds
        message = f"Table '{table_name}' did not become active within {timeout_seconds} seconds"
        context = {
            'table_name': table_name,
            'timeout_seconds': timeout_seconds
        }
        super().__init__(message, original_error, context)
