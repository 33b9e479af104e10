from typing import Any, Dict, Optional


class FortuneApiError(Exception):
    """Root of every error the gateway, handlers and bootstrap raise.

    The HTTP layer catches this type alone: any FortuneApiError from a lookup
    becomes a 404 and any from a scan becomes an empty list. The botocore
    exception that triggered it, if any, is kept on ``original_error``.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.original_error = original_error
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} (Context: {details})"
