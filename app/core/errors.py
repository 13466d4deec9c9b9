from typing import Any, Optional


class ApiError(Exception):
    """Error that maps directly onto an error envelope and HTTP status"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error: Optional[str] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error
        self.details = details


class NotFoundError(ApiError):
    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class InternalError(ApiError):
    """Wraps an unexpected failure; the original message is surfaced as `error`"""

    def __init__(self, cause: Exception):
        super().__init__("Internal server error", status_code=500, error=str(cause) or type(cause).__name__)


class ValidationFailedError(ApiError):
    """400 raised by a handler, rendered like a schema validation failure"""

    def __init__(self, field: str, message: str, code: str):
        super().__init__(
            "Validation failed",
            status_code=400,
            details=[{"field": field, "message": message, "code": code}],
        )
