"""Global exception handlers that render every failure as an error envelope.

- ApiError (and subclasses) → envelope with the error's own status
- RequestValidationError → 400 with one entry per violated constraint
- Exception (catch-all) → 500 with the underlying message in `error`
"""

from typing import Any, List, Optional, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from ..logger import get_logger
from ..models.response import ErrorResponse, FieldViolation
from .errors import ApiError

logger = get_logger()

# pydantic error type -> name of the type that was expected
_EXPECTED_TYPES = {
    "string_type": "string",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "dict_type": "object",
    "model_type": "object",
    "model_attributes_type": "object",
}

_LOCATIONS = {"body", "path", "query"}


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def format_validation_errors(errors: Sequence[dict]) -> List[dict]:
    """Flatten pydantic errors into field violations relative to the request part"""
    violations = []
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if loc and loc[0] in _LOCATIONS:
            loc = loc[1:]
        code = err.get("type", "invalid")
        expected: Optional[str] = _EXPECTED_TYPES.get(code)
        received: Optional[str] = None
        if expected is not None:
            received = _type_name(err.get("input"))
        elif code == "missing":
            received = "undefined"
        violation = FieldViolation(
            field=".".join(str(part) for part in loc),
            message=err.get("msg", ""),
            code=code,
            expected=expected,
            received=received,
        )
        violations.append(violation.model_dump(exclude_none=True))
    return violations


def error_response(
    status_code: int,
    message: str,
    error: Optional[str] = None,
    details: Optional[list] = None,
) -> ORJSONResponse:
    body = ErrorResponse(message=message, error=error, details=details)
    return ORJSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.error})")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return error_response(exc.status_code, exc.message, exc.error, exc.details)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = format_validation_errors(exc.errors())
        logger.warning(f"Validation error on {request.method} {request.url.path}: {details}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", details=details)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            error=str(exc) or type(exc).__name__,
        )
