"""
Error Handlers - HealthOps Tender Scoring
healthops/routers/errors.py

JSON error envelope: {error_code, message, details, timestamp}.
"""
import math
from datetime import datetime, timezone

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from healthops.core.exceptions import InvalidInputException


def _envelope(status_code: int, error_code: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _envelope(
            status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed"
        )
    err = errors[0]
    error_type = err.get("type", "")
    if "json_invalid" in error_type:
        return _envelope(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", "Malformed JSON request body")
    loc = err.get("loc", [])
    field = ".".join(str(l) for l in loc if l != "body")
    return _envelope(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        f"Invalid value for '{field}': {err.get('msg', 'validation failed')}",
        details={"field": field, "type": error_type},
    )


async def invalid_input_exception_handler(request: Request, exc: InvalidInputException):
    value = exc.value
    if isinstance(value, float) and not math.isfinite(value):
        value = str(value)
    elif not isinstance(value, (int, float, str, bool, type(None))):
        value = str(value)
    return _envelope(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "INVALID_INPUT",
        str(exc),
        details={"field": exc.field, "value": value},
    )
