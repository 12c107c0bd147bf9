"""
Exception handlers mapping domain errors to the response envelope.

ValidationError and request-parsing errors -> 400, NotFoundError -> 404,
ConflictError -> 409, anything else -> 500 with details only in development.
"""

# Standard library imports
import logging
import math
from typing import Any, Dict, List, Optional

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Request locations FastAPI prefixes to parsing error paths
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _json_safe(value: Any) -> Any:
    """Render NaN and Infinity as strings; JSON has no literal for them"""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


def error_response(
    status_code: int,
    message: str,
    errors: Optional[List[Dict[str, Any]]] = None,
) -> JSONResponse:
    content = {"success": False, "message": message, "data": None, "errors": errors}
    return JSONResponse(status_code=status_code, content=_json_safe(jsonable_encoder(content)))


def _request_error_field(location: tuple) -> str:
    parts = [str(part) for part in location if part not in _LOCATION_PREFIXES]
    return ".".join(parts) or "body"


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info(f"Validation failed on {request.method} {request.url.path}: {exc.message}")
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        exc.message,
        [error.to_dict() for error in exc.errors],
    )


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    errors = [
        {
            "field": _request_error_field(tuple(error.get("loc", ()))),
            "message": error.get("msg", "Invalid value"),
            "value": error.get("input"),
        }
        for error in exc.errors()
    ]
    logger.info(f"Malformed request on {request.method} {request.url.path}: {len(errors)} error(s)")
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    logger.info(f"Conflict on {request.method} {request.url.path}: {exc.message}")
    return error_response(status.HTTP_409_CONFLICT, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return error_response(exc.status_code, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    errors = None
    if get_settings().is_development:
        errors = [{"field": type(exc).__name__, "message": str(exc), "value": None}]
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", errors)


def register_exception_handlers(application: FastAPI) -> None:
    """Install every handler on the application"""
    application.add_exception_handler(ValidationError, validation_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
    application.add_exception_handler(NotFoundError, not_found_error_handler)
    application.add_exception_handler(ConflictError, conflict_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
