"""
Domain error taxonomy and the FastAPI handlers that render it.

Services raise these errors; handlers registered on the app turn them (and
request validation / routing errors) into a uniform payload:

    {"timestamp": ..., "status": 404, "error": "Not Found",
     "message": "Job application not found", "path": "/api/v1/applications/7"}
"""

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors reported to the caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    category: str = "Bad Request"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or out-of-policy input."""
    status_code = status.HTTP_400_BAD_REQUEST
    category = "Validation Error"


class UnauthorizedError(AppError):
    """Credential check failed or no usable credential supplied."""
    status_code = status.HTTP_401_UNAUTHORIZED
    category = "Unauthorized"


class ForbiddenError(AppError):
    """Authenticated, but the entity belongs to someone else."""
    status_code = status.HTTP_403_FORBIDDEN
    category = "Forbidden"


class NotFoundError(AppError):
    """Referenced entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    category = "Not Found"


class ConflictError(AppError):
    """Duplicate unique key."""
    status_code = status.HTTP_409_CONFLICT
    category = "Conflict"


def error_payload(status_code: int, category: str, message: str, path: str) -> dict:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": category,
        "message": message,
        "path": path,
    }


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # Drop the "body"/"query" prefix from the location
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning(f"{exc.category} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(exc.status_code, exc.category, exc.message, request.url.path),
        headers={"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _first_validation_message(exc)
    logger.warning(f"Validation Error on {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=ValidationError.status_code,
        content=error_payload(ValidationError.status_code, ValidationError.category, message, request.url.path),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    try:
        category = HTTPStatus(exc.status_code).phrase
    except ValueError:
        category = "Error"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(exc.status_code, category, str(exc.detail), request.url.path),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
