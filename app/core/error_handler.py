"""
Error handlers
Render application, validation, storage and unexpected errors as JSON error bodies.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.core.exceptions import AppException, BadRequestException, InternalServerException
from app.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def _render(exc: AppException) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=exc.error_code or "ERROR", message=str(exc.detail)),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=exc.headers,
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Collapse pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path"))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return _render(exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _render(BadRequestException(_describe_validation_error(exc)))


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception(f"Storage failure on {request.method} {request.url.path}")
    detail = f"Storage failure: {exc}" if settings.debug else "Internal server error"
    return _render(InternalServerException(detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    detail = f"Unexpected error: {exc}" if settings.debug else "Internal server error"
    return _render(InternalServerException(detail))


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
