# =============================================
# jobtracker/core/exception_handlers.py
# =============================================
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from sqlalchemy.exc import SQLAlchemyError
import logging

from jobtracker.core.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    format_validation_errors,
)

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def _validation_response(errors) -> JSONResponse:
    summary = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Validation error",
            "error": summary,
            "errors": errors
        }
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Handle missing documents (including malformed ids)"""
    logger.warning(f"Not found: {request.method} {request.url.path} - {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": exc.message}
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle document validation failures"""
    logger.warning(f"Validation error: {request.method} {request.url.path} - {exc.errors}")
    return _validation_response(exc.errors)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request body validation with the same shape as document validation"""
    errors = format_validation_errors(exc.errors())
    logger.warning(f"Invalid request body: {request.method} {request.url.path} - {errors}")
    return _validation_response(errors)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle remaining application exceptions; details stay in the log"""
    logger.error(f"Application error: {exc.message}", extra={
        "path": request.url.path,
        "method": request.method,
        "details": exc.details
    })
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": SERVER_ERROR_MESSAGE}
    )


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle general SQLAlchemy database errors"""
    logger.error(f"Database error: {exc}", extra={
        "path": request.url.path,
        "method": request.method
    })
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": SERVER_ERROR_MESSAGE}
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle FastAPI HTTP exceptions"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions"""
    logger.error(f"Unhandled exception: {exc}", extra={
        "path": request.url.path,
        "method": request.method,
        "exception_type": type(exc).__name__
    }, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": SERVER_ERROR_MESSAGE}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers, most specific first"""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
