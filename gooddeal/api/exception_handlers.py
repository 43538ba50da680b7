"""
Exception handlers for FastAPI application.

Every error leaves the API with the same body:
{"success": false, "error": <code>, "message": <text>, "details": {...}, "status_code": <int>}
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from gooddeal.core.domain import AuthenticationException, DomainException

logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "AUTHENTICATION_ERROR",
    403: "AUTHORIZATION_ERROR",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    500: "SERVER_ERROR",
}


def error_body(code: str, message: str, status_code: int, details: dict[str, Any] | None = None) -> dict[str, Any]:
    return {
        "success": False,
        "error": code,
        "message": message,
        "details": details or {},
        "status_code": status_code,
    }


def _field_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate domain exceptions using their own status code."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationException) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, StarletteHTTPException) else HTTPException(status_code=500, detail=str(exc))
    code = HTTP_ERROR_CODES.get(http_exc.status_code, "HTTP_ERROR")
    return JSONResponse(
        status_code=http_exc.status_code,
        content=error_body(code, str(http_exc.detail), http_exc.status_code),
        headers=getattr(http_exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with detailed error messages."""
    if not isinstance(exc, RequestValidationError):
        return await global_exception_handler(request, exc)

    errors = _field_errors(list(exc.errors()))
    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", "Validation error", status.HTTP_400_BAD_REQUEST, {"errors": errors}),
    )


async def pydantic_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle Pydantic validation errors."""
    if not isinstance(exc, ValidationError):
        return await global_exception_handler(request, exc)

    errors = _field_errors(list(exc.errors()))
    logger.warning(f"Pydantic validation error: {errors}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            "VALIDATION_ERROR", "Data validation error", status.HTTP_400_BAD_REQUEST, {"errors": errors}
        ),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("SERVER_ERROR", "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
