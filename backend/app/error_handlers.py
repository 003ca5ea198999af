"""
Custom exception handlers for FastAPI.

Error bodies are {"message": ...}, plus a "data" payload for validation failures.

Security:
- Request IDs are logged server-side for tracing but NOT exposed to clients
- Generic error messages for 500 errors to prevent information disclosure
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from accounts.logging import get_logger

from .exceptions import ApiError

logger = get_logger("backend.errors")


def _get_request_id() -> str:
    """
    Get the current request ID from context.

    Used for server-side logging only - NOT exposed to clients.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("request_id", "-")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        request_id = _get_request_id()
        log_method = logger.warning if exc.status_code < 500 else logger.error
        log_method(
            "api_error",
            error_type=type(exc).__name__,
            message=exc.message,
            status_code=exc.status_code,
            request_id=request_id,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        request_id = _get_request_id()
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=request_id,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        request_id = _get_request_id()
        errors = [
            {"field": ".".join(str(part) for part in err["loc"] if part != "body") or None, "message": err["msg"]}
            for err in jsonable_encoder(exc.errors())
        ]
        logger.warning(
            "validation_error",
            errors=errors,
            request_id=request_id,
        )
        # Same 400 shape as store validation failures
        return JSONResponse(
            status_code=400,
            content={
                "message": "La requête est invalide.",
                "data": {"kind": "validation", "errors": errors},
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        request_id = _get_request_id()
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
        )
        return JSONResponse(
            status_code=500,
            content={"message": "Erreur interne du serveur."},
        )
