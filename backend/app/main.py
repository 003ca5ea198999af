"""
FastAPI application entry point.

Uses structured logging from accounts.logging.
"""

import os

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from accounts.db import db
from accounts.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .config import get_settings
from .error_handlers import register_exception_handlers
from .middleware.request_id import RequestIDMiddleware
from .routers import auth as auth_router
from .routers import users as users_router

settings = get_settings()
log_level = "DEBUG" if settings.debug else "INFO"
configure_logging(level=log_level)
logger = get_logger("api")


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, debug=settings.debug)

    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
            "X-Request-ID",
        ],
    )

    # Request ID must wrap request logging so both log lines carry the same id
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        """Initialize services on startup."""
        env = os.getenv("ENV", "development").lower()
        logger.info("app_startup", app_name=settings.app_name, env=env)

        db.initialize(settings.database_url)
        logger.info("database_initialized")

        if settings.create_tables_on_startup:
            db.create_all_tables()
            logger.info("database_tables_created")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("app_shutdown")

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness check."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """
        Readiness check.

        Returns 200 when the database answers, 503 otherwise.
        """
        result = db.health_check()
        if not result["healthy"]:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready"},
            )
        return {"status": "ready"}

    app.include_router(auth_router.router, prefix=settings.api_prefix)
    app.include_router(users_router.router, prefix=settings.api_prefix)

    return app


app = create_app()
