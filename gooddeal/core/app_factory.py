"""
Application factory for FastAPI.

Handles FastAPI application creation and configuration only.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gooddeal.api.exception_handlers import register_exception_handlers
from gooddeal.api.middleware import RequestLoggingMiddleware
from gooddeal.api.router import api_router
from gooddeal.config.settings import Settings, get_settings
from gooddeal.core.lifecycle import lifespan

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Factory for creating and configuring FastAPI applications.

    Each configuration step is handled by a dedicated method.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize app factory.

        Args:
            settings: Application settings (uses default if not provided)
        """
        self._settings = settings or get_settings()

    def create_app(self) -> FastAPI:
        """
        Create and configure the FastAPI application.

        Returns:
            Configured FastAPI application instance.
        """
        app = self._create_base_app()

        self._configure_middleware(app)
        self._configure_exception_handlers(app)
        self._configure_routes(app)
        self._configure_health_endpoint(app)

        logger.info(f"Application created: {self._settings.PROJECT_NAME}")
        return app

    def _create_base_app(self) -> FastAPI:
        """Create the base FastAPI application with lifespan."""
        return FastAPI(
            title=self._settings.PROJECT_NAME,
            description=self._settings.PROJECT_DESCRIPTION,
            version=self._settings.VERSION,
            docs_url=f"{self._settings.API_PREFIX}/docs" if self._settings.DEBUG else None,
            redoc_url=f"{self._settings.API_PREFIX}/redoc" if self._settings.DEBUG else None,
            lifespan=lifespan,
        )

    def _configure_middleware(self, app: FastAPI) -> None:
        """
        Configure application middleware.

        CORS is added last so it wraps request logging.
        """
        app.add_middleware(RequestLoggingMiddleware)

        origins = self._get_cors_origins()
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=origins != ["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

        logger.info("Middleware configured")

    def _configure_exception_handlers(self, app: FastAPI) -> None:
        """Register exception handlers."""
        register_exception_handlers(app)

    def _configure_routes(self, app: FastAPI) -> None:
        """Configure API routes."""
        app.include_router(api_router, prefix=self._settings.API_PREFIX)
        logger.info("Routes configured")

    def _configure_health_endpoint(self, app: FastAPI) -> None:
        """Add health check endpoint."""

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            """Basic status and environment information."""
            return {
                "status": "ok",
                "environment": self._settings.ENVIRONMENT,
            }

    def _get_cors_origins(self) -> list[str]:
        """Allowed CORS origins; everything in debug mode."""
        if self._settings.DEBUG and not self._settings.cors_origins:
            return ["*"]
        return self._settings.cors_origins


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the application with the given or default settings."""
    return AppFactory(settings).create_app()
