"""
Application lifecycle management using the FastAPI lifespan pattern.

Startup optionally creates the schema and bootstraps the admin account;
shutdown disposes the database engine.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gooddeal.config.settings import Settings, get_settings
from gooddeal.database.async_db import dispose_engine, get_async_db_context, init_db
from gooddeal.services import UserService

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._initialized = False

    async def startup(self) -> None:
        """
        Execute startup tasks.

        Called when the application starts.
        """
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        if self._settings.DB_CREATE_TABLES:
            await init_db()

        await self._ensure_admin()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        """
        Execute shutdown tasks.

        Called when the application stops.
        """
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await dispose_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    async def _ensure_admin(self) -> None:
        """Create or promote the bootstrap admin account when configured."""
        if not (self._settings.ADMIN_EMAIL and self._settings.ADMIN_PASSWORD):
            logger.info("ADMIN_EMAIL/ADMIN_PASSWORD not set - skipping admin bootstrap")
            return

        async with get_async_db_context() as db:
            await UserService(db).ensure_admin(
                self._settings.ADMIN_EMAIL,
                self._settings.ADMIN_PASSWORD,
                self._settings.ADMIN_NAME,
            )


# Global lifecycle manager instance
_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()

    await lifecycle.startup()

    yield

    await lifecycle.shutdown()
