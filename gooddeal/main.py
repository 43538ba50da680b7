"""
Application entry point.

Run with: uvicorn gooddeal.main:app
"""

import logging

import sentry_sdk

from gooddeal.config.settings import get_settings
from gooddeal.core.app_factory import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)
settings = get_settings()

if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
    )

app = create_app()

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "gooddeal.main:app",
        host="0.0.0.0",
        port=5000,
        reload=settings.DEBUG,
    )
