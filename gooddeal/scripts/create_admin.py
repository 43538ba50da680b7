#!/usr/bin/env python3
"""
Ensure the admin account from settings exists.

Usage:
    ADMIN_EMAIL=... ADMIN_PASSWORD=... python -m gooddeal.scripts.create_admin [--create-tables]
"""

import argparse
import asyncio
import logging
import sys

from gooddeal.config.settings import get_settings
from gooddeal.core.domain import ValidationException
from gooddeal.database.async_db import dispose_engine, get_async_db_context, init_db
from gooddeal.services import UserService

logger = logging.getLogger(__name__)


async def create_admin(create_tables: bool = False) -> int:
    settings = get_settings()
    if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
        logger.error("ADMIN_EMAIL and ADMIN_PASSWORD must be set")
        return 1

    try:
        if create_tables:
            await init_db()
        async with get_async_db_context() as db:
            user = await UserService(db).ensure_admin(
                settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD, settings.ADMIN_NAME
            )
        print(f"Admin ready: {user.email} (role: {user.role})")
        return 0
    except ValidationException as e:
        logger.error(f"Cannot create admin: {e.message}")
        return 1
    finally:
        await dispose_engine()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    parser = argparse.ArgumentParser(description="Ensure the configured admin account exists")
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first")
    args = parser.parse_args()
    sys.exit(asyncio.run(create_admin(create_tables=args.create_tables)))


if __name__ == "__main__":
    main()
