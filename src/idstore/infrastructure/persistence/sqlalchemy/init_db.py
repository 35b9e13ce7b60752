"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine

# Import models to register with IdentityBase.metadata
import idstore.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from idstore.infrastructure.persistence.sqlalchemy.base import IdentityBase
from idstore.infrastructure.persistence.sqlalchemy.database import create_engine
from idstore.log_config import configure_logging
from idstore_config.settings import get_settings

logger = logging.getLogger(__name__)


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create the identity tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owned = engine is None
    engine = engine or create_engine()
    logger.info("Ensuring identity tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    if owned:
        await engine.dispose()
    logger.info("Identity schema is up to date")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop the identity tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owned = engine is None
    engine = engine or create_engine()
    logger.warning("Dropping identity tables...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.drop_all)

    if owned:
        await engine.dispose()
    logger.info("Identity tables dropped")


def _display_url() -> str:
    database_url = get_settings().database_url
    return database_url.split("@")[-1] if "@" in database_url else database_url


async def _reset_database(force: bool = False) -> None:
    print(f"Database: {_display_url()}")
    print()

    if not force:
        print("WARNING: This will DELETE ALL identity data in the database!")
        print()
        response = input("Type 'yes' to confirm: ")
        if response.lower() != "yes":
            print("Aborted.")
            sys.exit(1)
        print()

    await drop_tables()
    await create_tables()
    logger.info("Identity tables recreated")


def db_init() -> None:
    """Create the identity tables."""
    configure_logging()
    logger.info("Initializing database: %s", _display_url())
    asyncio.run(create_tables())


def db_reset() -> None:
    """Drop and recreate the identity tables."""
    configure_logging()
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_reset_database(force=force))
