"""Shared pytest fixtures for all test packages."""

from tests.shared.fixtures.database import (
    db_session,
    pg_engine,
    pg_session,
    postgres_container,
    sqlite_engine,
)
from tests.shared.fixtures.factories import IdentityFactory, SequentialIdProvider

__all__ = [
    "IdentityFactory",
    "SequentialIdProvider",
    "db_session",
    "pg_engine",
    "pg_session",
    "postgres_container",
    "sqlite_engine",
]
