"""
Pytest configuration for idstore tests.

Re-exports the shared database fixtures and provides store and entity
fixtures built on them.
"""

import pytest

from idstore.infrastructure.persistence.sqlalchemy import (
    RoleStoreSQLAlchemy,
    UserStoreSQLAlchemy,
)
from tests.shared.fixtures.database import (
    db_session,
    pg_engine,
    pg_session,
    postgres_container,
    sqlite_engine,
)
from tests.shared.fixtures.factories import IdentityFactory, SequentialIdProvider

__all__ = [
    "db_session",
    "pg_engine",
    "pg_session",
    "postgres_container",
    "sqlite_engine",
]


@pytest.fixture
def factory() -> IdentityFactory:
    """Entity factory with deterministic ids."""
    return IdentityFactory(SequentialIdProvider())


@pytest.fixture
def role_store(db_session) -> RoleStoreSQLAlchemy:
    return RoleStoreSQLAlchemy(db_session)


@pytest.fixture
def user_store(db_session) -> UserStoreSQLAlchemy:
    return UserStoreSQLAlchemy(db_session)
