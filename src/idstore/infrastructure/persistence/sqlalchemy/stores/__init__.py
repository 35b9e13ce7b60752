# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy store implementations."""

from idstore.infrastructure.persistence.sqlalchemy.stores.role_store import (
    RoleStoreSQLAlchemy,
)
from idstore.infrastructure.persistence.sqlalchemy.stores.user_store import (
    UserStoreSQLAlchemy,
)

__all__ = [
    "RoleStoreSQLAlchemy",
    "UserStoreSQLAlchemy",
]
