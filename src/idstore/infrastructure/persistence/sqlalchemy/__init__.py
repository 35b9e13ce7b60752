"""SQLAlchemy implementation of idstore persistence.

Provides:
- IdentityBase: Declarative base for identity models
- RoleModel, UserModel, UserRoleModel: table mappings
- RoleStoreSQLAlchemy: RoleStore implementation
- UserStoreSQLAlchemy: implementation of every user store capability
- create_engine, create_session_factory, session_scope,
  enable_sqlite_foreign_keys: session plumbing
"""

from idstore.infrastructure.persistence.sqlalchemy.base import IdentityBase
from idstore.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_factory,
    enable_sqlite_foreign_keys,
    session_scope,
)
from idstore.infrastructure.persistence.sqlalchemy.models import (
    RoleModel,
    UserModel,
    UserRoleModel,
)
from idstore.infrastructure.persistence.sqlalchemy.stores import (
    RoleStoreSQLAlchemy,
    UserStoreSQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "RoleModel",
    "RoleStoreSQLAlchemy",
    "UserModel",
    "UserRoleModel",
    "UserStoreSQLAlchemy",
    "create_engine",
    "create_session_factory",
    "enable_sqlite_foreign_keys",
    "session_scope",
]
