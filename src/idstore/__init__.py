"""idstore - SQLAlchemy-backed role and user stores for identity management.

This package provides:
- Identity entities (roles, users, user/role associations)
- Storage capability contracts (role store, user store, role membership,
  password hash, security stamp, email)
- SQLAlchemy asyncio implementations of those contracts

Sessions, transactions and password hashing belong to the caller.
"""

from idstore.domain import (
    IdentityRole,
    IdentityUser,
    IdentityUserRole,
    IdProvider,
    UuidIdProvider,
    get_default_id_provider,
    set_default_id_provider,
)
from idstore.exceptions import (
    InvalidArgumentError,
    InvalidOperationError,
    StoreDisposedError,
    StoreError,
)
from idstore.infrastructure.persistence.sqlalchemy import (
    RoleStoreSQLAlchemy,
    UserStoreSQLAlchemy,
)
from idstore.stores import (
    RoleStore,
    UserEmailStore,
    UserPasswordStore,
    UserRoleStore,
    UserSecurityStampStore,
    UserStore,
)

__all__ = [
    # Domain
    "IdProvider",
    "IdentityRole",
    "IdentityUser",
    "IdentityUserRole",
    "UuidIdProvider",
    "get_default_id_provider",
    "set_default_id_provider",
    # Exceptions
    "InvalidArgumentError",
    "InvalidOperationError",
    "StoreDisposedError",
    "StoreError",
    # Contracts
    "RoleStore",
    "UserEmailStore",
    "UserPasswordStore",
    "UserRoleStore",
    "UserSecurityStampStore",
    "UserStore",
    # SQLAlchemy
    "RoleStoreSQLAlchemy",
    "UserStoreSQLAlchemy",
]
