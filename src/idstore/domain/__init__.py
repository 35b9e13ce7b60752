"""Identity entities: roles, users and the user/role association."""

from idstore.domain.role import IdentityRole
from idstore.domain.shared import (
    IdProvider,
    UuidIdProvider,
    get_default_id_provider,
    set_default_id_provider,
)
from idstore.domain.user import IdentityUser, IdentityUserRole

__all__ = [
    "IdProvider",
    "IdentityRole",
    "IdentityUser",
    "IdentityUserRole",
    "UuidIdProvider",
    "get_default_id_provider",
    "set_default_id_provider",
]
