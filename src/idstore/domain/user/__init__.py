"""User entity and its role associations."""

from idstore.domain.user.user import IdentityUser
from idstore.domain.user.user_role import IdentityUserRole

__all__ = [
    "IdentityUser",
    "IdentityUserRole",
]
