"""Role entity."""

from idstore.domain.role.role import IdentityRole

__all__ = ["IdentityRole"]
