"""Role store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from idstore.domain.role import IdentityRole


class RoleStore(ABC):
    """Persistence contract for roles."""

    @abstractmethod
    async def create(self, role: IdentityRole) -> None:
        """Insert a new role."""

    @abstractmethod
    async def delete(self, role: IdentityRole) -> None:
        """Remove an existing role."""

    @abstractmethod
    async def find_by_id(self, role_id: str) -> Optional[IdentityRole]:
        """Find a role by id, ignoring case. None when there is no match."""

    @abstractmethod
    async def find_by_name(self, role_name: str) -> Optional[IdentityRole]:
        """Find a role by name, ignoring case. None when there is no match."""

    @abstractmethod
    async def update(self, role: IdentityRole) -> None:
        """Write the role's current field values to its existing row."""

    @abstractmethod
    def dispose(self) -> None:
        """Release the store's reference to its database session."""
