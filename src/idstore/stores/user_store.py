"""User store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from idstore.domain.user import IdentityUser


class UserStore(ABC):
    """Persistence contract for users (core CRUD)."""

    @abstractmethod
    async def create(self, user: IdentityUser) -> None:
        """Insert a new user."""

    @abstractmethod
    async def delete(self, user: IdentityUser) -> None:
        """Remove an existing user."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[IdentityUser]:
        """Find a user by id, ignoring case. None when there is no match."""

    @abstractmethod
    async def find_by_name(self, user_name: str) -> Optional[IdentityUser]:
        """Find a user by user name, ignoring case. None when there is no match."""

    @abstractmethod
    async def update(self, user: IdentityUser) -> None:
        """Write the user's current field values to its existing row."""

    @abstractmethod
    def dispose(self) -> None:
        """Release the store's reference to its database session."""
