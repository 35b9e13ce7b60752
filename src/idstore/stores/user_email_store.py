"""User email interface."""

from abc import ABC, abstractmethod
from typing import Optional

from idstore.domain.user import IdentityUser


class UserEmailStore(ABC):
    """Email capability of a user store."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[IdentityUser]:
        """Find a user by email address, ignoring case."""

    @abstractmethod
    async def get_email(self, user: IdentityUser) -> Optional[str]:
        """Return the user's email address."""

    @abstractmethod
    async def get_email_confirmed(self, user: IdentityUser) -> bool:
        """Return whether the user's email address has been confirmed."""

    @abstractmethod
    async def set_email(self, user: IdentityUser, email: str) -> None:
        """Set the email address on the entity (persist with ``update``)."""

    @abstractmethod
    async def set_email_confirmed(self, user: IdentityUser, confirmed: bool) -> None:
        """Set the confirmation flag on the entity (persist with ``update``)."""
