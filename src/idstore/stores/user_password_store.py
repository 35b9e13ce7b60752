from abc import ABC, abstractmethod
from typing import Optional

from idstore.domain.user import IdentityUser


class UserPasswordStore(ABC):
    """Password hash capability of a user store.

    Setting a hash only changes the entity; persist it with ``update``.
    """

    @abstractmethod
    async def get_password_hash(self, user: IdentityUser) -> Optional[str]:
        """Return the stored password hash."""

    @abstractmethod
    async def has_password(self, user: IdentityUser) -> bool:
        """Check whether a non-empty password hash is set."""

    @abstractmethod
    async def set_password_hash(self, user: IdentityUser, password_hash: str) -> None:
        """Set the password hash on the entity."""
