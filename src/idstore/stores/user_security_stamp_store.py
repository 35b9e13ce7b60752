from abc import ABC, abstractmethod
from typing import Optional

from idstore.domain.user import IdentityUser


class UserSecurityStampStore(ABC):
    """Security stamp capability of a user store."""

    @abstractmethod
    async def get_security_stamp(self, user: IdentityUser) -> Optional[str]:
        """Return the user's security stamp."""

    @abstractmethod
    async def set_security_stamp(self, user: IdentityUser, stamp: str) -> None:
        """Set the security stamp on the entity (persist with ``update``)."""
