"""User role membership interface."""

from abc import ABC, abstractmethod

from idstore.domain.user import IdentityUser


class UserRoleStore(ABC):
    """Role membership capability of a user store."""

    @abstractmethod
    async def add_to_role(self, user: IdentityUser, role_name: str) -> None:
        """Add a user to a role.

        Parameters
        ----------
        user
            The user to add
        role_name
            Exact name of an existing role

        Raises
        ------
        InvalidOperationError
            If no role has that name
        """

    @abstractmethod
    async def get_roles(self, user: IdentityUser) -> list[str]:
        """Names of the roles referenced by the user's loaded associations."""

    @abstractmethod
    async def is_in_role(self, user: IdentityUser, role_name: str) -> bool:
        """Check whether the user's loaded associations include the role."""

    @abstractmethod
    async def remove_from_role(self, user: IdentityUser, role_name: str) -> None:
        """Remove a role association. Unknown role names are ignored.

        Parameters
        ----------
        user
            The user to remove
        role_name
            Name of the role, matched ignoring case
        """
