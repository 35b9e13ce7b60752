"""User entity."""

from idstore.domain.shared.id_provider import IdProvider, get_default_id_provider
from idstore.domain.user.user_role import IdentityUserRole


class IdentityUser:
    """
    User entity holding login identity, credentials and role memberships.

    Attribute changes stay in memory until the user is passed to
    ``UserStore.update``. ``roles`` holds the associations loaded with the
    user; the role-membership operations of the store keep it in sync.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_name: str | None = None,
        id: str | None = None,
        password_hash: str | None = None,
        security_stamp: str | None = None,
        email: str | None = None,
        email_confirmed: bool = False,
        access_failed_count: int = 0,
        roles: list[IdentityUserRole] | None = None,
        id_provider: IdProvider | None = None,
    ):
        provider = id_provider or get_default_id_provider()
        self._id = id or provider.new_id()
        self.user_name = user_name
        self.password_hash = password_hash
        self.security_stamp = security_stamp
        self.email = email
        self.email_confirmed = email_confirmed
        self.access_failed_count = access_failed_count
        self.roles: list[IdentityUserRole] = list(roles) if roles else []

    @property
    def id(self) -> str:
        return self._id

    @property
    def role_ids(self) -> list[str]:
        return [user_role.role_id for user_role in self.roles]

    @classmethod
    def create(
        cls,
        user_name: str,
        email: str | None = None,
        id_provider: IdProvider | None = None,
    ) -> "IdentityUser":
        return cls(user_name=user_name, email=email, id_provider=id_provider)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: str,
        user_name: str,
        password_hash: str | None,
        security_stamp: str | None,
        email: str | None,
        email_confirmed: bool,
        access_failed_count: int,
        roles: list[IdentityUserRole],
    ) -> "IdentityUser":
        return cls(
            id=id,
            user_name=user_name,
            password_hash=password_hash,
            security_stamp=security_stamp,
            email=email,
            email_confirmed=email_confirmed,
            access_failed_count=access_failed_count,
            roles=roles,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityUser):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"IdentityUser(id={self._id}, user_name={self.user_name!r})"
