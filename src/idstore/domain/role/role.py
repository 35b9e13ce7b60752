"""Role entity."""

from idstore.domain.shared.id_provider import IdProvider, get_default_id_provider


class IdentityRole:
    """
    A named role users can be members of.

    The id is fixed at construction; the name may be changed and written
    back with ``RoleStore.update``.
    """

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        id_provider: IdProvider | None = None,
    ):
        provider = id_provider or get_default_id_provider()
        self._id = id or provider.new_id()
        self.name = name

    @property
    def id(self) -> str:
        return self._id

    @classmethod
    def create(cls, name: str, id_provider: IdProvider | None = None) -> "IdentityRole":
        return cls(name=name, id_provider=id_provider)

    @classmethod
    def reconstitute(cls, id: str, name: str) -> "IdentityRole":
        return cls(name=name, id=id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdentityRole):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"IdentityRole(id={self._id}, name={self.name!r})"
