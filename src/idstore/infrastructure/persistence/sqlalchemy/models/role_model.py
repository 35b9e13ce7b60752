"""SQLAlchemy model for roles."""

from sqlalchemy import Index, String, func
from sqlalchemy.orm import Mapped, mapped_column

from idstore.infrastructure.persistence.sqlalchemy.base import (
    ID_LENGTH,
    NAME_LENGTH,
    IdentityBase,
)


class RoleModel(IdentityBase):
    __tablename__ = "roles"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(
        String(NAME_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<RoleModel(id={self.id}, name={self.name})>"


# Role names are unique ignoring case, matching the case-insensitive lookups.
Index("ix_roles_name_lower", func.lower(RoleModel.name), unique=True)
