"""SQLAlchemy model for users."""

from sqlalchemy import Boolean, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from idstore.infrastructure.persistence.sqlalchemy.base import (
    ID_LENGTH,
    NAME_LENGTH,
    IdentityBase,
)


class UserModel(IdentityBase):
    """SQLAlchemy model for persisting users.

    Role memberships live in the user_roles table and are loaded by the
    store explicitly; there is no ORM relationship to lazy-load.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    user_name: Mapped[str] = mapped_column(
        String(NAME_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    security_stamp: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(
        String(NAME_LENGTH),
        nullable=True,
        index=True,
    )
    email_confirmed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    access_failed_count: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, user_name={self.user_name})>"


Index("ix_users_user_name_lower", func.lower(UserModel.user_name), unique=True)
