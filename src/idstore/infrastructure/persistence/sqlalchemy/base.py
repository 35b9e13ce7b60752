"""SQLAlchemy declarative base for idstore models."""

from sqlalchemy.orm import DeclarativeBase

ID_LENGTH = 128
NAME_LENGTH = 256


class IdentityBase(DeclarativeBase):
    """Base class for all identity models."""
