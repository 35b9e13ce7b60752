"""Identifier generation for new roles and users."""

from abc import ABC, abstractmethod
from uuid import uuid4


class IdProvider(ABC):
    """Source of unique string identifiers for new entities."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a new identifier that has not been handed out before."""


class UuidIdProvider(IdProvider):
    """Random UUID4 identifiers in canonical string form."""

    def new_id(self) -> str:
        return str(uuid4())


_default_provider: IdProvider = UuidIdProvider()


def get_default_id_provider() -> IdProvider:
    return _default_provider


def set_default_id_provider(provider: IdProvider | None) -> None:
    """Replace the process-wide provider; None restores UUID generation."""
    global _default_provider  # noqa: PLW0603
    _default_provider = provider or UuidIdProvider()
