"""Shared building blocks for identity entities."""

from idstore.domain.shared.id_provider import (
    IdProvider,
    UuidIdProvider,
    get_default_id_provider,
    set_default_id_provider,
)

__all__ = [
    "IdProvider",
    "UuidIdProvider",
    "get_default_id_provider",
    "set_default_id_provider",
]
