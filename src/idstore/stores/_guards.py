"""Argument checks shared by the store implementations."""

from typing import TypeVar

from idstore.exceptions import InvalidArgumentError

T = TypeVar("T")


def require(value: T | None, argument_name: str) -> T:
    if value is None:
        raise InvalidArgumentError(argument_name)
    return value


def require_text(value: str | None, argument_name: str) -> str:
    if not value:
        raise InvalidArgumentError(argument_name)
    return value
