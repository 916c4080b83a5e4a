"""Assertions for naming conventions"""

import re

from ..error import GraphQLError

__all__ = ["assert_name", "assert_enum_value_name"]

_name_start = re.compile(r"[_a-zA-Z]")
_name_continue = re.compile(r"[_a-zA-Z0-9]*")


def assert_name(name: str) -> str:
    """Uphold the GraphQL naming rules."""
    if name is None:
        raise TypeError("Must provide name.")
    if not isinstance(name, str):
        raise TypeError("Expected name to be a string.")
    if not name:
        raise GraphQLError("Expected name to be a non-empty string.")
    if not _name_continue.fullmatch(name, 1):
        raise GraphQLError(
            f"Names must only contain [_a-zA-Z0-9] but {name!r} does not."
        )
    if not _name_start.match(name):
        raise GraphQLError(f"Names must start with [_a-zA-Z] but {name!r} does not.")
    return name


def assert_enum_value_name(name: str) -> str:
    """Uphold the GraphQL naming rules for enum values."""
    assert_name(name)
    if name in {"true", "false", "null"}:
        raise GraphQLError(f"Enum values cannot be named: {name}.")
    return name
