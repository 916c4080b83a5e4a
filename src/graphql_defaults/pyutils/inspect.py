from inspect import (
    isclass,
    ismethod,
    isfunction,
    isgeneratorfunction,
    isgenerator,
    iscoroutinefunction,
    iscoroutine,
)
from typing import Any

from .undefined import Undefined

__all__ = ["inspect"]

max_recursive_depth = 2
max_str_size = 240


def inspect(value: Any) -> str:
    """Inspect value and a return string representation for error messages.

    Used to print values in error messages. We do not use repr() in order to not
    leak too much of the inner Python representation of unknown objects, and we
    do not use json.dumps() because not all objects can be serialized as JSON and
    we want to output strings with single quotes like Python repr() does it.
    """
    return inspect_recursive(value, 0)


def inspect_recursive(value: Any, depth: int) -> str:
    if value is None or value is Undefined or isinstance(value, (bool, float, int)):
        return repr(value)
    if isinstance(value, str):
        return trunc_str(repr(value))
    if depth < max_recursive_depth:
        if isinstance(value, list):
            items = ", ".join(inspect_recursive(item, depth + 1) for item in value)
            return f"[{items}]"
        if isinstance(value, tuple):
            if len(value) == 1:
                return f"({inspect_recursive(value[0], depth + 1)},)"
            items = ", ".join(inspect_recursive(item, depth + 1) for item in value)
            return f"({items})"
        if isinstance(value, dict):
            items = ", ".join(
                f"{inspect_recursive(key, depth + 1)}:"
                f" {inspect_recursive(item, depth + 1)}"
                for key, item in value.items()
            )
            return f"{{{items}}}"
    elif isinstance(value, list):
        return "[...]"
    elif isinstance(value, tuple):
        return "(...)"
    elif isinstance(value, dict):
        return "{...}"
    if isinstance(value, Exception):
        type_ = "exception"
        value = type(value)
    elif isclass(value):
        type_ = "exception class" if issubclass(value, Exception) else "class"
    elif ismethod(value):
        type_ = "method"
    elif iscoroutinefunction(value):
        type_ = "coroutine function"
    elif isgeneratorfunction(value):
        type_ = "generator function"
    elif isfunction(value):
        type_ = "function"
    elif iscoroutine(value):
        type_ = "coroutine"
    elif isgenerator(value):
        type_ = "generator"
    else:
        # stringify (only) the well-known GraphQL types
        from ..type import GraphQLNamedType, GraphQLWrappingType

        if isinstance(value, (GraphQLNamedType, GraphQLWrappingType)):
            return str(value)
        # check if we have a custom inspect method
        try:
            inspect_method = value.__inspect__
            if not callable(inspect_method):
                raise AttributeError
        except AttributeError:
            pass
        else:
            return inspect_method()
        try:
            name = type(value).__name__
            if not name or "<" in name or ">" in name:
                raise AttributeError
        except AttributeError:
            return "<object>"
        else:
            return f"<{name} instance>"
    try:
        name = value.__name__
        if not name or "<" in name or ">" in name:
            raise AttributeError
    except AttributeError:
        return f"<{type_}>"
    else:
        return f"<{type_} {name}>"


def trunc_str(s: str) -> str:
    """Truncate strings to maximum length."""
    if len(s) > max_str_size:
        i = max(0, (max_str_size - 3) // 2)
        j = max(0, max_str_size - 3 - i)
        s = s[:i] + "..." + s[-j:]
    return s
