from math import nan
from typing import Any, Callable, Dict

from ..language import ValueNode
from ..pyutils import inspect

__all__ = ["value_from_ast_untyped"]


def value_from_ast_untyped(value_node: ValueNode) -> Any:
    """Produce a Python value given a GraphQL Value AST.

    No type is provided. The resulting Python value will reflect the provided
    GraphQL value AST. This is the native value handed over to the ``parse_value``
    function of custom scalars.

    | GraphQL Value        | JSON Value | Python Value |
    | -------------------- | ---------- | ------------ |
    | Input Object         | Object     | dict         |
    | List                 | Array      | list         |
    | Boolean              | Boolean    | bool         |
    | String / Enum        | String     | str          |
    | Int / Float          | Number     | int / float  |
    | Null                 | null       | None         |

    """
    func = _value_from_kind_functions.get(value_node.kind)
    if func:
        return func(value_node)

    # Variables cannot appear in default values and are never converted.
    raise TypeError(f"Unexpected value node: {inspect(value_node)}.")


def value_from_null(_value_node: ValueNode) -> Any:
    return None


def value_from_int(value_node: ValueNode) -> Any:
    try:
        return int(value_node.value)  # type: ignore
    except ValueError:
        return nan


def value_from_float(value_node: ValueNode) -> Any:
    try:
        return float(value_node.value)  # type: ignore
    except ValueError:
        return nan


def value_from_string(value_node: ValueNode) -> Any:
    return value_node.value  # type: ignore


def value_from_list(value_node: ValueNode) -> Any:
    return [value_from_ast_untyped(node) for node in value_node.values]  # type: ignore


def value_from_object(value_node: ValueNode) -> Any:
    return {
        field.name.value: value_from_ast_untyped(field.value)
        for field in value_node.fields  # type: ignore
    }


_value_from_kind_functions: Dict[str, Callable[[ValueNode], Any]] = {
    "null_value": value_from_null,
    "int_value": value_from_int,
    "float_value": value_from_float,
    "string_value": value_from_string,
    "enum_value": value_from_string,
    "boolean_value": value_from_string,
    "list_value": value_from_list,
    "object_value": value_from_object,
}
