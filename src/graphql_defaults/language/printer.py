from json import dumps
from typing import Any, Callable, Dict

from .ast import Node

__all__ = ["print_ast"]


def print_ast(ast: Node) -> str:
    """Convert an AST into a string.

    Only type references and value literals can be printed, which is all that
    is needed to name declared variable types and to describe rejected literals.
    """
    try:
        print_node = _printers[ast.kind]
    except (AttributeError, KeyError):
        raise TypeError(f"Cannot print node: {ast!r}.")
    return print_node(ast)


def print_string(value: str) -> str:
    """Print a string as a GraphQL StringValue literal."""
    return dumps(value, ensure_ascii=False)


_printers: Dict[str, Callable[[Any], str]] = {
    "name": lambda node: node.value,
    "variable": lambda node: f"${node.name.value}",
    "int_value": lambda node: node.value,
    "float_value": lambda node: node.value,
    "string_value": lambda node: print_string(node.value),
    "boolean_value": lambda node: "true" if node.value else "false",
    "null_value": lambda _node: "null",
    "enum_value": lambda node: node.value,
    "list_value": lambda node: f"[{', '.join(map(print_ast, node.values))}]",
    "object_value": lambda node: f"{{{', '.join(map(print_ast, node.fields))}}}",
    "object_field": lambda node: f"{node.name.value}: {print_ast(node.value)}",
    "named_type": lambda node: node.name.value,
    "list_type": lambda node: f"[{print_ast(node.type)}]",
    "non_null_type": lambda node: f"{print_ast(node.type)}!",
}
