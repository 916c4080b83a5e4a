"""Test utilities"""

from .build_ast import (
    document,
    enum_value,
    literal,
    operation,
    type_ref,
    variable,
    variable_ref,
)
from .dairy_registry import (
    complex_input,
    dairy_animal_enum,
    dairy_product_input,
    dairy_registry,
    time_scalar,
)

__all__ = [
    "complex_input",
    "dairy_animal_enum",
    "dairy_product_input",
    "dairy_registry",
    "document",
    "enum_value",
    "literal",
    "operation",
    "time_scalar",
    "type_ref",
    "variable",
    "variable_ref",
]
