from typing import Any, Mapping

from ..language.ast import (
    BooleanValueNode,
    FloatValueNode,
    IntValueNode,
    StringValueNode,
    ValueNode,
)
from ..pyutils import Undefined, inspect, is_finite, is_integer
from .definition import GraphQLNamedType, GraphQLScalarType, is_scalar_type

__all__ = [
    "is_specified_scalar_type",
    "specified_scalar_types",
    "GraphQLInt",
    "GraphQLFloat",
    "GraphQLString",
    "GraphQLBoolean",
    "GraphQLID",
    "MAX_INT",
    "MIN_INT",
]


# As per the GraphQL Spec, Integers are only treated as valid when a valid
# 32-bit signed integer, providing the broadest support across platforms.
#
# n.b. Python's integers may be arbitrarily large.
MAX_INT = 2_147_483_647
MIN_INT = -2_147_483_648


def coerce_int(value: Any) -> int:
    if not is_integer(value):
        raise TypeError(f"Int cannot represent non-integer value: {inspect(value)}")
    if not MIN_INT <= value <= MAX_INT:
        raise TypeError(
            f"Int cannot represent non 32-bit signed integer value: {inspect(value)}"
        )
    return int(value)


def parse_int_literal(value_node: ValueNode) -> Any:
    """Parse an integer value node in the AST."""
    if isinstance(value_node, IntValueNode):
        num = int(value_node.value)
        if MIN_INT <= num <= MAX_INT:
            return num
    return Undefined


GraphQLInt = GraphQLScalarType(
    name="Int",
    description="The `Int` scalar type represents"
    " non-fractional signed whole numeric values."
    " Int can represent values between -(2^31) and 2^31 - 1.",
    parse_value=coerce_int,
    parse_literal=parse_int_literal,
)


def coerce_float(value: Any) -> float:
    if not is_finite(value):
        raise TypeError(f"Float cannot represent non numeric value: {inspect(value)}")
    return float(value)


def parse_float_literal(value_node: ValueNode) -> Any:
    """Parse a float value node in the AST."""
    if isinstance(value_node, (FloatValueNode, IntValueNode)):
        return float(value_node.value)
    return Undefined


GraphQLFloat = GraphQLScalarType(
    name="Float",
    description="The `Float` scalar type represents"
    " signed double-precision fractional values"
    " as specified by [IEEE 754]"
    "(https://en.wikipedia.org/wiki/IEEE_floating_point).",
    parse_value=coerce_float,
    parse_literal=parse_float_literal,
)


def coerce_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"String cannot represent a non string value: {inspect(value)}")
    return value


def parse_string_literal(value_node: ValueNode) -> Any:
    """Parse a string value node in the AST."""
    if isinstance(value_node, StringValueNode):
        return value_node.value
    return Undefined


GraphQLString = GraphQLScalarType(
    name="String",
    description="The `String` scalar type represents textual data,"
    " represented as UTF-8 character sequences."
    " The String type is most often used by GraphQL"
    " to represent free-form human-readable text.",
    parse_value=coerce_string,
    parse_literal=parse_string_literal,
)


def coerce_boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(
            f"Boolean cannot represent a non boolean value: {inspect(value)}"
        )
    return value


def parse_boolean_literal(value_node: ValueNode) -> Any:
    """Parse a boolean value node in the AST."""
    if isinstance(value_node, BooleanValueNode):
        return value_node.value
    return Undefined


GraphQLBoolean = GraphQLScalarType(
    name="Boolean",
    description="The `Boolean` scalar type represents `true` or `false`.",
    parse_value=coerce_boolean,
    parse_literal=parse_boolean_literal,
)


def coerce_id(value: Any) -> str:
    if not isinstance(value, str) and not is_integer(value):
        raise TypeError(f"ID cannot represent value: {inspect(value)}")
    if isinstance(value, float):
        value = int(value)
    return str(value)


def parse_id_literal(value_node: ValueNode) -> Any:
    """Parse an ID value node in the AST."""
    if isinstance(value_node, (StringValueNode, IntValueNode)):
        return value_node.value
    return Undefined


GraphQLID = GraphQLScalarType(
    name="ID",
    description="The `ID` scalar type represents a unique identifier,"
    " often used to refetch an object or as key for a cache."
    " The ID type appears in a JSON response as a String; however,"
    " it is not intended to be human-readable. When expected as an"
    ' input type, any string (such as `"4"`) or integer (such as'
    " `4`) input value will be accepted as an ID.",
    parse_value=coerce_id,
    parse_literal=parse_id_literal,
)


specified_scalar_types: Mapping[str, GraphQLNamedType] = {
    type_.name: type_
    for type_ in (
        GraphQLString,
        GraphQLInt,
        GraphQLFloat,
        GraphQLBoolean,
        GraphQLID,
    )
}


def is_specified_scalar_type(type_: Any) -> bool:
    return is_scalar_type(type_) and specified_scalar_types.get(type_.name) is type_
