from typing import NamedTuple, Optional, cast

from ..language import (
    EnumValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    ValueNode,
    VariableNode,
    print_ast,
)
from ..pyutils import inspect
from ..type import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLScalarType,
    is_enum_type,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    is_required_input_field,
    is_scalar_type,
)
from .coerce_literal import Rejected, coerce_literal

__all__ = ["InvalidLiteral", "check_literal"]


class InvalidLiteral(NamedTuple):
    """Describes why a literal does not conform to a type.

    The node is the innermost literal that failed the check, the reason describes
    the failure for debugging purposes. A message is only present if a custom
    scalar rejected the literal with its own error message.
    """

    node: ValueNode
    reason: str
    message: Optional[str] = None


def check_literal(
    value_node: ValueNode, type_: GraphQLInputType
) -> Optional[InvalidLiteral]:
    """Check that a GraphQL value literal conforms to the given input type.

    Returns None if the literal is valid. Otherwise, returns the first failure that
    was found walking the literal depth-first, visiting the fields of input objects
    in the order in which they are declared by the type.

    Nothing is coerced or returned, so this can be used for validation only.

    | Type          | Valid literals                                         |
    | ------------- | ------------------------------------------------------ |
    | Non-Null      | anything but null which is valid for the wrapped type  |
    | List          | null, or a list with valid items                       |
    | Input Object  | null, or an object with valid fields, no unknown field |
    |               | and all required fields present                        |
    | Enum          | null, or one of the enum value names                   |
    | Scalar        | null, or any literal accepted by the scalar            |

    """
    if isinstance(value_node, VariableNode):
        return InvalidLiteral(
            value_node,
            f"Unexpected variable {print_ast(value_node)} in constant value.",
        )

    if is_non_null_type(type_):
        if isinstance(value_node, NullValueNode):
            return InvalidLiteral(
                value_node, f"Expected value of non-null type '{type_}', found null."
            )
        type_ = cast(GraphQLNonNull, type_)
        return check_literal(value_node, type_.of_type)

    if isinstance(value_node, NullValueNode):
        return None  # Null is valid for all nullable types.

    if is_list_type(type_):
        type_ = cast(GraphQLList, type_)
        if not isinstance(value_node, ListValueNode):
            return InvalidLiteral(
                value_node,
                f"Expected value of type '{type_}', found {print_ast(value_node)}.",
            )
        item_type = type_.of_type
        for item_node in value_node.values:
            invalid = check_literal(item_node, item_type)
            if invalid:
                return invalid
        return None

    if is_input_object_type(type_):
        type_ = cast(GraphQLInputObjectType, type_)
        if not isinstance(value_node, ObjectValueNode):
            return InvalidLiteral(
                value_node,
                f"Expected value of type '{type_}', found {print_ast(value_node)}.",
            )
        fields = type_.fields
        for field_node in value_node.fields:
            if field_node.name.value not in fields:
                return InvalidLiteral(
                    field_node.value,
                    f"Field '{field_node.name.value}'"
                    f" is not defined by type '{type_.name}'.",
                )
        field_nodes = {field.name.value: field for field in value_node.fields}
        for field_name, field in fields.items():
            field_node = field_nodes.get(field_name)
            if not field_node:
                if is_required_input_field(field):
                    return InvalidLiteral(
                        value_node,
                        f"Field '{type_.name}.{field_name}' of required type"
                        f" '{field.type}' was not provided.",
                    )
                continue
            invalid = check_literal(field_node.value, field.type)
            if invalid:
                return invalid
        return None

    if is_enum_type(type_):
        type_ = cast(GraphQLEnumType, type_)
        if not isinstance(value_node, EnumValueNode):
            return InvalidLiteral(
                value_node,
                f"Enum '{type_.name}' cannot represent non-enum value:"
                f" {print_ast(value_node)}.",
            )
        if value_node.value not in type_.values:
            return InvalidLiteral(
                value_node,
                f"Value '{value_node.value}' does not exist in '{type_.name}' enum.",
            )
        return None

    if is_scalar_type(type_):
        type_ = cast(GraphQLScalarType, type_)
        outcome = coerce_literal(type_, value_node)
        if isinstance(outcome, Rejected):
            return InvalidLiteral(
                value_node,
                f"Expected value of type '{type_}', found {print_ast(value_node)}.",
                outcome.message,
            )
        return None

    # Not reachable. All possible input types have been considered.
    raise TypeError(f"Unexpected input type: {inspect(type_)}.")
