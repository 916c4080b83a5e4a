import logging
from typing import Any, List, cast

from ...error import ErrorCode, GraphQLError
from ...language import (
    NamedTypeNode,
    OperationDefinitionNode,
    TypeNode,
    VariableDefinitionNode,
    print_ast,
)
from ...language.visitor import VisitorAction
from ...type import is_non_null_type
from ...utilities import check_literal, type_from_ast
from ..validation_context import ValidationContext
from . import ValidationRule

__all__ = ["VariableDefaultValuesAreCorrectlyTypedRule"]

logger = logging.getLogger(__name__)

INVALID_TYPE_CODE = ErrorCode.DEFAULT_VALUE_INVALID_TYPE.value
NON_NULL_CODE = ErrorCode.DEFAULT_VALUE_INVALID_ON_NON_NULL_VARIABLE.value


class VariableDefaultValuesAreCorrectlyTypedRule(ValidationRule):
    """Variable default values are correctly typed

    A GraphQL operation is only valid if the default value of every variable it
    defines conforms to the declared type of the variable. A variable declared with
    a non-null type must not have a default value at all.

    A variable with a type that is not defined by the type registry makes the whole
    document invalid, the traversal stops at this variable.
    """

    def __init__(self, context: ValidationContext) -> None:
        super().__init__(context)
        self.path: List[str] = []

    def enter_operation_definition(
        self, node: OperationDefinitionNode, *_args: Any
    ) -> None:
        operation = node.operation.value
        self.path = [f"{operation} {node.name.value}" if node.name else operation]

    def enter_variable_definition(
        self, node: VariableDefinitionNode, *_args: Any
    ) -> VisitorAction:
        variable_name = node.variable.name.value
        type_ = type_from_ast(self.context.registry, node.type)
        if not type_:
            type_name = get_named_type_node(node.type).name.value
            logger.debug(
                "Variable $%s has undefined type %s.", variable_name, type_name
            )
            self.report_fatal_error(
                GraphQLError(
                    f"{type_name} isn't a defined input type (on ${variable_name})"
                )
            )
            return self.BREAK

        default_value = node.default_value
        if default_value is None:
            return self.SKIP

        logger.debug("Checking default value of variable $%s.", variable_name)
        if is_non_null_type(type_):
            self.report_error(
                GraphQLError(
                    f"Non-null variable ${variable_name} can't have a default value",
                    default_value,
                    self.path,
                    extensions={
                        "code": NON_NULL_CODE,
                        "variableName": variable_name,
                    },
                )
            )
            return self.SKIP

        invalid = check_literal(default_value, type_)
        if invalid:
            type_name = print_ast(node.type)
            logger.debug(
                "Default value of variable $%s is invalid: %s",
                variable_name,
                invalid.reason,
            )
            self.report_error(
                GraphQLError(
                    invalid.message
                    or f"Default value for ${variable_name}"
                    f" doesn't match type {type_name}",
                    default_value,
                    self.path,
                    extensions={
                        "code": INVALID_TYPE_CODE,
                        "variableName": variable_name,
                        "typeName": type_name,
                    },
                )
            )
        return self.SKIP


def get_named_type_node(type_node: TypeNode) -> NamedTypeNode:
    """Unwrap list and non-null type references down to the named type."""
    while not isinstance(type_node, NamedTypeNode):
        type_node = type_node.type  # type: ignore
    return cast(NamedTypeNode, type_node)
