import logging
from typing import List, NamedTuple, Optional, Tuple, TypedDict

from anyio.lowlevel import checkpoint

from ..error import GraphQLError, GraphQLFormattedError
from ..language import DocumentNode, OperationDefinitionNode, visit
from ..type import TypeRegistry, assert_type_registry
from .rules.variable_default_values_are_correctly_typed import (
    VariableDefaultValuesAreCorrectlyTypedRule,
)
from .validation_context import ValidationContext

__all__ = [
    "DefaultValuesResult",
    "FormattedDefaultValuesResult",
    "ValidationAbortedError",
    "validate_default_values",
    "validate_default_values_async",
]

logger = logging.getLogger(__name__)


class ValidationAbortedError(RuntimeError):
    """Error when a validation has been aborted (error limit reached)."""


class FormattedDefaultValuesResult(TypedDict):
    """Formatted result of validating the default values of a document"""

    errors: List[GraphQLFormattedError]


class DefaultValuesResult(NamedTuple):
    """The result of validating the default values of a document.

    The recoverable errors are listed in the order of the variable definitions.
    If a variable has a type that could not be resolved, the fatal error is set
    and the list of recoverable errors is always empty.
    """

    errors: List[GraphQLError]
    fatal_error: Optional[GraphQLError] = None

    @property
    def is_fatal(self) -> bool:
        return self.fatal_error is not None

    @property
    def formatted(self) -> FormattedDefaultValuesResult:
        """Get the errors formatted according to the response format."""
        errors = [self.fatal_error] if self.fatal_error else self.errors
        return {"errors": [error.formatted for error in errors]}


def validate_default_values(
    registry: TypeRegistry,
    document_ast: DocumentNode,
    max_errors: Optional[int] = None,
) -> DefaultValuesResult:
    """Validate the default values of all variables defined in a document.

    Validation runs synchronously, returning the encountered errors in the order of
    the variable definitions. If the document is valid, the list of errors is empty.

    If a variable has a type which is not defined by the type registry, validation
    stops and the result only contains the fatal error.

    A maximum number of errors can be passed. If more errors would be reported, an
    error saying that the error limit has been reached is added instead and
    validation stops.
    """
    context, errors = _create_context(registry, document_ast, max_errors)
    rule = VariableDefaultValuesAreCorrectlyTypedRule(context)
    try:
        visit(document_ast, rule)
    except ValidationAbortedError:
        logger.debug("Validation aborted after %d errors.", max_errors)
    return _build_result(context, errors)


async def validate_default_values_async(
    registry: TypeRegistry,
    document_ast: DocumentNode,
    max_errors: Optional[int] = None,
) -> DefaultValuesResult:
    """Validate the default values of all variables defined in a document.

    This is the same as :func:`validate_default_values`, but it yields control to
    the event loop before each variable definition is checked, so that validation
    of a large document can be cancelled.
    """
    context, errors = _create_context(registry, document_ast, max_errors)
    rule = VariableDefaultValuesAreCorrectlyTypedRule(context)
    try:
        for definition in document_ast.definitions or ():
            if not isinstance(definition, OperationDefinitionNode):
                continue
            rule.enter_operation_definition(definition)
            for variable_definition in definition.variable_definitions or ():
                await checkpoint()
                visit(variable_definition, rule)
                if context.fatal_error:
                    break
            if context.fatal_error:
                break
    except ValidationAbortedError:
        logger.debug("Validation aborted after %d errors.", max_errors)
    return _build_result(context, errors)


def _create_context(
    registry: TypeRegistry,
    document_ast: DocumentNode,
    max_errors: Optional[int],
) -> Tuple[ValidationContext, List[GraphQLError]]:
    if not document_ast or not isinstance(document_ast, DocumentNode):
        raise TypeError("Must provide document.")
    assert_type_registry(registry)
    if max_errors is not None and (
        not isinstance(max_errors, int) or isinstance(max_errors, bool)
    ):
        raise TypeError("The maximum number of errors must be passed as an int.")

    errors: List[GraphQLError] = []

    def on_error(error: GraphQLError) -> None:
        if max_errors is not None and len(errors) >= max_errors:
            errors.append(
                GraphQLError(
                    "Too many validation errors, error limit reached."
                    " Validation aborted."
                )
            )
            raise ValidationAbortedError
        errors.append(error)

    return ValidationContext(registry, document_ast, on_error), errors


def _build_result(
    context: ValidationContext, errors: List[GraphQLError]
) -> DefaultValuesResult:
    fatal_error = context.fatal_error
    if fatal_error:
        logger.debug("Validation failed: %s", fatal_error.message)
        # diagnostics collected before the fatal error are dropped
        return DefaultValuesResult([], fatal_error)
    return DefaultValuesResult(errors)
