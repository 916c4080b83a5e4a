"""GraphQL Validation

The :mod:`graphql_defaults.validation` package fulfills the validation of the default
values of query variables against their declared input types.
"""

from .validate import (
    DefaultValuesResult,
    FormattedDefaultValuesResult,
    ValidationAbortedError,
    validate_default_values,
    validate_default_values_async,
)

from .validation_context import ValidationContext

from .rules import ValidationRule, RuleType

from .rules.variable_default_values_are_correctly_typed import (
    VariableDefaultValuesAreCorrectlyTypedRule,
)

__all__ = [
    "DefaultValuesResult",
    "FormattedDefaultValuesResult",
    "ValidationAbortedError",
    "validate_default_values",
    "validate_default_values_async",
    "ValidationContext",
    "ValidationRule",
    "RuleType",
    "VariableDefaultValuesAreCorrectlyTypedRule",
]
