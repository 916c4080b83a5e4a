"""GraphQL Utilities

The :mod:`graphql_defaults.utilities` package contains the algorithms that check
value literals against input types.
"""

# Produce a Python value given a GraphQL Value AST, without a type.
from .value_from_ast_untyped import value_from_ast_untyped

# Create a GraphQLType from a GraphQL language AST.
from .type_from_ast import type_from_ast

# Coerce a literal with the coercion function of a scalar type.
from .coerce_literal import Accepted, CoercionOutcome, Rejected, coerce_literal

# Check that a value literal conforms to an input type.
from .check_literal import InvalidLiteral, check_literal

__all__ = [
    "Accepted",
    "CoercionOutcome",
    "InvalidLiteral",
    "Rejected",
    "check_literal",
    "coerce_literal",
    "type_from_ast",
    "value_from_ast_untyped",
]
