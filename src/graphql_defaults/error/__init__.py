"""GraphQL Errors

The :mod:`graphql_defaults.error` package is responsible for creating and formatting
the errors reported for invalid variable default values.
"""

from .graphql_error import GraphQLError, GraphQLFormattedError

from .error_code import ErrorCode

__all__ = ["ErrorCode", "GraphQLError", "GraphQLFormattedError"]
