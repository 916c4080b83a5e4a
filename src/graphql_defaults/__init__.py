"""GraphQL-Defaults

GraphQL-Defaults checks the literal default values of GraphQL query variables
against the input types declared for these variables, before a query is executed.

The package is organized like GraphQL-core, in the following sub-packages:

  - :mod:`graphql_defaults.language`: AST nodes of variable definitions and values
  - :mod:`graphql_defaults.type`: Input types and the type registry
  - :mod:`graphql_defaults.utilities`: Checking value literals against input types
  - :mod:`graphql_defaults.validation`: Validating the defaults of a whole document
  - :mod:`graphql_defaults.error`: Creating and formatting validation errors

Parsing query documents is not part of this library, the AST nodes are created by
the caller. All exported names can be imported directly from the root package.
"""

# The GraphQL-Defaults version info.
from .version import version, version_info

# Create and format validation errors.
from .error import ErrorCode, GraphQLError, GraphQLFormattedError

# AST nodes of the query document.
from .language import (
    SourceLocation,
    FormattedSourceLocation,
    print_ast,
    visit,
    Visitor,
    BREAK,
    SKIP,
    IDLE,
    Node,
    NameNode,
    DocumentNode,
    DefinitionNode,
    OperationDefinitionNode,
    OperationType,
    VariableDefinitionNode,
    ValueNode,
    ConstValueNode,
    VariableNode,
    IntValueNode,
    FloatValueNode,
    StringValueNode,
    BooleanValueNode,
    NullValueNode,
    EnumValueNode,
    ListValueNode,
    ObjectValueNode,
    ObjectFieldNode,
    TypeNode,
    NamedTypeNode,
    ListTypeNode,
    NonNullTypeNode,
)

# Input types and the type registry.
from .type import (
    # Registry
    TypeRegistry,
    # Definitions
    GraphQLScalarType,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLInputObjectType,
    GraphQLInputField,
    GraphQLList,
    GraphQLNonNull,
    # Standard GraphQL Scalars
    specified_scalar_types,
    GraphQLInt,
    GraphQLFloat,
    GraphQLString,
    GraphQLBoolean,
    GraphQLID,
    # Predicates
    is_type,
    is_scalar_type,
    is_enum_type,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    is_input_type,
    is_named_type,
    is_wrapping_type,
    is_required_input_field,
    is_specified_scalar_type,
    is_type_registry,
    # Un-modifiers
    get_nullable_type,
    get_named_type,
    # Types
    GraphQLType,
    GraphQLInputType,
    GraphQLNamedType,
    GraphQLWrappingType,
)

# Check value literals against input types.
from .utilities import (
    Accepted,
    Rejected,
    CoercionOutcome,
    InvalidLiteral,
    check_literal,
    coerce_literal,
    type_from_ast,
    value_from_ast_untyped,
)

# Validate the variable defaults of a document.
from .validation import (
    DefaultValuesResult,
    FormattedDefaultValuesResult,
    ValidationAbortedError,
    ValidationContext,
    ValidationRule,
    VariableDefaultValuesAreCorrectlyTypedRule,
    validate_default_values,
    validate_default_values_async,
)

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "ErrorCode",
    "GraphQLError",
    "GraphQLFormattedError",
    "SourceLocation",
    "FormattedSourceLocation",
    "print_ast",
    "visit",
    "Visitor",
    "BREAK",
    "SKIP",
    "IDLE",
    "Node",
    "NameNode",
    "DocumentNode",
    "DefinitionNode",
    "OperationDefinitionNode",
    "OperationType",
    "VariableDefinitionNode",
    "ValueNode",
    "ConstValueNode",
    "VariableNode",
    "IntValueNode",
    "FloatValueNode",
    "StringValueNode",
    "BooleanValueNode",
    "NullValueNode",
    "EnumValueNode",
    "ListValueNode",
    "ObjectValueNode",
    "ObjectFieldNode",
    "TypeNode",
    "NamedTypeNode",
    "ListTypeNode",
    "NonNullTypeNode",
    "TypeRegistry",
    "GraphQLScalarType",
    "GraphQLEnumType",
    "GraphQLEnumValue",
    "GraphQLInputObjectType",
    "GraphQLInputField",
    "GraphQLList",
    "GraphQLNonNull",
    "specified_scalar_types",
    "GraphQLInt",
    "GraphQLFloat",
    "GraphQLString",
    "GraphQLBoolean",
    "GraphQLID",
    "is_type",
    "is_scalar_type",
    "is_enum_type",
    "is_input_object_type",
    "is_list_type",
    "is_non_null_type",
    "is_input_type",
    "is_named_type",
    "is_wrapping_type",
    "is_required_input_field",
    "is_specified_scalar_type",
    "is_type_registry",
    "get_nullable_type",
    "get_named_type",
    "GraphQLType",
    "GraphQLInputType",
    "GraphQLNamedType",
    "GraphQLWrappingType",
    "Accepted",
    "Rejected",
    "CoercionOutcome",
    "InvalidLiteral",
    "check_literal",
    "coerce_literal",
    "type_from_ast",
    "value_from_ast_untyped",
    "DefaultValuesResult",
    "FormattedDefaultValuesResult",
    "ValidationAbortedError",
    "ValidationContext",
    "ValidationRule",
    "VariableDefaultValuesAreCorrectlyTypedRule",
    "validate_default_values",
    "validate_default_values_async",
]
