"""GraphQL Type System

The :mod:`graphql_defaults.type` package is responsible for defining the input types
that variable default values are checked against, and the registry resolving type
names to these types.
"""

from .assert_name import assert_name, assert_enum_value_name

from .definition import (
    # Predicates
    is_type,
    is_scalar_type,
    is_enum_type,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    is_input_type,
    is_leaf_type,
    is_wrapping_type,
    is_nullable_type,
    is_named_type,
    is_required_input_field,
    # Assertions
    assert_input_type,
    # Un-modifiers
    get_nullable_type,
    get_named_type,
    # Thunk handling
    resolve_thunk,
    # Definitions
    GraphQLScalarType,
    GraphQLEnumType,
    GraphQLInputObjectType,
    # Type Wrappers
    GraphQLList,
    GraphQLNonNull,
    # Types
    GraphQLType,
    GraphQLInputType,
    GraphQLLeafType,
    GraphQLWrappingType,
    GraphQLNullableInputType,
    GraphQLNamedType,
    GraphQLNamedInputType,
    Thunk,
    ThunkMapping,
    GraphQLEnumValue,
    GraphQLEnumValueMap,
    GraphQLInputField,
    GraphQLInputFieldMap,
    GraphQLScalarValueParser,
    GraphQLScalarLiteralParser,
)

from .scalars import (
    # Predicate
    is_specified_scalar_type,
    # Standard GraphQL Scalars
    specified_scalar_types,
    GraphQLInt,
    GraphQLFloat,
    GraphQLString,
    GraphQLBoolean,
    GraphQLID,
    # Int boundaries constants
    MAX_INT,
    MIN_INT,
)

from .registry import (
    # Predicate
    is_type_registry,
    # Assertion
    assert_type_registry,
    # Registry
    TypeRegistry,
    TypeMap,
)

__all__ = [
    "assert_name",
    "assert_enum_value_name",
    "is_type",
    "is_scalar_type",
    "is_enum_type",
    "is_input_object_type",
    "is_list_type",
    "is_non_null_type",
    "is_input_type",
    "is_leaf_type",
    "is_wrapping_type",
    "is_nullable_type",
    "is_named_type",
    "is_required_input_field",
    "assert_input_type",
    "get_nullable_type",
    "get_named_type",
    "resolve_thunk",
    "GraphQLScalarType",
    "GraphQLEnumType",
    "GraphQLInputObjectType",
    "GraphQLList",
    "GraphQLNonNull",
    "GraphQLType",
    "GraphQLInputType",
    "GraphQLLeafType",
    "GraphQLWrappingType",
    "GraphQLNullableInputType",
    "GraphQLNamedType",
    "GraphQLNamedInputType",
    "Thunk",
    "ThunkMapping",
    "GraphQLEnumValue",
    "GraphQLEnumValueMap",
    "GraphQLInputField",
    "GraphQLInputFieldMap",
    "GraphQLScalarValueParser",
    "GraphQLScalarLiteralParser",
    "is_specified_scalar_type",
    "specified_scalar_types",
    "GraphQLInt",
    "GraphQLFloat",
    "GraphQLString",
    "GraphQLBoolean",
    "GraphQLID",
    "MAX_INT",
    "MIN_INT",
    "is_type_registry",
    "assert_type_registry",
    "TypeRegistry",
    "TypeMap",
]
