from __future__ import annotations

from enum import Enum
from typing import (
    Any,
    Callable,
    Collection,
    Dict,
    Generic,
    Mapping,
    Optional,
    Type,
    TypeAlias,
    TypeGuard,
    TypeVar,
    Union,
    cast,
    overload,
)

from ..error import GraphQLError
from ..language import ValueNode
from ..pyutils import Undefined, inspect
from .assert_name import assert_enum_value_name, assert_name

__all__ = [
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
    "GraphQLEnumType",
    "GraphQLEnumValue",
    "GraphQLEnumValueMap",
    "GraphQLInputField",
    "GraphQLInputFieldMap",
    "GraphQLInputObjectType",
    "GraphQLInputType",
    "GraphQLLeafType",
    "GraphQLList",
    "GraphQLNamedType",
    "GraphQLNamedInputType",
    "GraphQLNullableInputType",
    "GraphQLNonNull",
    "GraphQLScalarType",
    "GraphQLScalarValueParser",
    "GraphQLScalarLiteralParser",
    "GraphQLType",
    "GraphQLWrappingType",
    "Thunk",
    "ThunkMapping",
]


class GraphQLType:
    """Base class for all GraphQL types"""

    # Note: We don't use slots for GraphQLType objects because memory considerations
    # are not really important for the schema definition, and it would make caching
    # properties slower or more complicated.


# There are predicates for each kind of GraphQL type.


def is_type(type_: Any) -> TypeGuard[GraphQLType]:
    return isinstance(type_, GraphQLType)


# These types wrap and modify other types

GT = TypeVar("GT", bound=GraphQLType, covariant=True)


class GraphQLWrappingType(GraphQLType, Generic[GT]):
    """Base class for all GraphQL wrapping types"""

    of_type: GT

    def __init__(self, type_: GT) -> None:
        if not is_type(type_):
            raise TypeError(
                f"Can only create a wrapper for a GraphQLType, but got: {type_}."
            )
        self.of_type = type_

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.of_type!r}>"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, GraphQLWrappingType)
            and self.__class__ is other.__class__
            and self.of_type == other.of_type
        )

    def __hash__(self) -> int:
        return hash((self.__class__, self.of_type))


def is_wrapping_type(type_: Any) -> TypeGuard[GraphQLWrappingType]:
    return isinstance(type_, GraphQLWrappingType)


class GraphQLNamedType(GraphQLType):
    """Base class for all GraphQL named types"""

    name: str
    description: Optional[str]
    extensions: Dict[str, Any]

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        assert_name(name)
        self.name = name
        self.description = description
        self.extensions = extensions or {}

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"

    def __str__(self) -> str:
        return self.name


T = TypeVar("T")

ThunkMapping: TypeAlias = Union[Callable[[], Mapping[str, T]], Mapping[str, T]]
Thunk: TypeAlias = Union[Callable[[], T], T]


def resolve_thunk(thunk: Thunk[T]) -> T:
    """Resolve the given thunk.

    Used while defining GraphQL types to allow for circular references in otherwise
    immutable type definitions.
    """
    return thunk() if callable(thunk) else thunk


GraphQLScalarValueParser: TypeAlias = Callable[[Any], Any]
GraphQLScalarLiteralParser: TypeAlias = Callable[[ValueNode], Any]


class GraphQLScalarType(GraphQLNamedType):
    """Scalar Type Definition

    The leaf values of input values are Scalars (or Enums) and are defined with a name
    and a function used to coerce the native value of a literal and to ensure its
    validity. The coercion function can signal a failure by returning ``Undefined``
    or a ``Rejected`` outcome, or by raising an error. A ``GraphQLError`` raised
    during coercion carries a message that is reported as it is.

    Example::

        def parse_odd(value: Any) -> int:
            if not isinstance(value, int):
                raise GraphQLError(f"Odd cannot represent '{value}'.")
            if not value % 2:
                raise GraphQLError(f"Odd cannot represent '{value}' since it is even.")
            return value

        odd_type = GraphQLScalarType('Odd', parse_value=parse_odd)

    """

    def __init__(
        self,
        name: str,
        parse_value: Optional[GraphQLScalarValueParser] = None,
        parse_literal: Optional[GraphQLScalarLiteralParser] = None,
        description: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(name=name, description=description, extensions=extensions)
        if parse_value is not None:
            if not callable(parse_value):
                raise TypeError(f"{name} must provide 'parse_value' as a function.")
            self.parse_value = parse_value  # type: ignore
        if parse_literal is not None:
            if not callable(parse_literal):
                raise TypeError(f"{name} must provide 'parse_literal' as a function.")
            self.parse_literal = parse_literal  # type: ignore

    @staticmethod
    def parse_value(value: Any) -> Any:
        """Parses an externally provided value to use as an input.

        This default method just passes the value through and should be replaced
        with a more specific version when creating a scalar type.
        """
        return value

    def parse_literal(self, node: ValueNode) -> Any:
        """Parses an externally provided literal value to use as an input.

        This default method uses the parse_value method and should be replaced
        with a more specific version when creating a scalar type.
        """
        # Lazy import to avoid a cyclic dependency between type and utilities
        from ..utilities.value_from_ast_untyped import value_from_ast_untyped

        return self.parse_value(value_from_ast_untyped(node))


def is_scalar_type(type_: Any) -> TypeGuard[GraphQLScalarType]:
    return isinstance(type_, GraphQLScalarType)


class GraphQLEnumValue:
    """Definition of a GraphQL enum value"""

    value: Any
    description: Optional[str]
    deprecation_reason: Optional[str]

    def __init__(
        self,
        value: Any = None,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
    ) -> None:
        self.value = value
        self.description = description
        self.deprecation_reason = deprecation_reason

    def __eq__(self, other: Any) -> bool:
        return self is other or (
            isinstance(other, GraphQLEnumValue)
            and self.value == other.value
            and self.description == other.description
            and self.deprecation_reason == other.deprecation_reason
        )


GraphQLEnumValueMap: TypeAlias = Dict[str, GraphQLEnumValue]


class GraphQLEnumType(GraphQLNamedType):
    """Enum Type Definition

    Some leaf values of input values are Enums. An enum literal is only valid if it
    names one of the values of the enum type. The values can be provided as a mapping
    from value names to internal values, as a Python Enum, or as a collection of value
    names.

    Example::

        RGBType = GraphQLEnumType('RGB', {
            'RED': 0,
            'GREEN': 1,
            'BLUE': 2
        })

    Example using a Python Enum::

        class RGBEnum(enum.Enum):
            RED = 0
            GREEN = 1
            BLUE = 2

        RGBType = GraphQLEnumType('RGB', RGBEnum)

    Only the names of the values take part in validating default values.
    """

    values: GraphQLEnumValueMap

    def __init__(
        self,
        name: str,
        values: Union[
            GraphQLEnumValueMap, Mapping[str, Any], Type[Enum], Collection[str]
        ],
        description: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(name=name, description=description, extensions=extensions)
        try:  # check for enum
            values = cast(Type[Enum], values).__members__  # type: ignore
        except AttributeError:
            if isinstance(values, str):
                raise TypeError(
                    f"{name} values must be an Enum, a mapping"
                    " with value names as keys or a collection of value names."
                )
            if not isinstance(values, Mapping):
                try:
                    values = {key: key for key in values}  # type: ignore
                except TypeError:
                    raise TypeError(
                        f"{name} values must be an Enum, a mapping"
                        " with value names as keys or a collection of value names."
                    )
            if not all(isinstance(key, str) for key in values):
                raise TypeError(
                    f"{name} values must be an Enum, a mapping"
                    " with value names as keys or a collection of value names."
                )
        else:
            values = {key: value.value for key, value in values.items()}
        self.values = {
            assert_enum_value_name(key): value
            if isinstance(value, GraphQLEnumValue)
            else GraphQLEnumValue(value)
            for key, value in cast(Mapping[str, Any], values).items()
        }


def is_enum_type(type_: Any) -> TypeGuard[GraphQLEnumType]:
    return isinstance(type_, GraphQLEnumType)


class GraphQLInputField:
    """Definition of a GraphQL input field"""

    type: GraphQLInputType
    default_value: Any
    description: Optional[str]
    deprecation_reason: Optional[str]

    def __init__(
        self,
        type_: GraphQLInputType,
        default_value: Any = Undefined,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
    ) -> None:
        if not is_input_type(type_):
            raise TypeError(f"Input field type must be a GraphQL input type: {type_}.")
        self.type = type_
        self.default_value = default_value
        self.description = description
        self.deprecation_reason = deprecation_reason

    def __eq__(self, other: Any) -> bool:
        return self is other or (
            isinstance(other, GraphQLInputField)
            and self.type == other.type
            and self.default_value == other.default_value
            and self.description == other.description
            and self.deprecation_reason == other.deprecation_reason
        )

    @property
    def has_default(self) -> bool:
        """Whether the field has a default value in the schema."""
        return self.default_value is not Undefined


GraphQLInputFieldMap: TypeAlias = Dict[str, GraphQLInputField]


class GraphQLInputObjectType(GraphQLNamedType):
    """Input Object Type Definition

    An input object defines a structured collection of fields which may be supplied
    as the value of a variable.

    Using ``NonNull`` will ensure that a value must be provided by the query, unless
    the field has a default value in the schema.

    Example::

        NonNullFloat = GraphQLNonNull(GraphQLFloat)

        GeoPoint = GraphQLInputObjectType('GeoPoint', {
            'lat': GraphQLInputField(NonNullFloat),
            'lon': GraphQLInputField(NonNullFloat),
            'alt': GraphQLInputField(GraphQLFloat, default_value=0),
        })

    The fields can also be passed as a function returning the mapping, which allows
    input objects referencing themselves.
    """

    def __init__(
        self,
        name: str,
        fields: ThunkMapping[GraphQLInputField],
        description: Optional[str] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(name=name, description=description, extensions=extensions)
        self._fields = fields
        self._resolved_fields: Optional[GraphQLInputFieldMap] = None

    @property
    def fields(self) -> GraphQLInputFieldMap:
        """Get provided fields, wrap them as GraphQLInputField if needed."""
        if self._resolved_fields is None:
            try:
                fields = resolve_thunk(self._fields)
            except Exception as error:
                cls = GraphQLError if isinstance(error, GraphQLError) else TypeError
                raise cls(f"{self.name} fields cannot be resolved. {error}") from error
            if not isinstance(fields, Mapping):
                raise TypeError(
                    f"{self.name} fields must be specified"
                    " as a mapping with field names as keys."
                )
            self._resolved_fields = {
                assert_name(name): value
                if isinstance(value, GraphQLInputField)
                else GraphQLInputField(value)
                for name, value in fields.items()
            }
        return self._resolved_fields


def is_input_object_type(type_: Any) -> TypeGuard[GraphQLInputObjectType]:
    return isinstance(type_, GraphQLInputObjectType)


def is_required_input_field(field: GraphQLInputField) -> bool:
    return is_non_null_type(field.type) and not field.has_default


# Wrapper types


class GraphQLList(GraphQLWrappingType[GT]):
    """List Type Wrapper

    A list is a wrapping type which points to another type.

    Example::

        GraphQLInputField(GraphQLList(GraphQLString))
    """

    def __init__(self, type_: GT) -> None:
        super().__init__(type_=type_)

    def __str__(self) -> str:
        return f"[{self.of_type}]"


def is_list_type(type_: Any) -> TypeGuard[GraphQLList]:
    return isinstance(type_, GraphQLList)


GNT = TypeVar("GNT", bound="GraphQLNullableInputType", covariant=True)


class GraphQLNonNull(GraphQLWrappingType[GNT]):
    """Non-Null Type Wrapper

    A non-null is a wrapping type which points to another type. Non-null types enforce
    that their values are never null. A variable whose declared type is non-null
    cannot have a default value at all.

    Example::

        GraphQLInputField(GraphQLNonNull(GraphQLString))

    Note: A non-null type cannot wrap another non-null type.
    """

    def __init__(self, type_: GNT):
        if isinstance(type_, GraphQLNonNull):
            raise TypeError(
                "Can only create NonNull of a Nullable GraphQLType but got:"
                f" {type_}."
            )
        super().__init__(type_=type_)

    def __str__(self) -> str:
        return f"{self.of_type}!"


# These types may be used as input types for variables.

GraphQLNullableInputType: TypeAlias = Union[
    GraphQLScalarType,
    GraphQLEnumType,
    GraphQLInputObjectType,
    # actually GraphQLList[GraphQLInputType], but we can't recurse
    GraphQLList,
]

GraphQLInputType: TypeAlias = Union[
    GraphQLNullableInputType, GraphQLNonNull[GraphQLNullableInputType]
]


# Predicates and Assertions


def is_input_type(type_: Any) -> TypeGuard[GraphQLInputType]:
    return isinstance(
        type_, (GraphQLScalarType, GraphQLEnumType, GraphQLInputObjectType)
    ) or (isinstance(type_, GraphQLWrappingType) and is_input_type(type_.of_type))


def assert_input_type(type_: Any) -> GraphQLInputType:
    if not is_input_type(type_):
        raise TypeError(f"Expected {inspect(type_)} to be a GraphQL input type.")
    return type_


def is_non_null_type(type_: Any) -> TypeGuard[GraphQLNonNull]:
    return isinstance(type_, GraphQLNonNull)


def is_nullable_type(type_: Any) -> TypeGuard[GraphQLNullableInputType]:
    return isinstance(
        type_,
        (GraphQLScalarType, GraphQLEnumType, GraphQLInputObjectType, GraphQLList),
    )


@overload
def get_nullable_type(type_: None) -> None:
    ...


@overload
def get_nullable_type(type_: GraphQLNullableInputType) -> GraphQLNullableInputType:
    ...


@overload
def get_nullable_type(type_: GraphQLNonNull) -> GraphQLNullableInputType:
    ...


def get_nullable_type(
    type_: Optional[Union[GraphQLNullableInputType, GraphQLNonNull]]
) -> Optional[GraphQLNullableInputType]:
    """Unwrap possible non-null type"""
    if is_non_null_type(type_):
        type_ = type_.of_type
    return cast(Optional[GraphQLNullableInputType], type_)


# These named types do not include modifiers like List or NonNull.

GraphQLNamedInputType: TypeAlias = Union[
    GraphQLScalarType, GraphQLEnumType, GraphQLInputObjectType
]


def is_named_type(type_: Any) -> TypeGuard[GraphQLNamedType]:
    return isinstance(type_, GraphQLNamedType)


@overload
def get_named_type(type_: None) -> None:
    ...


@overload
def get_named_type(type_: GraphQLType) -> GraphQLNamedType:
    ...


def get_named_type(type_: Optional[GraphQLType]) -> Optional[GraphQLNamedType]:
    """Unwrap possible wrapping type"""
    if type_:
        unwrapped_type = type_
        while is_wrapping_type(unwrapped_type):
            unwrapped_type = unwrapped_type.of_type
        return cast(GraphQLNamedType, unwrapped_type)
    return None


# These types may describe types which may be leaf values.

GraphQLLeafType: TypeAlias = Union[GraphQLScalarType, GraphQLEnumType]


def is_leaf_type(type_: Any) -> TypeGuard[GraphQLLeafType]:
    return isinstance(type_, (GraphQLScalarType, GraphQLEnumType))
