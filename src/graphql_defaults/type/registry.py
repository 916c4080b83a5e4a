from __future__ import annotations

from typing import Any, Collection, Dict, Iterator, Optional, cast

from ..pyutils import inspect
from .definition import (
    GraphQLInputObjectType,
    GraphQLNamedType,
    GraphQLType,
    get_named_type,
    is_input_object_type,
    is_input_type,
)
from .scalars import specified_scalar_types

__all__ = ["TypeRegistry", "TypeMap", "assert_type_registry", "is_type_registry"]


TypeMap = Dict[str, GraphQLNamedType]


class TypeRegistry:
    """Type Registry Definition

    A type registry holds the named input types that the variables of a query
    document can be declared with. The built-in scalars are always available; all
    other types need to be passed in. Types referenced by the fields of the given
    input object types, or wrapped inside lists and non-nulls, are collected
    automatically.

    Example::

        DairyProductInput = GraphQLInputObjectType('DairyProductInput', {
            'source': GraphQLInputField(GraphQLNonNull(DairyAnimal)),
            'fatContent': GraphQLInputField(GraphQLFloat),
        })

        registry = TypeRegistry(types=[DairyProductInput])

    Note: The registry only resolves names, it does not validate the types.
    """

    type_map: TypeMap

    def __init__(self, types: Optional[Collection[GraphQLType]] = None) -> None:
        if types is None:
            types = []
        elif isinstance(types, (str, bytes, dict)) or not all(
            isinstance(type_, GraphQLType) for type_ in types
        ):
            raise TypeError(
                "Registry types must be specified as a collection of GraphQL types."
            )

        all_referenced_types = TypeSet.with_initial_types(
            specified_scalar_types.values()
        )
        collect_referenced_types = all_referenced_types.collect_referenced_types
        for type_ in types:
            collect_referenced_types(type_)

        type_map: TypeMap = {}
        for named_type in all_referenced_types:
            if not is_input_type(named_type):
                raise TypeError(
                    f"Registry can only contain input types, but got:"
                    f" {inspect(named_type)}."
                )
            type_name = named_type.name
            if type_name in type_map:
                raise TypeError(
                    "Registry must contain uniquely named types"
                    f" but contains multiple types named '{type_name}'."
                )
            type_map[type_name] = named_type
        self.type_map = type_map

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self.type_map)} types>"

    def __contains__(self, name: Any) -> bool:
        return name in self.type_map

    def __getitem__(self, name: str) -> GraphQLNamedType:
        return self.type_map[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.type_map)

    def __len__(self) -> int:
        return len(self.type_map)

    def get_type(self, name: str) -> Optional[GraphQLNamedType]:
        """Resolve a type name, return None if there is no type with that name."""
        return self.type_map.get(name)


class TypeSet(Dict[GraphQLNamedType, None]):
    """An ordered set of types that can be collected starting from initial types."""

    @classmethod
    def with_initial_types(cls, types: Collection[GraphQLType]) -> TypeSet:
        return cast(TypeSet, super().fromkeys(types))

    def collect_referenced_types(self, type_: GraphQLType) -> None:
        """Recursive function supplementing the type starting from an initial type."""
        named_type = get_named_type(type_)

        if named_type in self:
            return

        self[named_type] = None

        if is_input_object_type(named_type):
            named_type = cast(GraphQLInputObjectType, named_type)
            for field in named_type.fields.values():
                self.collect_referenced_types(field.type)


def is_type_registry(registry: Any) -> bool:
    """Test if the given value is a type registry."""
    return isinstance(registry, TypeRegistry)


def assert_type_registry(registry: Any) -> TypeRegistry:
    if not is_type_registry(registry):
        raise TypeError(f"Expected {inspect(registry)} to be a type registry.")
    return cast(TypeRegistry, registry)
