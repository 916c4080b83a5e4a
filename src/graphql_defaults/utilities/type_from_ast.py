from typing import Optional, cast, overload

from ..language import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode
from ..pyutils import inspect
from ..type import (
    GraphQLInputType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLNullableInputType,
    TypeRegistry,
)

__all__ = ["type_from_ast"]


@overload
def type_from_ast(
    registry: TypeRegistry, type_node: NamedTypeNode
) -> Optional[GraphQLNamedType]:
    ...


@overload
def type_from_ast(
    registry: TypeRegistry, type_node: ListTypeNode
) -> Optional[GraphQLList]:
    ...


@overload
def type_from_ast(
    registry: TypeRegistry, type_node: NonNullTypeNode
) -> Optional[GraphQLNonNull]:
    ...


@overload
def type_from_ast(
    registry: TypeRegistry, type_node: TypeNode
) -> Optional[GraphQLInputType]:
    ...


def type_from_ast(
    registry: TypeRegistry, type_node: TypeNode
) -> Optional[GraphQLInputType]:
    """Get the GraphQL type definition from an AST node.

    Given a type registry and an AST node describing a type, return a GraphQLType
    definition which applies to that type. For example, if provided the parsed AST
    node for ``[User]``, a GraphQLList instance will be returned, containing the type
    called "User" found in the registry. If a type called "User" is not found in the
    registry, then None will be returned.
    """
    if isinstance(type_node, ListTypeNode):
        inner_type = type_from_ast(registry, type_node.type)
        return GraphQLList(inner_type) if inner_type else None
    if isinstance(type_node, NonNullTypeNode):
        inner_type = type_from_ast(registry, type_node.type)
        inner_type = cast(GraphQLNullableInputType, inner_type)
        return GraphQLNonNull(inner_type) if inner_type else None
    if isinstance(type_node, NamedTypeNode):
        return cast(GraphQLInputType, registry.get_type(type_node.name.value))

    # Not reachable. All possible type nodes have been considered.
    raise TypeError(f"Unexpected type node: {inspect(type_node)}.")
