"""GraphQL Language

The :mod:`graphql_defaults.language` package is responsible for the AST nodes that
describe the variable definitions of a query document and their default values.
Parsing query text into these nodes is left to the caller.
"""

from .location import FormattedSourceLocation, SourceLocation

from .printer import print_ast

from .visitor import Visitor, VisitorAction, visit, BREAK, SKIP, IDLE, DOCUMENT_KEYS

from .ast import (
    Node,
    # Each kind of AST node
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

__all__ = [
    "FormattedSourceLocation",
    "SourceLocation",
    "print_ast",
    "Visitor",
    "VisitorAction",
    "visit",
    "BREAK",
    "SKIP",
    "IDLE",
    "DOCUMENT_KEYS",
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
]
