from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..pyutils import inspect
from . import ast

from .ast import Node

__all__ = [
    "Visitor",
    "VisitorAction",
    "visit",
    "BREAK",
    "SKIP",
    "IDLE",
    "DOCUMENT_KEYS",
]


class VisitorActionEnum(Enum):
    """Special return values for the visitor methods.

    You can also use the values of this enum directly.
    """

    BREAK = True
    SKIP = False


VisitorAction = Optional[VisitorActionEnum]

BREAK = VisitorActionEnum.BREAK
SKIP = VisitorActionEnum.SKIP
IDLE = None

# Default map from visitor kinds to their traversable node attributes:
DOCUMENT_KEYS: Dict[str, Tuple[str, ...]] = {
    "name": (),
    "document": ("definitions",),
    "operation_definition": ("name", "variable_definitions"),
    "variable_definition": ("variable", "type", "default_value"),
    "variable": ("name",),
    "int_value": (),
    "float_value": (),
    "string_value": (),
    "boolean_value": (),
    "null_value": (),
    "enum_value": (),
    "list_value": ("values",),
    "object_value": ("fields",),
    "object_field": ("name", "value"),
    "named_type": ("name",),
    "list_type": ("type",),
    "non_null_type": ("type",),
}


class Visitor:
    """Visitor that walks through an AST.

    Visitors can define two generic methods "enter" and "leave". The former will be
    called when a node is entered in the traversal, the latter is called after visiting
    the node and its child nodes. These methods have the following signature::

        def enter(self, node, key, parent, path, ancestors):
            # The return value has the following meaning:
            # IDLE (None): no action
            # SKIP: skip visiting this node
            # BREAK: stop visiting altogether
            return

    You can also define node kind specific methods by suffixing them with an underscore
    followed by the kind of the node to be visited. For instance, to visit
    ``variable_definition`` nodes, you would define the methods
    ``enter_variable_definition()`` and/or ``leave_variable_definition()``, with the
    same signature as above. If no kind specific method has been defined for a given
    node, the generic method is called.

    Unlike visitors that edit the AST, this visitor only reads it, any other value
    returned from the visitor methods is ignored.
    """

    # Provide special return values as attributes
    BREAK, SKIP, IDLE = BREAK, SKIP, IDLE

    def __init_subclass__(cls) -> None:
        """Verify that all defined handlers are valid."""
        super().__init_subclass__()
        for attr in cls.__dict__:
            if attr.startswith("_"):
                continue
            attr_kind = attr.split("_", 1)
            if len(attr_kind) < 2:
                kind: Optional[str] = None
            else:
                attr, kind = attr_kind
            if attr in ("enter", "leave") and kind:
                name = "".join(part.title() for part in kind.split("_")) + "Node"
                node_cls = getattr(ast, name, None)
                if (
                    not node_cls
                    or not isinstance(node_cls, type)
                    or not issubclass(node_cls, Node)
                ):
                    raise TypeError(f"Invalid AST node kind: {kind}.")

    def get_visit_fn(
        self, kind: str, is_leaving: bool = False
    ) -> Optional[Callable[..., Any]]:
        """Get the visit function for the given node kind and direction."""
        method = "leave" if is_leaving else "enter"
        visit_fn = getattr(self, f"{method}_{kind}", None)
        if not visit_fn:
            visit_fn = getattr(self, method, None)
        return visit_fn


def visit(
    root: Node,
    visitor: Visitor,
    visitor_keys: Optional[Dict[str, Tuple[str, ...]]] = None,
) -> VisitorAction:
    """Visit each node in an AST.

    :func:`~.visit` will walk through an AST using a depth-first traversal, calling the
    visitor's enter methods at each node in the traversal, and calling the leave methods
    after visiting that node and all of its child nodes.

    By returning :data:`~.SKIP` from an enter method, the sub-tree of the node is
    skipped, by returning :data:`~.BREAK` the whole traversal is stopped. In the latter
    case, :data:`~.BREAK` is also returned from this function.

    To customize the node attributes to be used for traversal, you can provide a
    dictionary visitor_keys mapping node kinds to node attributes.
    """
    if not isinstance(root, Node):
        raise TypeError(f"Not an AST Node: {inspect(root)}.")
    if not isinstance(visitor, Visitor):
        raise TypeError(f"Not an AST Visitor: {inspect(visitor)}.")
    if visitor_keys is None:
        visitor_keys = DOCUMENT_KEYS
    return _visit_node(root, None, None, [], [], visitor, visitor_keys)


def _visit_node(
    node: Node,
    key: Any,
    parent: Any,
    path: List[Any],
    ancestors: List[Any],
    visitor: Visitor,
    visitor_keys: Dict[str, Tuple[str, ...]],
) -> VisitorAction:
    if not isinstance(node, Node):
        raise TypeError(f"Invalid AST Node: {inspect(node)}.")
    enter_fn = visitor.get_visit_fn(node.kind)
    if enter_fn:
        result = enter_fn(node, key, parent, path, ancestors)
        if result is BREAK or result is True:
            return BREAK
        if result is SKIP or result is False:
            return None

    if parent is not None:
        ancestors.append(parent)
    try:
        for child_key in visitor_keys.get(node.kind, ()):
            child = getattr(node, child_key, None)
            if child is None:
                continue
            path.append(child_key)
            try:
                if isinstance(child, tuple):
                    ancestors.append(node)
                    try:
                        for index, item in enumerate(child):
                            path.append(index)
                            try:
                                if (
                                    _visit_node(
                                        item,
                                        index,
                                        child,
                                        path,
                                        ancestors,
                                        visitor,
                                        visitor_keys,
                                    )
                                    is BREAK
                                ):
                                    return BREAK
                            finally:
                                path.pop()
                    finally:
                        ancestors.pop()
                elif (
                    _visit_node(
                        child, child_key, node, path, ancestors, visitor, visitor_keys
                    )
                    is BREAK
                ):
                    return BREAK
            finally:
                path.pop()
    finally:
        if parent is not None:
            ancestors.pop()

    leave_fn = visitor.get_visit_fn(node.kind, is_leaving=True)
    if leave_fn:
        result = leave_fn(node, key, parent, path, ancestors)
        if result is BREAK or result is True:
            return BREAK
    return None
