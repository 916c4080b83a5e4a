"""GraphQL Error"""

from __future__ import annotations

from sys import exc_info
from typing import (
    TYPE_CHECKING,
    Any,
    Collection,
    Dict,
    List,
    Optional,
    TypedDict,
    Union,
)

if TYPE_CHECKING:
    from ..language.ast import Node  # noqa: F401
    from ..language.location import (  # noqa: F401
        FormattedSourceLocation,
        SourceLocation,
    )

__all__ = ["GraphQLError", "GraphQLFormattedError"]


class GraphQLFormattedError(TypedDict, total=False):
    """Formatted GraphQL error"""

    # A short, human-readable summary of the problem.
    message: str
    # The source locations of the default value literals this error is about.
    locations: List["FormattedSourceLocation"]
    # The display name of the operation declaring the variable.
    path: List[Union[str, int]]
    # Machine-readable details such as the error code and the variable name.
    extensions: Dict[str, Any]


class GraphQLError(Exception):
    """GraphQL Error

    A GraphQLError describes an Error found while validating the default values of
    the variables of a GraphQL document. In addition to a message, it also includes
    information about the locations in the document and the operation that
    correspond to the Error, and machine-readable extensions.
    """

    message: str
    """A message describing the Error for debugging purposes"""

    locations: Optional[List["SourceLocation"]]
    """Source locations

    A list of (line, column) locations within the source GraphQL document which
    correspond to this error.
    """

    path: Optional[List[Union[str, int]]]
    """A list of path segments, here the display name of the enclosing operation"""

    nodes: Optional[List["Node"]]
    """A list of GraphQL AST Nodes corresponding to this error"""

    original_error: Optional[Exception]
    """The original error thrown by a scalar coercion function"""

    extensions: Optional[Dict[str, Any]]
    """Extension fields to add to the formatted error"""

    __slots__ = (
        "message",
        "nodes",
        "locations",
        "path",
        "original_error",
        "extensions",
    )

    __hash__ = Exception.__hash__

    def __init__(
        self,
        message: str,
        nodes: Union[Collection["Node"], "Node", None] = None,
        path: Optional[Collection[Union[str, int]]] = None,
        original_error: Optional[Exception] = None,
        extensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if nodes and not isinstance(nodes, list):
            nodes = [nodes]  # type: ignore
        self.nodes = nodes or None  # type: ignore
        locations = (
            [node.loc for node in nodes if node.loc]  # type: ignore
            if nodes
            else None
        )
        self.locations = locations or None
        if path and not isinstance(path, list):
            path = list(path)
        self.path = path or None  # type: ignore
        self.original_error = original_error
        if original_error:
            self.__traceback__ = original_error.__traceback__
            if original_error.__cause__:
                self.__cause__ = original_error.__cause__
            elif original_error.__context__:
                self.__context__ = original_error.__context__
            if not extensions:
                try:
                    # noinspection PyUnresolvedReferences
                    extensions = original_error.extensions  # type: ignore
                except AttributeError:
                    pass
        self.extensions = extensions or {}
        if not self.__traceback__:
            self.__traceback__ = exc_info()[2]

    def __str__(self) -> str:
        output = [self.message]
        if self.locations:
            output.extend(
                f"({location.line}:{location.column})" for location in self.locations
            )
        return " ".join(output)

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.locations:
            args.append(f"locations={self.locations!r}")
        if self.path:
            args.append(f"path={self.path!r}")
        if self.extensions:
            args.append(f"extensions={self.extensions!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, GraphQLError):
            return self.__class__ == other.__class__ and all(
                getattr(self, slot) == getattr(other, slot)
                for slot in self.__slots__
                if slot != "original_error"
            )
        if isinstance(other, dict):
            return self.formatted == other
        return False

    def __ne__(self, other: Any) -> bool:
        return not self == other

    @property
    def formatted(self) -> GraphQLFormattedError:
        """Get error formatted as an entry of the "errors" list of a GraphQL response.

        Keys without content are left out, so an error without locations is just a
        message.
        """
        formatted: GraphQLFormattedError = {
            "message": self.message or "An unknown error occurred.",
        }
        if self.locations is not None:
            formatted["locations"] = [location.formatted for location in self.locations]
        if self.path is not None:
            formatted["path"] = self.path
        if self.extensions:
            formatted["extensions"] = self.extensions
        return formatted
