from typing import Callable, List, Optional

from ..error import GraphQLError
from ..language import DocumentNode
from ..type import TypeRegistry

__all__ = ["ValidationContext"]


class ValidationContext:
    """Utility class providing a context for validation of variable defaults.

    An instance of this class is passed as the context attribute to the validation
    rule. It collects the recoverable errors in the order in which they are reported,
    or forwards them to a custom ``on_error`` callback, and it holds the single fatal
    error that makes the whole document invalid.
    """

    registry: TypeRegistry
    document: DocumentNode
    fatal_error: Optional[GraphQLError]

    def __init__(
        self,
        registry: TypeRegistry,
        ast: DocumentNode,
        on_error: Optional[Callable[[GraphQLError], None]] = None,
    ) -> None:
        self.registry = registry
        self.document = ast
        self.on_error = on_error
        self.fatal_error = None
        self._errors: List[GraphQLError] = []

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} errors={len(self._errors)}>"

    @property
    def errors(self) -> List[GraphQLError]:
        """The errors which have been collected so far, in reporting order."""
        return self._errors

    def report_error(self, error: GraphQLError) -> None:
        if self.on_error:
            self.on_error(error)
        else:
            self._errors.append(error)

    def report_fatal_error(self, error: GraphQLError) -> None:
        """Record the error that makes further validation pointless."""
        if self.fatal_error is None:
            self.fatal_error = error
