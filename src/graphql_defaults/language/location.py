"""Source locations"""

from __future__ import annotations

from typing import NamedTuple, TypedDict

__all__ = ["FormattedSourceLocation", "SourceLocation"]


class FormattedSourceLocation(TypedDict):
    """Formatted source location"""

    line: int
    column: int


class SourceLocation(NamedTuple):
    """Represents a 1-indexed line and column in the query document."""

    line: int
    column: int

    @property
    def formatted(self) -> FormattedSourceLocation:
        """Get formatted source location."""
        return {"line": self.line, "column": self.column}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, dict):
            return self.formatted == other
        return tuple(self) == other

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.line, self.column))
