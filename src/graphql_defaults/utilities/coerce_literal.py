import logging
from typing import Any, NamedTuple, Optional, Union

from ..error import GraphQLError
from ..language import ValueNode, print_ast
from ..pyutils import Undefined
from ..type import GraphQLScalarType

__all__ = ["Accepted", "CoercionOutcome", "Rejected", "coerce_literal"]

logger = logging.getLogger(__name__)


class Accepted(NamedTuple):
    """The scalar accepted the literal and coerced it to the given value."""

    value: Any


class Rejected(NamedTuple):
    """The scalar rejected the literal, optionally with a custom message."""

    message: Optional[str] = None


CoercionOutcome = Union[Accepted, Rejected]


def coerce_literal(type_: GraphQLScalarType, value_node: ValueNode) -> CoercionOutcome:
    """Coerce a literal value with the coercion function of a scalar type.

    Scalars determine if a literal value is valid via ``parse_literal()``, which for
    custom scalars converts the literal to its native Python value and passes it to
    their ``parse_value()`` function. That function may return ``Undefined`` or a
    ``Rejected`` outcome, or raise an error, to indicate failure. The message of a
    raised ``GraphQLError`` is kept as a custom message, all other errors only make
    the literal invalid. No error raised by the coercion function leaves this
    function.
    """
    try:
        result = type_.parse_literal(value_node)
    except GraphQLError as error:
        logger.debug(
            "Scalar %s rejected %s: %s",
            type_.name,
            print_ast(value_node),
            error.message,
        )
        return Rejected(error.message)
    except Exception as error:
        logger.debug(
            "Scalar %s failed to coerce %s.",
            type_.name,
            print_ast(value_node),
            exc_info=error,
        )
        return Rejected()
    if isinstance(result, (Accepted, Rejected)):
        return result
    if result is Undefined:
        return Rejected()
    return Accepted(result)
