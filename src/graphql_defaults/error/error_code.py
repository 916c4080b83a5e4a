from enum import Enum

__all__ = ["ErrorCode"]


class ErrorCode(Enum):
    """Codes put into the extensions of default value diagnostics"""

    DEFAULT_VALUE_INVALID_TYPE = "defaultValueInvalidType"
    DEFAULT_VALUE_INVALID_ON_NON_NULL_VARIABLE = "defaultValueInvalidOnNonNullVariable"
