"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .inspect import inspect
from .is_finite import is_finite
from .is_integer import is_integer
from .undefined import Undefined, UndefinedType

__all__ = [
    "inspect",
    "is_finite",
    "is_integer",
    "Undefined",
    "UndefinedType",
]
