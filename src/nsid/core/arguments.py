"""
Argument precondition helpers.

Small guards used at construction and decoding boundaries. Each returns its
argument unchanged so it can be used inline:

    >>> namespace = require_non_empty(raw, "Namespace cannot be empty")
"""

from typing import TypeVar

from nsid.core.errors import InvalidIdError

T = TypeVar("T")

ERROR_NULL_ARG = "Argument cannot be None"
ERROR_EMPTY_STRING = "String argument cannot be empty"


def require_non_null(argument: T | None, message: str = ERROR_NULL_ARG) -> T:
    """Return argument, or raise InvalidIdError if it is None."""
    if argument is None:
        raise InvalidIdError(message)
    return argument


def require_non_empty(argument: str | None, message: str = ERROR_EMPTY_STRING) -> str:
    """Return argument, or raise InvalidIdError if it is None or blank."""
    if argument is None or not argument.strip():
        raise InvalidIdError(message, argument)
    return argument
