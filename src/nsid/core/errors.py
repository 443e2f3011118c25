"""
Error types for identifier decoding and validation.
"""

from typing import Any


class InvalidIdError(ValueError):
    """
    Raised when an identifier or one of its segments is invalid.

    Covers empty input, a missing separator, an id segment that cannot be
    converted to its target type, and a timestamp segment that cannot be
    parsed. Subclasses ValueError so callers may catch either.
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value
