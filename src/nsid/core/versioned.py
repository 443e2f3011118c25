"""
Version ordering shared by the identifier models.

A Versioned value knows where it sits relative to another version of itself.
Each concrete type supplies compare_to(); the rich comparison operators and
the before()/after() predicates are derived from it here.
"""

from abc import ABC, abstractmethod
from typing import Any


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison: negative, zero or positive."""
    return (left > right) - (left < right)


class Versioned(ABC):
    """
    Mixin for values with a natural version order.

    compare_to() only accepts operands of the same concrete identifier type;
    anything else is a programming error and raises TypeError.
    """

    @abstractmethod
    def compare_to(self, other: Any) -> int:
        """Negative, zero or positive as self sorts before, with or after other."""

    def before(self, other: Any) -> bool:
        """True if this version sorts strictly before other."""
        return self.compare_to(other) < 0

    def after(self, other: Any) -> bool:
        """True if this version sorts strictly after other."""
        return self.compare_to(other) > 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Versioned):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Versioned):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Versioned):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Versioned):
            return NotImplemented
        return self.compare_to(other) >= 0
