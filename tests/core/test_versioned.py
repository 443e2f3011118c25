"""Tests for the Versioned mixin."""

import pytest

from nsid.core.versioned import Versioned, compare_values


class Release(Versioned):
    """Minimal versioned value ordered by a number."""

    def __init__(self, number: int):
        self.number = number

    def compare_to(self, other: "Release") -> int:
        return compare_values(self.number, other.number)


class TestCompareValues:
    """Tests for compare_values()."""

    @pytest.mark.parametrize(
        "left, right, expected",
        [(1, 2, -1), (2, 1, 1), (3, 3, 0), ("a", "b", -1), ((1, 2), (1, 1), 1)],
    )
    def test_sign(self, left, right, expected: int) -> None:
        """Test that the result is exactly -1, 0 or 1."""
        assert compare_values(left, right) == expected


class TestVersioned:
    """Tests for operators derived from compare_to()."""

    def test_before_after(self) -> None:
        """Test the strict predicates."""
        assert Release(1).before(Release(2))
        assert Release(2).after(Release(1))
        assert not Release(1).before(Release(1))
        assert not Release(1).after(Release(1))

    def test_operators(self) -> None:
        """Test the rich comparison operators."""
        assert Release(1) < Release(2)
        assert Release(1) <= Release(1)
        assert Release(3) > Release(2)
        assert Release(3) >= Release(3)
        assert max([Release(1), Release(5), Release(3)]).number == 5

    def test_non_versioned_operand(self) -> None:
        """Test that ordering against other objects is a TypeError."""
        with pytest.raises(TypeError):
            Release(1) < 1  # type: ignore[operator]

    def test_compare_to_required(self) -> None:
        """Test that subclasses without compare_to cannot be instantiated."""

        class Unordered(Versioned):
            pass

        with pytest.raises(TypeError):
            Unordered()
