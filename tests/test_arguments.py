"""Tests for argument precondition helpers."""

import pytest

from nsid.core.arguments import (
    ERROR_EMPTY_STRING,
    ERROR_NULL_ARG,
    require_non_empty,
    require_non_null,
)
from nsid.core.errors import InvalidIdError


class TestRequireNonNull:
    """Tests for require_non_null()."""

    @pytest.mark.parametrize("argument", [0, "", [], False, "x"])
    def test_returns_argument(self, argument) -> None:
        """Test that any non-None value passes through unchanged."""
        assert require_non_null(argument) is argument

    def test_none_default_message(self) -> None:
        """Test the default failure message."""
        with pytest.raises(InvalidIdError, match=ERROR_NULL_ARG):
            require_non_null(None)

    def test_none_custom_message(self) -> None:
        """Test that a custom message is used."""
        with pytest.raises(InvalidIdError, match="namespace is required"):
            require_non_null(None, "namespace is required")


class TestRequireNonEmpty:
    """Tests for require_non_empty()."""

    def test_returns_argument(self) -> None:
        """Test that non-blank text is returned untrimmed."""
        assert require_non_empty(" a ") == " a "

    @pytest.mark.parametrize("argument", [None, "", "  ", "\t\n"])
    def test_blank_rejected(self, argument) -> None:
        """Test that None and blank strings are rejected."""
        with pytest.raises(InvalidIdError, match=ERROR_EMPTY_STRING) as exc_info:
            require_non_empty(argument)
        assert exc_info.value.value == argument

    def test_error_is_value_error(self) -> None:
        """Test that callers may catch ValueError."""
        with pytest.raises(ValueError):
            require_non_empty("", "id is blank")
