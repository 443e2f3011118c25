"""
Tests for Timestamp parsing, formatting and ordering.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from nsid.core.ids import InvalidIdError, Timestamp, system_clock


class TestParse:
    """Tests for Timestamp.parse()."""

    @pytest.mark.parametrize(
        "text, seconds, nanos",
        [
            ("1970-01-01T00:00:00Z", 0, 0),
            ("1977-11-13T14:18:00Z", 248278680, 0),
            ("2008-01-05T22:00:00Z", 1199570400, 0),
            ("1970-01-01T00:00:01.5Z", 1, 500_000_000),
            ("1970-01-01T00:00:00.000000001Z", 0, 1),
            ("1969-12-31T23:59:59Z", -1, 0),
            ("0001-01-01T00:00:00Z", -62135596800, 0),
            ("2008-01-05t22:00:00z", 1199570400, 0),
        ],
    )
    def test_parse_valid(self, text: str, seconds: int, nanos: int) -> None:
        """Test parsing of valid ISO-8601 instants."""
        assert Timestamp.parse(text) == Timestamp.of(seconds, nanos)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "1977-11-13",
            "1977-11-13T14:18:00",
            "1977-11-13T14:18:00+00:00",
            "1977-11-13 14:18:00Z",
            "1977-13-13T14:18:00Z",
            "1977-02-30T14:18:00Z",
            "1977-11-13T25:18:00Z",
            "1977-11-13T14:18:00.1234567890Z",
            "not a time",
            "1977-11-13T14:18:00Z\n",
            " 1977-11-13T14:18:00Z",
            "\u0661\u0669\u0667\u0667-11-13T14:18:00Z",
            "1977-11-13T14:18:00.\uff15Z",
        ],
    )
    def test_parse_invalid(self, text: str) -> None:
        """Test that anything other than a UTC instant is rejected."""
        with pytest.raises(InvalidIdError) as exc_info:
            Timestamp.parse(text)
        assert exc_info.value.value == text

    def test_parse_non_string(self) -> None:
        """Test that non-string input is rejected."""
        with pytest.raises(InvalidIdError):
            Timestamp.parse(None)  # type: ignore[arg-type]


class TestFormat:
    """Tests for the canonical text form."""

    @pytest.mark.parametrize(
        "seconds, nanos, expected",
        [
            (248278680, 0, "1977-11-13T14:18:00Z"),
            (0, 250_000_000, "1970-01-01T00:00:00.250Z"),
            (0, 123_000, "1970-01-01T00:00:00.000123Z"),
            (0, 1, "1970-01-01T00:00:00.000000001Z"),
            (0, 120_000_000, "1970-01-01T00:00:00.120Z"),
            (-1, 0, "1969-12-31T23:59:59Z"),
            (253402300799, 999_999_999, "9999-12-31T23:59:59.999999999Z"),
        ],
    )
    def test_str(self, seconds: int, nanos: int, expected: str) -> None:
        """Test that fractions use the shortest of 3, 6 or 9 digits."""
        assert str(Timestamp.of(seconds, nanos)) == expected

    def test_parse_format_agree(self) -> None:
        """Test that formatted text parses back to the same timestamp."""
        ts = Timestamp.of(1199570400, 7_000)
        assert Timestamp.parse(str(ts)) == ts

    def test_short_fraction_normalized(self) -> None:
        """Test that a 1-digit fraction is rewritten as milliseconds."""
        assert str(Timestamp.parse("1970-01-01T00:00:01.5Z")) == "1970-01-01T00:00:01.500Z"


class TestConstruction:
    """Tests for building timestamps."""

    @pytest.mark.parametrize("nanos", [-1, 1_000_000_000])
    def test_nanos_out_of_range(self, nanos: int) -> None:
        """Test that nanos must lie in [0, 1e9)."""
        with pytest.raises(ValidationError):
            Timestamp.of(0, nanos)

    def test_from_aware_datetime(self) -> None:
        """Test conversion of an aware datetime in any zone."""
        utc = datetime(2008, 1, 5, 22, 0, tzinfo=timezone.utc)
        plus_two = datetime(2008, 1, 6, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert Timestamp.from_datetime(utc) == Timestamp.of(1199570400)
        assert Timestamp.from_datetime(plus_two) == Timestamp.of(1199570400)

    def test_from_datetime_keeps_microseconds(self) -> None:
        """Test that microseconds become nanos."""
        moment = datetime(1970, 1, 1, 0, 0, 1, 250, tzinfo=timezone.utc)
        assert Timestamp.from_datetime(moment) == Timestamp.of(1, 250_000)

    def test_naive_datetime_rejected(self) -> None:
        """Test that a naive datetime is rejected."""
        with pytest.raises(ValueError):
            Timestamp.from_datetime(datetime(2008, 1, 5, 22, 0))

    def test_validate_from_string_and_datetime(self) -> None:
        """Test that validation coerces text and datetimes."""
        moment = datetime(1977, 11, 13, 14, 18, tzinfo=timezone.utc)
        assert Timestamp.model_validate("1977-11-13T14:18:00Z") == Timestamp.of(248278680)
        assert Timestamp.model_validate(moment) == Timestamp.of(248278680)

    def test_to_datetime(self) -> None:
        """Test conversion back to an aware UTC datetime."""
        moment = Timestamp.of(1199570400, 1_500).to_datetime()
        assert moment == datetime(2008, 1, 5, 22, 0, 0, 1, tzinfo=timezone.utc)
        assert moment.tzinfo is not None

    def test_now_and_system_clock(self) -> None:
        """Test that now() and system_clock() track the wall clock."""
        before = datetime.now(timezone.utc) - timedelta(seconds=1)
        now = Timestamp.now()
        clocked = system_clock()
        after = datetime.now(timezone.utc) + timedelta(seconds=1)
        assert Timestamp.from_datetime(before) <= now <= clocked
        assert clocked <= Timestamp.from_datetime(after)
        assert 0 <= now.nanos < 1_000_000_000

    def test_immutable(self) -> None:
        """Test that Timestamp is immutable (frozen)."""
        ts = Timestamp.of(1)
        with pytest.raises(ValidationError):
            ts.seconds = 2  # type: ignore[misc]


class TestOrdering:
    """Tests for equality and ordering."""

    def test_order_by_seconds_then_nanos(self) -> None:
        """Test lexicographic ordering of components."""
        assert Timestamp.of(1, 999) < Timestamp.of(2, 0)
        assert Timestamp.of(1, 1) < Timestamp.of(1, 2)
        assert Timestamp.of(-1, 999_999_999) < Timestamp.of(0)
        assert Timestamp.of(5, 5) >= Timestamp.of(5, 5)
        assert max(Timestamp.of(3), Timestamp.of(1, 9)) == Timestamp.of(3)

    def test_equality_and_hash(self) -> None:
        """Test equality over both components."""
        assert Timestamp.of(1, 2) == Timestamp.of(1, 2)
        assert Timestamp.of(1, 2) != Timestamp.of(1, 3)
        assert hash(Timestamp.of(1, 2)) == hash(Timestamp.of(1, 2))
        assert Timestamp.of(1) != None  # noqa: E711

    def test_compare_with_other_type_rejected(self) -> None:
        """Test that ordering against a non-timestamp is a TypeError."""
        with pytest.raises(TypeError):
            Timestamp.of(1) < 2  # type: ignore[operator]


class TestRange:
    """Tests for the supported range of years 0001-9999."""

    @pytest.mark.parametrize(
        "seconds, nanos, text",
        [
            (-62135596800, 0, "0001-01-01T00:00:00Z"),
            (253402300799, 999_999_999, "9999-12-31T23:59:59.999999999Z"),
        ],
    )
    def test_edges(self, seconds: int, nanos: int, text: str) -> None:
        """Test that both ends of the range format and parse."""
        ts = Timestamp.of(seconds, nanos)
        assert str(ts) == text
        assert Timestamp.parse(text) == ts
        assert ts.to_datetime().tzinfo is not None

    @pytest.mark.parametrize("seconds", [-62135596801, 253402300800, 10**12])
    def test_past_edges_rejected(self, seconds: int) -> None:
        """Test that seconds outside the range fail validation."""
        with pytest.raises(ValidationError):
            Timestamp.of(seconds)
