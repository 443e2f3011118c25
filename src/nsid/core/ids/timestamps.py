"""
Nanosecond-precision timestamps for temporal identifiers.

A Timestamp is a point on the UTC timeline stored as whole epoch seconds plus
a non-negative nanosecond adjustment. Its text form is an ISO-8601 instant:

    - 1977-11-13T14:18:00Z
    - 1977-11-13T14:18:00.250Z
    - 1977-11-13T14:18:00.000000001Z

Seconds are always written. A non-zero fraction is written with 3, 6 or 9
digits, whichever is the shortest exact form. Supported years are 0001-9999.
"""

import calendar
import re
import time
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nsid.core.errors import InvalidIdError

NANOS_PER_SECOND = 1_000_000_000

# 0001-01-01T00:00:00Z and 9999-12-31T23:59:59Z
MIN_SECONDS = -62_135_596_800
MAX_SECONDS = 253_402_300_799

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# YYYY-MM-DDTHH:MM:SS[.f{1,9}]Z
_INSTANT_REGEX = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]{1,9}))?Z",
    re.IGNORECASE,
)


@total_ordering
class Timestamp(BaseModel):
    """
    Instant with second and nanosecond components.

    Two timestamps are equal iff both components are equal and order by
    seconds, then nanos. Seconds are limited to years 0001-9999 so every
    value has a text form. Validation also accepts a timezone-aware datetime
    or an ISO-8601 instant string in place of the two components.
    """

    seconds: int = Field(ge=MIN_SECONDS, le=MAX_SECONDS)
    nanos: int = Field(default=0, ge=0, lt=NANOS_PER_SECOND)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def coerce_instant(cls, data: Any) -> Any:
        """Convert datetime and ISO-8601 string inputs to components."""
        if isinstance(data, datetime):
            return _components_from_datetime(data)
        if isinstance(data, str):
            parsed = cls.parse(data)
            return {"seconds": parsed.seconds, "nanos": parsed.nanos}
        return data

    @classmethod
    def of(cls, seconds: int, nanos: int = 0) -> "Timestamp":
        """Build a timestamp from epoch seconds and a nanosecond adjustment."""
        return cls(seconds=seconds, nanos=nanos)

    @classmethod
    def now(cls) -> "Timestamp":
        """Read the current system time once, at nanosecond resolution."""
        seconds, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return cls(seconds=seconds, nanos=nanos)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        """
        Convert a timezone-aware datetime.

        Raises:
            ValueError: If the datetime is naive
        """
        return cls(**_components_from_datetime(value))

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """
        Parse an ISO-8601 UTC instant.

        Args:
            text: Instant such as "2008-01-05T22:00:00Z"

        Returns:
            Parsed Timestamp

        Raises:
            InvalidIdError: If the text is not a valid instant

        Examples:
            >>> Timestamp.parse("1970-01-01T00:00:01.5Z")
            Timestamp(seconds=1, nanos=500000000)
            >>> Timestamp.parse("1977-11-13")
            Traceback (most recent call last):
                ...
            nsid.core.errors.InvalidIdError: Invalid timestamp: '1977-11-13'
        """
        match = _INSTANT_REGEX.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidIdError(f"Invalid timestamp: {text!r}", text)

        year, month, day, hour, minute, second, fraction = match.groups()
        try:
            moment = datetime(
                int(year),
                int(month),
                int(day),
                int(hour),
                int(minute),
                int(second),
                tzinfo=timezone.utc,
            )
        except ValueError as e:
            raise InvalidIdError(f"Invalid timestamp: {text!r} ({e})", text) from e

        nanos = int(fraction.ljust(9, "0")) if fraction else 0
        return cls(seconds=calendar.timegm(moment.utctimetuple()), nanos=nanos)

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime (truncated to microseconds)."""
        return _EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)

    def __str__(self) -> str:
        moment = _EPOCH + timedelta(seconds=self.seconds)
        text = (
            f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
            f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        )
        if self.nanos:
            text += "." + _format_fraction(self.nanos)
        return text + "Z"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return (self.seconds, self.nanos) < (other.seconds, other.nanos)


# Current-time source used wherever a timestamp argument is omitted
Clock = Callable[[], Timestamp]

# Inputs accepted wherever a Timestamp field is validated
TimestampLike = Timestamp | datetime | str


def system_clock() -> Timestamp:
    """Default Clock: the current system time."""
    return Timestamp.now()


def _components_from_datetime(value: datetime) -> dict[str, int]:
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("Timestamp requires a timezone-aware datetime")
    delta = value - _EPOCH
    return {
        "seconds": delta.days * 86_400 + delta.seconds,
        "nanos": delta.microseconds * 1000,
    }


def _format_fraction(nanos: int) -> str:
    if nanos % 1_000_000 == 0:
        return f"{nanos // 1_000_000:03d}"
    if nanos % 1000 == 0:
        return f"{nanos // 1000:06d}"
    return f"{nanos:09d}"
