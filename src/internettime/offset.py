"""UTC offset value type.

Offsets are handed to this package already parsed. ``TimezoneOffset`` only
guarantees the range accepted by ``datetime.timezone`` and offers conversions
to and from the standard library.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta, timezone, tzinfo
from typing import ClassVar

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600

# datetime.timezone requires -24h < offset < 24h
MAX_OFFSET_SECONDS = 24 * SECONDS_PER_HOUR - 1


@dataclass(frozen=True)
class TimezoneOffset:
    """Signed offset from UTC in whole seconds.

    Examples:
        >>> str(TimezoneOffset.of_hours_minutes(2, 0))
        '+02:00'
        >>> str(TimezoneOffset.of_hours_minutes(-5, -30))
        '-05:30'
        >>> str(TimezoneOffset.UTC)
        'Z'
    """

    UTC: ClassVar[TimezoneOffset]

    total_seconds: int

    def __post_init__(self) -> None:
        if not -MAX_OFFSET_SECONDS <= self.total_seconds <= MAX_OFFSET_SECONDS:
            raise ValueError(
                f"Offset out of range: {self.total_seconds}s "
                f"(expected -{MAX_OFFSET_SECONDS}s to +{MAX_OFFSET_SECONDS}s)"
            )

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int = 0) -> TimezoneOffset:
        """Create an offset from hours and minutes.

        Both components must carry the same sign (``-5, -30`` for -05:30).

        Raises:
            ValueError: If the signs disagree or minutes is outside -59..59
        """
        if not -59 <= minutes <= 59:
            raise ValueError(f"Invalid offset minutes: {minutes}")
        if (hours > 0 and minutes < 0) or (hours < 0 and minutes > 0):
            raise ValueError(f"Offset hours and minutes must have the same sign, got {hours}h {minutes}m")
        return cls(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE)

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> TimezoneOffset:
        return cls(total_seconds)

    @classmethod
    def of_timezone(cls, tz: tzinfo) -> TimezoneOffset:
        """Create an offset from a fixed-offset tzinfo such as ``datetime.timezone``.

        Raises:
            ValueError: If the tzinfo has no fixed offset or it is not whole seconds
        """
        delta = tz.utcoffset(None)
        if delta is None:
            raise ValueError(f"tzinfo {tz!r} has no fixed UTC offset")
        return cls.of_timedelta(delta)

    @classmethod
    def of_timedelta(cls, delta: timedelta) -> TimezoneOffset:
        """Create an offset from a ``timedelta`` as returned by ``datetime.utcoffset()``.

        Raises:
            ValueError: If the offset is not a whole number of seconds
        """
        if delta.microseconds:
            raise ValueError(f"Offset {delta} is not a whole number of seconds")
        return cls(delta.days * 86400 + delta.seconds)

    @property
    def is_utc(self) -> bool:
        """True if the offset is zero."""
        return self.total_seconds == 0

    @property
    def hours(self) -> int:
        """Signed whole hours of the offset."""
        return _signed_divmod(self.total_seconds, SECONDS_PER_HOUR)[0]

    @property
    def minutes(self) -> int:
        """Signed minutes remaining after the whole hours."""
        remainder = _signed_divmod(self.total_seconds, SECONDS_PER_HOUR)[1]
        return _signed_divmod(remainder, SECONDS_PER_MINUTE)[0]

    def as_timezone(self) -> timezone:
        """Convert to a standard library ``timezone``."""
        if self.is_utc:
            return timezone.utc
        return timezone(timedelta(seconds=self.total_seconds))

    def __str__(self) -> str:
        if self.is_utc:
            return "Z"

        sign = "-" if self.total_seconds < 0 else "+"
        hours, rest = divmod(abs(self.total_seconds), SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        if seconds:
            return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{sign}{hours:02d}:{minutes:02d}"


def _signed_divmod(value: int, divisor: int) -> tuple[int, int]:
    """divmod truncating toward zero, so both parts keep the sign of value."""
    quotient, remainder = divmod(abs(value), divisor)
    if value < 0:
        return -quotient, -remainder
    return quotient, remainder


TimezoneOffset.UTC = TimezoneOffset(0)
