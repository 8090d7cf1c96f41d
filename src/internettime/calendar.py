"""Narrow calendar representations produced by TemporalValue conversions.

The standard library ``datetime`` stops at microseconds and at year 9999, so
the date-time types here keep their own fields. Day of month is checked with
proleptic Gregorian month lengths for any year; hour, minute and second are
checked by building a standard library ``time``. Either failure is a
``ValueError``. Only the standard library views (``date``, ``to_datetime``)
are limited to years 1-9999.
"""

from __future__ import annotations

from calendar import isleap
from dataclasses import dataclass, field
from datetime import date, datetime, time

from .offset import TimezoneOffset

NANOS_PER_MICRO = 1_000
MAX_NANOSECOND = 999_999_999

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month of the proleptic Gregorian calendar, for any year.

    Raises:
        ValueError: If month is outside 1-12
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and isleap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True)
class YearMonth:
    """A year and month without a day, e.g. ``2021-03``."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Invalid month: {self.month}")

    def at_day(self, day: int) -> date:
        """Combine with a day of month into a standard library ``date``."""
        return date(self.year, self.month, day)


@dataclass(frozen=True)
class LocalDateTime:
    """Date-time without offset, with nanosecond precision.

    Examples:
        >>> LocalDateTime(2020, 2, 29, 23, 59, 59, 500_000_000).to_datetime()
        datetime.datetime(2020, 2, 29, 23, 59, 59, 500000)
        >>> LocalDateTime(2021, 2, 29, 0, 0)
        Traceback (most recent call last):
        ...
        ValueError: day 29 is out of range for 2021-02
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise ValueError(f"day {self.day} is out of range for {self.year:04d}-{self.month:02d}")
        time(self.hour, self.minute, self.second)
        if not 0 <= self.nanosecond <= MAX_NANOSECOND:
            raise ValueError(f"Invalid nanosecond: {self.nanosecond}")

    @classmethod
    def of_datetime(cls, dt: datetime, nanosecond: int | None = None) -> LocalDateTime:
        """Create from a standard library datetime, ignoring any tzinfo.

        Args:
            dt: Source datetime
            nanosecond: Replaces the datetime's microseconds when given
        """
        if nanosecond is None:
            nanosecond = dt.microsecond * NANOS_PER_MICRO
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, nanosecond)

    @property
    def date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def time(self) -> time:
        """Time of day, truncated to microseconds."""
        return time(self.hour, self.minute, self.second, self.nanosecond // NANOS_PER_MICRO)

    def to_datetime(self) -> datetime:
        """Convert to a naive standard library datetime, truncated to microseconds."""
        return datetime.combine(self.date, self.time)


@dataclass(frozen=True)
class OffsetDateTime(LocalDateTime):
    """Date-time at a fixed UTC offset, with nanosecond precision.

    The fields are the local wall-clock values at ``offset``; nothing is
    normalized to UTC.
    """

    offset: TimezoneOffset = field(kw_only=True)

    @classmethod
    def of_datetime(cls, dt: datetime, nanosecond: int | None = None) -> OffsetDateTime:
        """Create from an aware standard library datetime.

        Raises:
            ValueError: If ``dt`` is naive
        """
        delta = dt.utcoffset()
        if delta is None:
            raise ValueError(f"datetime {dt.isoformat()} has no UTC offset")
        if nanosecond is None:
            nanosecond = dt.microsecond * NANOS_PER_MICRO
        return cls(
            dt.year,
            dt.month,
            dt.day,
            dt.hour,
            dt.minute,
            dt.second,
            nanosecond,
            offset=TimezoneOffset.of_timedelta(delta),
        )

    def to_local(self) -> LocalDateTime:
        """Drop the offset, keeping the wall-clock fields."""
        return LocalDateTime(self.year, self.month, self.day, self.hour, self.minute, self.second, self.nanosecond)

    def to_datetime(self) -> datetime:
        """Convert to an aware standard library datetime, truncated to microseconds."""
        return datetime.combine(self.date, self.time, tzinfo=self.offset.as_timezone())
