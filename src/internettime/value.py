"""Granularity-tracked temporal value.

This module contains the TemporalValue class for representing a date-time as
read from an RFC 3339 style token, where only the fields up to a recorded
granularity were actually supplied:

- Year only (``2021``)
- Year and month (``2021-03``)
- Date (``2021-03-05``)
- Date-time to the minute (``2021-03-05T10:20Z``)
- Date-time with seconds and optional fraction (``2021-03-05T10:20:30.123456789+02:00``)

Validation is split in two phases. Construction only checks each field
against its own bounds (second 60 included); calendar legality such as
February 30 is left to the narrowing conversions, which delegate to the
standard library.

Reference: RFC 3339, section 5.6
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum, auto
from typing import Self

from .calendar import NANOS_PER_MICRO, LocalDateTime, OffsetDateTime, YearMonth
from .exceptions import FieldBoundsError, MissingFieldError, MissingOffsetError
from .offset import TimezoneOffset


class Granularity(IntEnum):
    """Finest field supplied by the source text.

    Members are ordered coarse to fine; a value includes every field whose
    member compares less than or equal to its own granularity.
    """

    YEAR = auto()
    MONTH = auto()
    DAY = auto()
    HOUR = auto()
    MINUTE = auto()
    SECOND = auto()
    NANO = auto()


# =============================================================================
# Field Bounds
# =============================================================================


# Inclusive (minimum, maximum) per field; year is unbounded
FIELD_BOUNDS: dict[Granularity, tuple[int, int]] = {
    Granularity.MONTH: (1, 12),
    Granularity.DAY: (1, 31),
    Granularity.HOUR: (0, 23),
    Granularity.MINUTE: (0, 59),
    Granularity.SECOND: (0, 60),  # 60 lets leap-second values through
    Granularity.NANO: (0, 999_999_999),
}


def _presence(field: Granularity) -> Granularity:
    """Granularity from which a field counts as supplied."""
    # Fractions travel with seconds; there is no separate NANO factory
    if field is Granularity.NANO:
        return Granularity.SECOND
    return field


# =============================================================================
# Temporal Value
# =============================================================================


@dataclass(frozen=True)
class TemporalValue:
    """Date-time holder that records how much of it was specified.

    Fields finer than ``granularity`` are stored as zero and carry no
    meaning. Field attributes always return the stored integer, so callers
    that care about presence must ask ``has_granularity_at_least`` first.

    Examples:
        >>> TemporalValue.from_year_month(2021, 3).to_year_month()
        YearMonth(year=2021, month=3)

        >>> TemporalValue.from_year(2021).to_year_month()
        Traceback (most recent call last):
        ...
        internettime.exceptions.MissingFieldError: Missing field for year-month: requires month, found only year

        >>> value = TemporalValue.from_date(2023, 2, 30)  # accepted here
        >>> value.to_date()
        Traceback (most recent call last):
        ...
        ValueError: day is out of range for month
    """

    granularity: Granularity
    year: int
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    offset: TimezoneOffset | None = None

    def __post_init__(self) -> None:
        """Validate each field against its bounds.

        Raises:
            FieldBoundsError: If a supplied field is out of range, or a field
                finer than the granularity is not zero
        """
        for field, value in (
            (Granularity.MONTH, self.month),
            (Granularity.DAY, self.day),
            (Granularity.HOUR, self.hour),
            (Granularity.MINUTE, self.minute),
            (Granularity.SECOND, self.second),
            (Granularity.NANO, self.nanosecond),
        ):
            if not self.has_granularity_at_least(_presence(field)):
                if value != 0:
                    raise FieldBoundsError(field, 0, 0, value)
                continue

            minimum, maximum = FIELD_BOUNDS[field]
            if not minimum <= value <= maximum:
                raise FieldBoundsError(field, minimum, maximum, value)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_year(cls, year: int) -> Self:
        return cls(Granularity.YEAR, year)

    @classmethod
    def from_year_month(cls, year: int, month: int) -> Self:
        return cls(Granularity.MONTH, year, month)

    @classmethod
    def from_date(cls, year: int, month: int, day: int) -> Self:
        """Create a date value; day is not checked against the month length."""
        return cls(Granularity.DAY, year, month, day)

    @classmethod
    def from_date_time_minute(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        offset: TimezoneOffset | None,
    ) -> Self:
        """Create a date-time value without seconds.

        RFC 3339 has no local time form without seconds, so an offset is
        mandatory here.

        Raises:
            MissingOffsetError: If ``offset`` is None
            FieldBoundsError: If any field is out of range
        """
        if offset is None:
            raise MissingOffsetError("date-time without seconds")
        return cls(Granularity.MINUTE, year, month, day, hour, minute, offset=offset)

    @classmethod
    def from_date_time_full(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanosecond: int = 0,
        offset: TimezoneOffset | None = None,
    ) -> Self:
        """Create a date-time value with seconds and optional fraction.

        The granularity is SECOND whether or not a fraction was supplied.

        Raises:
            FieldBoundsError: If any field is out of range
        """
        return cls(Granularity.SECOND, year, month, day, hour, minute, second, nanosecond, offset)

    @classmethod
    def from_offset_datetime(cls, value: OffsetDateTime) -> Self:
        return cls.from_date_time_full(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.nanosecond,
            value.offset,
        )

    @classmethod
    def from_datetime(cls, value: datetime) -> Self:
        """Create a fully specified value from a standard library datetime.

        Aware datetimes keep their UTC offset; naive ones have none.

        Raises:
            ValueError: If the offset is not a whole number of seconds
        """
        delta = value.utcoffset()
        return cls.from_date_time_full(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond * NANOS_PER_MICRO,
            TimezoneOffset.of_timedelta(delta) if delta is not None else None,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_granularity_at_least(self, target: Granularity) -> bool:
        """True if ``target`` is the same as or coarser than this value's granularity."""
        return target <= self.granularity

    def assert_min_granularity(self, target: Granularity) -> Self:
        """Return self if it is at least as fine as ``target``.

        Raises:
            MissingFieldError: If the granularity is coarser than ``target``
        """
        self._require(f"{target.name.lower()} granularity", target)
        return self

    def _require(self, conversion: str, target: Granularity) -> None:
        if not self.has_granularity_at_least(target):
            raise MissingFieldError(conversion, target, self.granularity)

    # -------------------------------------------------------------------------
    # Narrowing conversions
    # -------------------------------------------------------------------------

    def to_year_month(self) -> YearMonth:
        """Convert to YearMonth, discarding finer fields.

        Raises:
            MissingFieldError: If the month was not supplied
        """
        self._require("year-month", Granularity.MONTH)
        return YearMonth(self.year, self.month)

    def to_date(self) -> date:
        """Convert to a standard library date, discarding finer fields.

        Raises:
            MissingFieldError: If the day was not supplied
            ValueError: From ``datetime.date`` if the date does not exist
        """
        self._require("date", Granularity.DAY)
        return date(self.year, self.month, self.day)

    def to_local_datetime(self) -> LocalDateTime:
        """Convert to LocalDateTime, discarding any offset.

        Seconds and nanoseconds are zero for a MINUTE value.

        Raises:
            MissingFieldError: If the minute was not supplied
            ValueError: If the date-time does not exist (including second 60)
        """
        self._require("local date-time", Granularity.MINUTE)
        return LocalDateTime(self.year, self.month, self.day, self.hour, self.minute, self.second, self.nanosecond)

    def to_offset_datetime(self) -> OffsetDateTime:
        """Convert to OffsetDateTime.

        Raises:
            MissingFieldError: If the minute was not supplied
            MissingOffsetError: If the granularity suffices but no offset was supplied
            ValueError: If the date-time does not exist (including second 60)
        """
        self._require("offset date-time", Granularity.MINUTE)
        if self.offset is None:
            raise MissingOffsetError("offset date-time")

        return OffsetDateTime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond,
            offset=self.offset,
        )
