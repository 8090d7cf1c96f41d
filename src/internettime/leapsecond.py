"""Leap second signalling.

A seconds field of 60 is not turned into a TemporalValue. The parser raises
LeapSecondError instead, carrying the nearest real date-time (one second
past hh:mm:59) and whether the minute sits where a leap second can be
inserted at all: 23:59 UTC on June 30 or December 31.

The boundary flag is structural only. Whether a leap second was actually
scheduled needs an external table, which callers may plug in through the
``authority`` predicate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .calendar import LocalDateTime, OffsetDateTime, days_in_month
from .offset import TimezoneOffset

logger = logging.getLogger(__name__)

LEAP_SECOND = 60

# (month, day, hour, minute) of the only minutes that may hold a leap second
LEAP_SECOND_BOUNDARIES: frozenset[tuple[int, int, int, int]] = frozenset(
    {
        (6, 30, 23, 59),
        (12, 31, 23, 59),
    }
)

LeapSecondAuthority = Callable[[int, int], bool]
"""Predicate ``(year, month) -> bool`` telling if a leap second was scheduled."""


class LeapSecondError(Exception):
    """Raised when a seconds value of 60 is observed.

    This is an alternate outcome rather than a defect, so it does not derive
    from InternetTimeError; callers decide whether to accept
    ``nearest_datetime`` or reject the input.

    Attributes:
        nearest_datetime: Corrected candidate, one second past hh:mm:59 with
            calendar rollover applied. An OffsetDateTime when an offset was
            supplied, otherwise a LocalDateTime.
        seconds_in_minute: Raw seconds value that triggered the signal
        is_verified_valid_leap_year_month: True if the minute is 23:59 UTC on
            June 30 or December 31 (and the authority agreed, if one was given)
    """

    nearest_datetime: LocalDateTime | OffsetDateTime
    seconds_in_minute: int
    is_verified_valid_leap_year_month: bool

    def __init__(
        self,
        nearest_datetime: LocalDateTime | OffsetDateTime,
        seconds_in_minute: int,
        is_verified_valid_leap_year_month: bool,
    ) -> None:
        self.nearest_datetime = nearest_datetime
        self.seconds_in_minute = seconds_in_minute
        self.is_verified_valid_leap_year_month = is_verified_valid_leap_year_month
        super().__init__(
            f"Leap second detected (second={seconds_in_minute}), "
            f"nearest valid date-time is {_isoformat(nearest_datetime)}"
            + ("" if is_verified_valid_leap_year_month else " (not on a leap second boundary)")
        )

    def __reduce__(self) -> tuple[type[LeapSecondError], tuple[LocalDateTime | OffsetDateTime, int, bool]]:
        return type(self), (self.nearest_datetime, self.seconds_in_minute, self.is_verified_valid_leap_year_month)

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int = LEAP_SECOND,
        nanosecond: int = 0,
        offset: TimezoneOffset | None = None,
        authority: LeapSecondAuthority | None = None,
    ) -> LeapSecondError:
        """Build the signal for a date-time whose seconds field overflowed.

        Args:
            year, month, day, hour, minute: Fields as read from the source
            second: Raw seconds value, kept for diagnostics
            nanosecond: Fraction of the second, carried into the candidate
            offset: UTC offset if the source supplied one
            authority: Optional leap second table lookup

        Raises:
            ValueError: If the date-time does not exist
        """
        nearest = nearest_datetime(year, month, day, hour, minute, nanosecond, offset)
        on_boundary = is_leap_second_boundary(month, day, hour, minute, offset)
        if on_boundary and authority is not None:
            on_boundary = authority(year, month)

        logger.debug(
            "Leap second at %04d-%02d-%02dT%02d:%02d:%02d%s, boundary=%s",
            year,
            month,
            day,
            hour,
            minute,
            second,
            offset if offset is not None else "",
            on_boundary,
        )
        return cls(nearest, second, on_boundary)

    @property
    def corrected_candidate(self) -> LocalDateTime | OffsetDateTime:
        return self.nearest_datetime

    @property
    def observed_seconds_field(self) -> int:
        return self.seconds_in_minute

    @property
    def is_on_known_leap_boundary(self) -> bool:
        return self.is_verified_valid_leap_year_month


def nearest_datetime(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    nanosecond: int = 0,
    offset: TimezoneOffset | None = None,
) -> LocalDateTime | OffsetDateTime:
    """Return hh:mm:59 plus one second, rolling over minute, hour, day, month and year.

    Rollover uses proleptic Gregorian month lengths and works for any year.
    The fraction is carried unchanged. The result stays at ``offset``; it is
    not normalized to UTC.

    Examples:
        >>> nearest_datetime(2016, 12, 31, 23, 59)
        LocalDateTime(year=2017, month=1, day=1, hour=0, minute=0, second=0, nanosecond=0)

    Raises:
        ValueError: If the date-time does not exist
    """
    LocalDateTime(year, month, day, hour, minute, 59, nanosecond)

    minute += 1
    if minute == 60:
        minute = 0
        hour += 1
    if hour == 24:
        hour = 0
        day += 1
    if day > days_in_month(year, month):
        day = 1
        month += 1
    if month == 13:
        month = 1
        year += 1

    if offset is None:
        return LocalDateTime(year, month, day, hour, minute, 0, nanosecond)
    return OffsetDateTime(year, month, day, hour, minute, 0, nanosecond, offset=offset)


def is_leap_second_boundary(
    month: int,
    day: int,
    hour: int,
    minute: int,
    offset: TimezoneOffset | None,
) -> bool:
    """True if the minute is 23:59 UTC on June 30 or December 31.

    Without an offset UTC alignment cannot be verified, so the answer is False.
    """
    if offset is None or not offset.is_utc:
        return False
    return (month, day, hour, minute) in LEAP_SECOND_BOUNDARIES


def check_leap_second(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    nanosecond: int = 0,
    offset: TimezoneOffset | None = None,
    authority: LeapSecondAuthority | None = None,
) -> None:
    """Raise LeapSecondError if ``second`` is 60, otherwise do nothing.

    Parsers call this before building a TemporalValue from a seconds field.

    Raises:
        LeapSecondError: If ``second`` is 60
    """
    if second == LEAP_SECOND:
        raise LeapSecondError.of(year, month, day, hour, minute, second, nanosecond, offset, authority)


def _isoformat(value: LocalDateTime | OffsetDateTime) -> str:
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.nanosecond:
        text += f".{value.nanosecond:09d}".rstrip("0")
    if isinstance(value, OffsetDateTime):
        text += str(value.offset)
    return text
