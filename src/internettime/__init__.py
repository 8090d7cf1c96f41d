"""
internettime: Granularity-aware RFC 3339 date-time values for Python.

This library provides the value model behind an internet date-time parser:
a temporal value that remembers how much of it was specified, strict field
bounds, guarded conversions to narrower types, and leap second signalling.
"""

from __future__ import annotations

from .calendar import LocalDateTime, OffsetDateTime, YearMonth
from .exceptions import FieldBoundsError, InternetTimeError, MissingFieldError, MissingOffsetError
from .leapsecond import LeapSecondError, check_leap_second
from .offset import TimezoneOffset
from .value import Granularity, TemporalValue

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Values
    "Granularity",
    "TemporalValue",
    "TimezoneOffset",
    # Conversion targets
    "LocalDateTime",
    "OffsetDateTime",
    "YearMonth",
    # Errors
    "FieldBoundsError",
    "InternetTimeError",
    "MissingFieldError",
    "MissingOffsetError",
    # Leap seconds
    "LeapSecondError",
    "check_leap_second",
]
