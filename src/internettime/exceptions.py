"""Internet time exception classes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value import Granularity


class InternetTimeError(Exception):
    """Base exception for all internet time errors."""


class FieldBoundsError(InternetTimeError, ValueError):
    """A field value lies outside its legal range."""

    def __init__(self, field: Granularity, minimum: int, maximum: int, value: int) -> None:
        self.field = field
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        super().__init__(f"Field {field.name} out of bounds. Expected {minimum}-{maximum}, got {value}")

    def __reduce__(self) -> tuple[type[FieldBoundsError], tuple[Granularity, int, int, int]]:
        return type(self), (self.field, self.minimum, self.maximum, self.value)


class MissingFieldError(InternetTimeError):
    """A conversion needs a finer granularity than the value holds."""

    def __init__(self, conversion: str, required: Granularity, found: Granularity) -> None:
        self.conversion = conversion
        self.required = required
        self.found = found
        super().__init__(
            f"Missing field for {conversion}: requires {required.name.lower()}, found only {found.name.lower()}"
        )

    def __reduce__(self) -> tuple[type[MissingFieldError], tuple[str, Granularity, Granularity]]:
        return type(self), (self.conversion, self.required, self.found)


class MissingOffsetError(InternetTimeError):
    """Zone offset information is required but absent."""

    def __init__(self, conversion: str) -> None:
        self.conversion = conversion
        super().__init__(f"No zone offset information found for {conversion}")

    def __reduce__(self) -> tuple[type[MissingOffsetError], tuple[str]]:
        return type(self), (self.conversion,)
