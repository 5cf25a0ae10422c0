"""Validation utilities for fhirtime.

Range checks shared by the value constructors. Each raises
ValidationError naming the offending component.

This module is not part of the public API.
"""

from __future__ import annotations

from fhirtime._internal.calendar import days_in_month
from fhirtime._internal.constants import (
    MAX_FRACTION_DIGITS,
    MAX_WIRE_YEAR,
    MAX_YEAR,
    MIN_WIRE_YEAR,
    MIN_YEAR,
    NANOS_PER_SECOND,
)
from fhirtime.errors import SerializationError, ValidationError


def validate_range(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that an integer component lies in [min_val, max_val].

    Args:
        name: Component name used in the error message.
        value: The value to check.
        min_val: Inclusive lower bound.
        max_val: Inclusive upper bound.

    Raises:
        ValidationError: If value is not an int or is out of range.

    Examples:
        >>> validate_range("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        fhirtime.errors.ValidationError: hour must be between 0 and 23, got 24
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if value < min_val or value > max_val:
        raise ValidationError(f"{name} must be between {min_val} and {max_val}, got {value}")


def validate_year(year: int) -> None:
    """Validate that a year fits a full calendar date.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    validate_range("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    validate_range("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if not isinstance(day, int) or isinstance(day, bool):
        raise ValidationError(f"day must be an integer, got {type(day).__name__}")
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_clock(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate the clock components shared by Time and Instant."""
    validate_range("hour", hour, 0, 23)
    validate_range("minute", minute, 0, 59)
    validate_range("second", second, 0, 59)
    validate_range("nanosecond", nanosecond, 0, NANOS_PER_SECOND - 1)


def validate_fraction_digits(digits: int | None) -> None:
    """Validate a display precision for fractional seconds."""
    if digits is not None:
        validate_range("fraction_digits", digits, 1, MAX_FRACTION_DIGITS)


def check_wire_year(year: int) -> None:
    """Check that a year can be written as exactly four digits.

    Raises:
        SerializationError: If year is outside MIN_WIRE_YEAR to MAX_WIRE_YEAR.
    """
    if year < MIN_WIRE_YEAR or year > MAX_WIRE_YEAR:
        raise SerializationError(f"year is not 4 digits long: {year}")


__all__ = [
    "validate_range",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_clock",
    "validate_fraction_digits",
    "check_wire_year",
]
