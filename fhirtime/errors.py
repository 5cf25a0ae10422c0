"""fhirtime exception hierarchy.

All fhirtime-specific exceptions inherit from FhirTimeError.
"""

from __future__ import annotations

from enum import Enum


class FhirTimeError(Exception):
    """Base exception for all fhirtime errors."""

    pass


class ValidationError(FhirTimeError):
    """Invalid input values.

    Raised when a temporal value is constructed from out-of-range
    components.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
    """

    pass


class ParseError(FhirTimeError):
    """Failed to parse a wire string.

    Raised by the time and instant parsers. The message names the
    offending input.
    """

    pass


class DateFormatErrorKind(Enum):
    """Why a date or dateTime string was rejected."""

    INVALID_INTEGER = "invalid_integer"
    SEGMENT_COUNT = "segment_count"
    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"
    INVALID_CALENDAR_DATE = "invalid_calendar_date"
    INVALID_SHAPE = "invalid_shape"
    INVALID_INSTANT = "invalid_instant"


class DateFormatError(ParseError):
    """A date or dateTime string could not be parsed.

    The ``kind`` attribute tells the failure modes apart so callers can
    react without matching on messages.

    Examples:
        - ``"abcd"``: INVALID_INTEGER
        - ``"2024-02-11-01"``: SEGMENT_COUNT
        - ``"2024-13"``: INVALID_MONTH
        - ``"2024-02-30"``: INVALID_CALENDAR_DATE
        - ``"2024-2-11"``: INVALID_SHAPE
    """

    def __init__(self, kind: DateFormatErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class SerializationError(FhirTimeError):
    """A value cannot be written in its wire form.

    Examples:
        - Year outside 1000-9999 for a date
    """

    pass


class InsufficientDatePrecision(FhirTimeError):
    """A full calendar date was required but only year or year-month is known."""

    def __init__(self, message: str = "insufficient date precision for conversion to a calendar date") -> None:
        super().__init__(message)


class OffsetError(FhirTimeError):
    """Invalid UTC offset.

    Examples:
        - Offset hours outside 00-23
        - Malformed offset string
    """

    pass


class UnsupportedSelectorError(FhirTimeError, NotImplementedError):
    """A search parameter has no resolver for the given record type.

    This is distinct from a resolver returning None, which means the
    record simply carries no value for a supported parameter.
    """

    def __init__(self, record_type: str, selector: object, detail: str | None = None) -> None:
        self.record_type = record_type
        self.selector = selector
        message = f"{record_type}:{getattr(selector, 'value', selector)} is not supported"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


__all__ = [
    "FhirTimeError",
    "ValidationError",
    "ParseError",
    "DateFormatErrorKind",
    "DateFormatError",
    "SerializationError",
    "InsufficientDatePrecision",
    "OffsetError",
    "UnsupportedSelectorError",
]
