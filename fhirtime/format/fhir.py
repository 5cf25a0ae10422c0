"""Parsing and formatting of the standard's temporal primitives.

Functions:
    parse_date: Parse a ``date`` string to Year, YearMonth or FullDate.
    parse_datetime: Parse a ``dateTime`` string to a DateTime.
    parse_instant: Parse an ``instant`` string to an Instant.
    parse_time: Parse a ``time`` string to a Time.
    format_value: Write any temporal value in its wire form.

Wire forms:

    ============  ==========================================
    date          YYYY | YYYY-MM | YYYY-MM-DD
    dateTime      a date, or YYYY-MM-DDThh:mm:ss[.f]offset
    instant       YYYY-MM-DDThh:mm:ss[.f]offset
    time          hh:mm:ss[.f]
    ============  ==========================================

Examples:
    >>> from fhirtime.format import parse_date, format_value
    >>> format_value(parse_date("2024-02"))
    '2024-02'

    >>> parse_datetime("2024-02-11T13:00:00-00:00").to_fhir()
    '2024-02-11T13:00:00-00:00'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from fhirtime.core.calendar_date import CalendarDate
    from fhirtime.core.date import Date
    from fhirtime.core.datetime import DateTime
    from fhirtime.core.instant import Instant
    from fhirtime.core.time import Time

# Type alias for values with a wire form
WireValue = Union["Date", "CalendarDate", "DateTime", "Instant", "Time"]


def parse_date(s: str) -> "Date":
    """Parse a ``date`` string at the precision it states.

    Raises:
        DateFormatError: If the string is not a valid date.

    Examples:
        >>> parse_date("2024")
        Year(2024)
        >>> parse_date("2024-2")
        YearMonth(2024, 2)
    """
    from fhirtime.core.date import Date

    return Date.parse(s)


def parse_datetime(s: str) -> "DateTime":
    """Parse a ``dateTime`` string.

    Raises:
        DateFormatError: If the string is not a valid dateTime. A string
            containing ``T`` that is not a valid instant gives kind
            INVALID_INSTANT.

    Examples:
        >>> parse_datetime("2024-02-11").value
        FullDate(2024, 2, 11)
    """
    from fhirtime.core.datetime import DateTime

    return DateTime.parse(s)


def parse_instant(s: str) -> "Instant":
    """Parse an ``instant`` string (strict RFC 3339).

    Raises:
        ParseError: If the string is not a valid instant.
    """
    from fhirtime.format.rfc3339 import parse_rfc3339

    return parse_rfc3339(s)


def parse_time(s: str) -> "Time":
    """Parse a ``time`` string.

    Raises:
        ParseError: If the string is not a valid time.

    Examples:
        >>> parse_time("13:00:00.500").nanosecond
        500000000
    """
    from fhirtime.core.time import Time

    return Time.parse(s)


def format_value(value: WireValue) -> str:
    """Write a temporal value in its wire form.

    Args:
        value: A Date, CalendarDate, DateTime, Instant or Time.

    Returns:
        The wire string.

    Raises:
        SerializationError: If the value cannot be written, such as a
            date whose year is not four digits long.
        TypeError: If value is not a temporal value.

    Examples:
        >>> from fhirtime import Time, Year
        >>> format_value(Time(13, 0))
        '13:00:00'
        >>> format_value(Year(999))
        Traceback (most recent call last):
        ...
        fhirtime.errors.SerializationError: year is not 4 digits long: 999
    """
    # Import here to avoid circular imports
    from fhirtime.core.calendar_date import CalendarDate
    from fhirtime.core.date import Date
    from fhirtime.core.datetime import DateTime
    from fhirtime.core.instant import Instant
    from fhirtime.core.time import Time

    if isinstance(value, (Date, CalendarDate, DateTime, Instant, Time)):
        return value.to_fhir()
    raise TypeError(
        f"expected Date, CalendarDate, DateTime, Instant, or Time, got {type(value).__name__}"
    )


__all__ = [
    "WireValue",
    "parse_date",
    "parse_datetime",
    "parse_instant",
    "parse_time",
    "format_value",
]
