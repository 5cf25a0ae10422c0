"""Temporal formatting and parsing.

This module provides functions for converting temporal values to and from
their wire strings:
    - The standard's date, dateTime, instant and time primitives
    - RFC 3339 timestamps

Functions:
    parse_date: Parse a date string at the precision it states.
    parse_datetime: Parse a dateTime string.
    parse_instant: Parse an instant string.
    parse_time: Parse a time string.
    format_value: Write any temporal value in its wire form.
    parse_rfc3339: Parse RFC 3339 datetime string.
    format_rfc3339: Format Instant as RFC 3339 string.

Examples:
    >>> from fhirtime.format import parse_datetime, format_value

    >>> dt = parse_datetime("2024-02-11T13:00:00Z")
    >>> dt.value.year
    2024

    >>> format_value(dt)
    '2024-02-11T13:00:00Z'
"""

from __future__ import annotations

from fhirtime.format.fhir import (
    format_value,
    parse_date,
    parse_datetime,
    parse_instant,
    parse_time,
)
from fhirtime.format.rfc3339 import format_rfc3339, parse_rfc3339

__all__: list[str] = [
    # Primitives
    "parse_date",
    "parse_datetime",
    "parse_instant",
    "parse_time",
    "format_value",
    # RFC 3339
    "parse_rfc3339",
    "format_rfc3339",
]
