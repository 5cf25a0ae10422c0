"""RFC 3339 formatting and parsing.

RFC 3339 is a profile of ISO 8601 used for the standard's ``instant``
primitive and for the date-time form of ``dateTime``:

1. Date and time must be separated by 'T' (not space)
2. Seconds are mandatory
3. Offset is mandatory: 'Z' or '+/-HH:MM'
4. Fractional seconds are optional

Functions:
    parse_rfc3339: Parse an RFC 3339 string into an Instant.
    format_rfc3339: Format an Instant as an RFC 3339 string.

Examples:
    >>> from fhirtime.format import parse_rfc3339, format_rfc3339

    >>> inst = parse_rfc3339("2024-01-15T14:30:45Z")
    >>> inst.year
    2024

    >>> format_rfc3339(parse_rfc3339("2024-01-15T14:30:45-00:00"))
    '2024-01-15T14:30:45-00:00'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from fhirtime._internal.fraction import format_fraction, parse_fraction
from fhirtime.errors import OffsetError, ParseError, ValidationError

if TYPE_CHECKING:
    from fhirtime.core.instant import Instant


# RFC 3339 datetime pattern
# YYYY-MM-DDTHH:MM:SS[.fraction]Z or YYYY-MM-DDTHH:MM:SS[.fraction]+/-HH:MM
_RFC3339_PATTERN = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2})"  # Date: YYYY-MM-DD
    r"[Tt]"  # T separator (case insensitive)
    r"([0-9]{2}):([0-9]{2}):([0-9]{2})"  # Time: HH:MM:SS
    r"(?:\.([0-9]{1,9}))?"  # Optional fractional seconds
    r"([Zz]|[+-][0-9]{2}:[0-9]{2})$"  # Required offset
)


def parse_rfc3339(s: str) -> "Instant":
    """Parse an RFC 3339 date-time string.

    Args:
        s: The RFC 3339 string to parse.

    Returns:
        An Instant carrying the offset exactly as written.

    Raises:
        ParseError: If the string is not valid RFC 3339 format or a
            component is out of range.

    Examples:
        >>> parse_rfc3339("2024-01-15T14:30:45+05:30")
        Instant(2024, 1, 15, 14, 30, 45, nanosecond=0, offset=UtcOffset('+05:30'))

        >>> parse_rfc3339("2024-01-15T14:30Z")
        Traceback (most recent call last):
        ...
        fhirtime.errors.ParseError: invalid RFC 3339 format: '2024-01-15T14:30Z'. Expected YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)
    """
    from fhirtime.core.instant import Instant
    from fhirtime.units.offset import UtcOffset

    if not isinstance(s, str):
        raise ParseError(f"expected string, got {type(s).__name__}")

    match = _RFC3339_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(
            f"invalid RFC 3339 format: {s!r}. "
            "Expected YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)"
        )

    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    frac_str = match.group(7)

    try:
        offset = UtcOffset.parse(match.group(8))
        return Instant(
            year,
            month,
            day,
            hour,
            minute,
            second,
            nanosecond=parse_fraction(frac_str) if frac_str else 0,
            offset=offset,
            fraction_digits=len(frac_str) if frac_str else None,
        )
    except (ValidationError, OffsetError) as e:
        raise ParseError(f"invalid RFC 3339 date-time {s!r}: {e}") from e


def format_rfc3339(value: "Instant") -> str:
    """Format an Instant as an RFC 3339 string.

    The fraction is written only when non-zero; the offset is written as
    the instant carries it.

    Args:
        value: The Instant to format.

    Returns:
        RFC 3339 formatted string.

    Raises:
        TypeError: If value is not an Instant.

    Examples:
        >>> from fhirtime import Instant
        >>> from fhirtime.units import UtcOffset
        >>> format_rfc3339(Instant(2024, 1, 15, 14, 30, 45, offset=UtcOffset(-300)))
        '2024-01-15T14:30:45-05:00'
    """
    from fhirtime.core.instant import Instant

    if not isinstance(value, Instant):
        raise TypeError(f"expected Instant, got {type(value).__name__}")

    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{format_fraction(value.nanosecond, value.fraction_digits)}"
        f"{value.offset}"
    )


__all__ = ["parse_rfc3339", "format_rfc3339"]
