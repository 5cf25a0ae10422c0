"""Fractional-second helpers shared by Time and Instant.

Fractions are held as integer nanoseconds. The number of digits a
fraction was written with is display information only.

This module is not part of the public API.
"""

from __future__ import annotations

from fhirtime._internal.constants import MAX_FRACTION_DIGITS


def parse_fraction(digits: str) -> int:
    """Convert the digits after the decimal point to nanoseconds.

    Args:
        digits: 1-9 decimal digits.

    Returns:
        The fraction in nanoseconds.

    Examples:
        >>> parse_fraction("5")
        500000000
        >>> parse_fraction("000000001")
        1
    """
    return int(digits.ljust(MAX_FRACTION_DIGITS, "0"))


def minimal_digits(nanosecond: int) -> int:
    """Return the fewest digits that represent nanosecond exactly.

    Examples:
        >>> minimal_digits(500_000_000)
        1
        >>> minimal_digits(123_456_000)
        6
    """
    text = f"{nanosecond:09d}".rstrip("0")
    return max(len(text), 1)


def format_fraction(nanosecond: int, digits: int | None) -> str:
    """Return ``.fraction`` for a non-zero nanosecond value, else ``""``.

    A requested digit count is honoured when it still represents the
    value exactly; otherwise the minimal count is used so no precision
    is dropped.

    Examples:
        >>> format_fraction(500_000_000, 3)
        '.500'
        >>> format_fraction(500_000_000, None)
        '.5'
        >>> format_fraction(123_456_789, 3)
        '.123456789'
        >>> format_fraction(0, 3)
        ''
    """
    if nanosecond == 0:
        return ""
    needed = minimal_digits(nanosecond)
    width = digits if digits is not None and digits >= needed else needed
    return "." + f"{nanosecond:09d}"[:width]


__all__ = ["parse_fraction", "minimal_digits", "format_fraction"]
