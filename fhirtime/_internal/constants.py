"""Internal constants for fhirtime.

These constants define the limits and unit conversions used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60

# Calendar limits for full dates and instants (four-digit years)
MIN_YEAR: int = 0
MAX_YEAR: int = 9999

# Years a date, dateTime or instant may carry on the wire
MIN_WIRE_YEAR: int = 1000
MAX_WIRE_YEAR: int = 9999

# Fractional seconds are held as nanoseconds
MAX_FRACTION_DIGITS: int = 9

# Offsets are written as +hh:mm with hh in 00-23
MAX_OFFSET_MINUTES: int = 23 * 60 + 59

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days from 0001-01-01 (ordinal 1) to 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719_163


__all__ = [
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_WIRE_YEAR",
    "MAX_WIRE_YEAR",
    "MAX_FRACTION_DIGITS",
    "MAX_OFFSET_MINUTES",
    "DAYS_IN_MONTH",
    "UNIX_EPOCH_ORDINAL",
]
