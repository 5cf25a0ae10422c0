"""fhirtime: temporal values for FHIR resources.

fhirtime models the date, dateTime, instant and time primitives of the
FHIR standard, including dates known only to the year or month, and
orders them against each other at the coarser of two precisions.

Core Types:
    Date: Partial-precision date (Year, YearMonth or FullDate)
    CalendarDate: Complete calendar date
    DateTime: A Date or an Instant
    Instant: Point in time with a UTC offset
    Time: Time of day with nanosecond precision

Units:
    Precision: Finest unit a value states (YEAR, MONTH, DAY, SECOND)
    UtcOffset: UTC offset, keeping its spelling

Comparison:
    compare: Three-way comparison at the coarser precision

Exceptions:
    FhirTimeError: Base exception
    ValidationError: Out-of-range component
    ParseError: Failed to parse string
    DateFormatError: Failed to parse a date or dateTime, with a kind
    SerializationError: Value has no wire form
    InsufficientDatePrecision: No full date to narrow to
    OffsetError: Invalid UTC offset
    UnsupportedSelectorError: Search parameter has no resolver

Example:
    >>> from fhirtime import Date, DateTime
    >>> Date.parse("2024") == DateTime.parse("2024-02-11T13:00:00Z")
    True
    >>> Date.parse("2024-02").to_fhir()
    '2024-02'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from fhirtime.core.calendar_date import CalendarDate
from fhirtime.core.date import Date, FullDate, Year, YearMonth
from fhirtime.core.datetime import DateTime
from fhirtime.core.instant import Instant
from fhirtime.core.time import Time

# Units
from fhirtime.units.offset import UtcOffset
from fhirtime.units.precision import Precision

# Comparison
from fhirtime.comparison.lattice import compare

# Exceptions
from fhirtime.errors import (
    DateFormatError,
    DateFormatErrorKind,
    FhirTimeError,
    InsufficientDatePrecision,
    OffsetError,
    ParseError,
    SerializationError,
    UnsupportedSelectorError,
    ValidationError,
)

# Format functions
from fhirtime.format import (
    format_value,
    parse_date,
    parse_datetime,
    parse_instant,
    parse_time,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "Date",
    "DateTime",
    "FullDate",
    "Instant",
    "Time",
    "Year",
    "YearMonth",
    # Units
    "Precision",
    "UtcOffset",
    # Comparison
    "compare",
    # Exceptions
    "FhirTimeError",
    "ValidationError",
    "ParseError",
    "DateFormatError",
    "DateFormatErrorKind",
    "SerializationError",
    "InsufficientDatePrecision",
    "OffsetError",
    "UnsupportedSelectorError",
    # Format functions
    "parse_date",
    "parse_datetime",
    "parse_instant",
    "parse_time",
    "format_value",
]
