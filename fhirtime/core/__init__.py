"""Core temporal types for fhirtime.

This module provides the value types:
    - Date: Partial-precision date (Year, YearMonth, FullDate)
    - CalendarDate: Complete calendar date
    - Time: Time of day with nanosecond precision
    - Instant: Point in time with a UTC offset
    - DateTime: A Date or an Instant
"""

from __future__ import annotations

from fhirtime.core.calendar_date import CalendarDate
from fhirtime.core.date import Date, FullDate, Year, YearMonth
from fhirtime.core.datetime import DateTime
from fhirtime.core.instant import Instant
from fhirtime.core.time import Time

__all__: list[str] = [
    "CalendarDate",
    "Date",
    "DateTime",
    "FullDate",
    "Instant",
    "Time",
    "Year",
    "YearMonth",
]
