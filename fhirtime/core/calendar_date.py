"""CalendarDate class representing a complete calendar date.

This module provides CalendarDate, a plain year-month-day value in the
proleptic Gregorian calendar. It is what a partial-precision Date
narrows to when full precision is present.
"""

from __future__ import annotations

import datetime as _datetime
import re

from fhirtime._internal.calendar import days_in_month
from fhirtime._internal.validation import (
    check_wire_year,
    validate_day,
    validate_month,
    validate_year,
)
from fhirtime.comparison.lattice import LatticeOrdered
from fhirtime.errors import DateFormatError, DateFormatErrorKind
from fhirtime.units.precision import Precision

_FULL_DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


class CalendarDate(LatticeOrdered):
    """A complete calendar date: year, month and day.

    CalendarDate takes part in the cross-precision lattice, so it can be
    compared directly with a partial Date in either operand order.

    Attributes:
        year: The year (0-9999).
        month: The month (1-12).
        day: The day of the month.

    Examples:
        >>> d = CalendarDate(2024, 2, 11)
        >>> d.day
        11

        >>> from fhirtime import YearMonth
        >>> d == YearMonth(2024, 2)
        True

        >>> CalendarDate(2024, 2, 30)
        Traceback (most recent call last):
        ...
        fhirtime.errors.ValidationError: day must be between 1 and 29 for 2024-02, got 30
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a CalendarDate from year, month, and day.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._year: int = year
        self._month: int = month
        self._day: int = day

    @classmethod
    def parse(cls, s: str) -> CalendarDate:
        """Parse a date from strict ``YYYY-MM-DD``.

        Args:
            s: The date string.

        Returns:
            The parsed CalendarDate.

        Raises:
            DateFormatError: With kind INVALID_SHAPE if the string is not
                ``YYYY-MM-DD``, INVALID_MONTH or INVALID_DAY for a
                component outside its range, or INVALID_CALENDAR_DATE for
                a day the month does not have.

        Examples:
            >>> CalendarDate.parse("2024-02-11")
            CalendarDate(2024, 2, 11)

            >>> CalendarDate.parse("2023-02-29")
            Traceback (most recent call last):
            ...
            fhirtime.errors.DateFormatError: invalid calendar date '2023-02-29': 2023-02 has 28 days
        """
        match = _FULL_DATE_PATTERN.fullmatch(s)
        if not match:
            raise DateFormatError(
                DateFormatErrorKind.INVALID_SHAPE,
                f"invalid date format: {s!r}. Expected YYYY-MM-DD",
            )

        year, month, day = (int(g) for g in match.groups())
        if not 1 <= month <= 12:
            raise DateFormatError(
                DateFormatErrorKind.INVALID_MONTH,
                f"invalid month in {s!r}: must be between 1 and 12, got {month}",
            )
        if not 1 <= day <= 31:
            raise DateFormatError(
                DateFormatErrorKind.INVALID_DAY,
                f"invalid day in {s!r}: must be between 1 and 31, got {day}",
            )
        max_day = days_in_month(year, month)
        if day > max_day:
            raise DateFormatError(
                DateFormatErrorKind.INVALID_CALENDAR_DATE,
                f"invalid calendar date {s!r}: {year:04d}-{month:02d} has {max_day} days",
            )

        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: _datetime.date) -> CalendarDate:
        """Create a CalendarDate from a standard library ``datetime.date``."""
        return cls(value.year, value.month, value.day)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def precision(self) -> Precision:
        """Return Precision.DAY."""
        return Precision.DAY

    def to_date(self) -> _datetime.date:
        """Return a standard library ``datetime.date``.

        Raises:
            ValueError: For year 0, which the standard library cannot hold.
        """
        return _datetime.date(self._year, self._month, self._day)

    def to_fhir(self) -> str:
        """Return the wire form ``YYYY-MM-DD``.

        Raises:
            SerializationError: If the year is outside 1000-9999.

        Examples:
            >>> CalendarDate(2024, 2, 11).to_fhir()
            '2024-02-11'
        """
        check_wire_year(self._year)
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    def _date_key(self) -> tuple[int, ...]:
        return (self._year, self._month, self._day)

    def __hash__(self) -> int:
        # Equal values across precisions share only their year.
        return hash(self._year)

    def __repr__(self) -> str:
        return f"CalendarDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"


__all__ = ["CalendarDate"]
