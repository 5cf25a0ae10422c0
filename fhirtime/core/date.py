"""Partial-precision Date classes.

This module provides the Date hierarchy for the standard's ``date``
primitive. A date may be stated to year, month or day precision:

    - Year: ``2024``
    - YearMonth: ``2024-02``
    - FullDate: ``2024-02-11``

Each variant is its own class, so a day without a month cannot be
represented. The unstated positions of a coarse date are unknown; they
are never filled with January or the first.
"""

from __future__ import annotations

import datetime as _datetime
import re
from abc import ABC, abstractmethod

from fhirtime._internal.validation import (
    check_wire_year,
    validate_month,
)
from fhirtime.comparison.lattice import LatticeOrdered
from fhirtime.core.calendar_date import CalendarDate
from fhirtime.errors import (
    DateFormatError,
    DateFormatErrorKind,
    InsufficientDatePrecision,
    ValidationError,
)
from fhirtime.units.precision import Precision

_DIGITS_PATTERN = re.compile(r"^[0-9]+$")


def _validate_year_type(year: int) -> None:
    if not isinstance(year, int) or isinstance(year, bool):
        raise ValidationError(f"year must be an integer, got {type(year).__name__}")


def _parse_integer(segment: str, name: str, s: str) -> int:
    if not _DIGITS_PATTERN.fullmatch(segment):
        raise DateFormatError(
            DateFormatErrorKind.INVALID_INTEGER,
            f"invalid {name} in {s!r}: {segment!r} is not an unsigned integer",
        )
    return int(segment)


class Date(LatticeOrdered, ABC):
    """A calendar date stated to year, month or day precision.

    Date is abstract; values are always one of Year, YearMonth or
    FullDate. Dates of different precision compare at the coarser of the
    two, so ``Year(2024) == FullDate(2024, 6, 15)`` holds even though the
    two values are not interchangeable.

    Hashing uses the year alone, which keeps equal dates of mixed
    precision in the same bucket.

    Examples:
        >>> Date.parse("2024")
        Year(2024)

        >>> Date.parse("2024-02")
        YearMonth(2024, 2)

        >>> Date.parse("2024-02-11")
        FullDate(2024, 2, 11)

        >>> Date.parse("2024-02-11") < Date.parse("2024-03")
        True
    """

    __slots__ = ()

    @classmethod
    def parse(cls, s: str) -> Date:
        """Parse a date at whatever precision the string states.

        The string is split on ``-``. One segment is a Year, two are a
        YearMonth, three are a FullDate in strict ``YYYY-MM-DD`` form.

        Args:
            s: The date string.

        Returns:
            A Year, YearMonth or FullDate.

        Raises:
            DateFormatError: If the string cannot be parsed. The error's
                ``kind`` names the failure.

        Examples:
            >>> Date.parse("2024-13")
            Traceback (most recent call last):
            ...
            fhirtime.errors.DateFormatError: invalid month in '2024-13': must be between 1 and 12, got 13

            >>> Date.parse("2024-02-11-01")
            Traceback (most recent call last):
            ...
            fhirtime.errors.DateFormatError: invalid date format: '2024-02-11-01'. Expected YYYY, YYYY-MM or YYYY-MM-DD
        """
        if not isinstance(s, str):
            raise DateFormatError(
                DateFormatErrorKind.INVALID_SHAPE,
                f"expected string, got {type(s).__name__}",
            )

        segments = s.split("-")
        if len(segments) == 1:
            return Year(_parse_integer(segments[0], "year", s))

        if len(segments) == 2:
            year = _parse_integer(segments[0], "year", s)
            month = _parse_integer(segments[1], "month", s)
            if not 1 <= month <= 12:
                raise DateFormatError(
                    DateFormatErrorKind.INVALID_MONTH,
                    f"invalid month in {s!r}: must be between 1 and 12, got {month}",
                )
            return YearMonth(year, month)

        if len(segments) == 3:
            return FullDate.from_calendar_date(CalendarDate.parse(s))

        raise DateFormatError(
            DateFormatErrorKind.SEGMENT_COUNT,
            f"invalid date format: {s!r}. Expected YYYY, YYYY-MM or YYYY-MM-DD",
        )

    @property
    @abstractmethod
    def year(self) -> int:
        """Return the year."""

    @property
    @abstractmethod
    def precision(self) -> Precision:
        """Return the finest unit this date states."""

    @abstractmethod
    def to_fhir(self) -> str:
        """Return the wire form.

        Raises:
            SerializationError: If the year is outside 1000-9999.
        """

    @abstractmethod
    def _format(self) -> str:
        """Return the wire spelling without checking the year."""

    @abstractmethod
    def _date_key(self) -> tuple[int, ...]:
        """Return the stated calendar positions, coarse to fine."""

    def to_calendar_date(self) -> CalendarDate:
        """Narrow to a full calendar date.

        Raises:
            InsufficientDatePrecision: Unless this is a FullDate.

        Examples:
            >>> Date.parse("2024-02").to_calendar_date()
            Traceback (most recent call last):
            ...
            fhirtime.errors.InsufficientDatePrecision: insufficient date precision for conversion to a calendar date
        """
        raise InsufficientDatePrecision()

    def __hash__(self) -> int:
        return hash(self.year)

    def __str__(self) -> str:
        return self._format()


class Year(Date):
    """A date stated to year precision.

    Examples:
        >>> Year(2024).to_fhir()
        '2024'
        >>> Year(2024) == Date.parse("2024-12-31")
        True
    """

    __slots__ = ("_year",)

    def __init__(self, year: int) -> None:
        """Create a Year.

        Any integer is accepted; the four-digit bound is checked when the
        value is written.

        Raises:
            ValidationError: If year is not an integer.
        """
        _validate_year_type(year)
        self._year: int = year

    @property
    def year(self) -> int:
        return self._year

    @property
    def precision(self) -> Precision:
        return Precision.YEAR

    def to_fhir(self) -> str:
        check_wire_year(self._year)
        return self._format()

    def _format(self) -> str:
        return f"{self._year:04d}"

    def _date_key(self) -> tuple[int, ...]:
        return (self._year,)

    def __repr__(self) -> str:
        return f"Year({self._year})"


class YearMonth(Date):
    """A date stated to month precision.

    Examples:
        >>> YearMonth(2024, 2).to_fhir()
        '2024-02'
        >>> YearMonth(2024, 2) < YearMonth(2024, 10)
        True
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        """Create a YearMonth.

        Raises:
            ValidationError: If year is not an integer or month is
                outside 1-12.
        """
        _validate_year_type(year)
        validate_month(month)
        self._year: int = year
        self._month: int = month

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def precision(self) -> Precision:
        return Precision.MONTH

    def to_fhir(self) -> str:
        check_wire_year(self._year)
        return self._format()

    def _format(self) -> str:
        return f"{self._year:04d}-{self._month:02d}"

    def _date_key(self) -> tuple[int, ...]:
        return (self._year, self._month)

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month})"


class FullDate(Date):
    """A date stated to day precision.

    FullDate wraps a CalendarDate, which it returns when narrowed.

    Examples:
        >>> d = FullDate(2024, 2, 11)
        >>> d.to_calendar_date()
        CalendarDate(2024, 2, 11)
        >>> d.to_fhir()
        '2024-02-11'
    """

    __slots__ = ("_date",)

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a FullDate.

        Raises:
            ValidationError: If the components do not form a valid date
                in years 0-9999.
        """
        self._date: CalendarDate = CalendarDate(year, month, day)

    @classmethod
    def from_calendar_date(cls, value: CalendarDate) -> FullDate:
        """Wrap an existing CalendarDate."""
        if not isinstance(value, CalendarDate):
            raise TypeError(f"expected CalendarDate, got {type(value).__name__}")
        instance = object.__new__(cls)
        instance._date = value
        return instance

    @classmethod
    def from_date(cls, value: _datetime.date) -> FullDate:
        """Create a FullDate from a standard library ``datetime.date``."""
        return cls.from_calendar_date(CalendarDate.from_date(value))

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def precision(self) -> Precision:
        return Precision.DAY

    def to_calendar_date(self) -> CalendarDate:
        return self._date

    def to_fhir(self) -> str:
        return self._date.to_fhir()

    def _format(self) -> str:
        return str(self._date)

    def _date_key(self) -> tuple[int, ...]:
        return self._date._date_key()

    def __repr__(self) -> str:
        return f"FullDate({self.year}, {self.month}, {self.day})"


__all__ = ["Date", "Year", "YearMonth", "FullDate"]
