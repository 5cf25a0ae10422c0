"""DateTime class for the standard's ``dateTime`` primitive.

A dateTime is either a partial-precision Date or a full Instant. This
module provides DateTime, which wraps exactly one of the two.
"""

from __future__ import annotations

from typing import Union

from fhirtime.comparison.lattice import LatticeOrdered
from fhirtime.core.calendar_date import CalendarDate
from fhirtime.core.date import Date
from fhirtime.core.instant import Instant
from fhirtime.errors import DateFormatError, DateFormatErrorKind, ParseError
from fhirtime.units.precision import Precision


class DateTime(LatticeOrdered):
    """A date at any precision, or an instant.

    DateTime compares exactly like the value it wraps, so a DateTime
    holding an Instant equals that Instant and a DateTime holding a Year
    equals every date in that year.

    Hashing follows the wrapped value: dates hash by year and instants by
    their absolute time. A DateTime holding a date and one holding an
    instant can therefore be equal yet hash differently, so do not mix
    the two kinds as set members or dict keys.

    Attributes:
        value: The wrapped Date or Instant.

    Examples:
        >>> DateTime.parse("2024-02").value
        YearMonth(2024, 2)

        >>> DateTime.parse("2024-02-11T13:00:00Z").is_instant
        True

        >>> DateTime.parse("2024") == DateTime.parse("2024-06-01T00:00:00+02:00")
        True
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[Date, Instant]) -> None:
        """Wrap a Date or an Instant.

        Raises:
            TypeError: If value is neither.
        """
        if not isinstance(value, (Date, Instant)):
            raise TypeError(f"DateTime wraps a Date or an Instant, got {type(value).__name__}")
        self._value: Union[Date, Instant] = value

    @classmethod
    def parse(cls, s: str) -> DateTime:
        """Parse a dateTime string.

        A string containing ``T`` must be a full RFC 3339 instant;
        anything else is parsed as a Date.

        Raises:
            DateFormatError: If the string cannot be parsed. A malformed
                instant gives kind INVALID_INSTANT, chained from the
                underlying ParseError.

        Examples:
            >>> DateTime.parse("2024-02-11T13:00Z")
            Traceback (most recent call last):
            ...
            fhirtime.errors.DateFormatError: invalid RFC 3339 format: '2024-02-11T13:00Z'. Expected YYYY-MM-DDTHH:MM:SS[.fraction](Z|+HH:MM|-HH:MM)
        """
        if isinstance(s, str) and "T" in s:
            try:
                return cls(Instant.parse(s))
            except ParseError as e:
                raise DateFormatError(DateFormatErrorKind.INVALID_INSTANT, str(e)) from e
        return cls(Date.parse(s))

    @property
    def value(self) -> Union[Date, Instant]:
        """Return the wrapped Date or Instant."""
        return self._value

    @property
    def is_instant(self) -> bool:
        """Return True if this dateTime carries a time and offset."""
        return isinstance(self._value, Instant)

    @property
    def precision(self) -> Precision:
        """Return the precision of the wrapped value."""
        return self._value.precision

    def to_calendar_date(self) -> CalendarDate:
        """Narrow to a full calendar date.

        An instant narrows to its local date in its own offset.

        Raises:
            InsufficientDatePrecision: If the wrapped Date is a Year or
                YearMonth.
        """
        if isinstance(self._value, Instant):
            return self._value.date()
        return self._value.to_calendar_date()

    def to_fhir(self) -> str:
        """Return the wire form of the wrapped value.

        Raises:
            SerializationError: If the wrapped value cannot be written.
        """
        return self._value.to_fhir()

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"DateTime({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)


__all__ = ["DateTime"]
