"""Instant class representing an absolute, zoned point in time.

This module provides the Instant class for the standard's ``instant``
primitive and for the date-time form of ``dateTime``: a full date and
clock time to at least seconds, with a mandatory UTC offset.
"""

from __future__ import annotations

import datetime as _datetime

from fhirtime._internal.calendar import ymd_to_epoch_days
from fhirtime._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from fhirtime._internal.validation import (
    validate_clock,
    validate_day,
    validate_fraction_digits,
    validate_month,
    validate_year,
)
from fhirtime.comparison.lattice import LatticeOrdered
from fhirtime.core.calendar_date import CalendarDate
from fhirtime.core.time import Time
from fhirtime.errors import OffsetError, ValidationError
from fhirtime.units.offset import UtcOffset
from fhirtime.units.precision import Precision


class Instant(LatticeOrdered):
    """A point in time with a UTC offset.

    Two instants are equal when they denote the same absolute moment,
    whatever offsets they display. The offset an instant was created
    with is kept and written back unchanged; nothing is normalized to
    UTC.

    Against a partial-precision Date, an Instant compares by the local
    date it shows in its own offset.

    Attributes:
        year, month, day: Local calendar date.
        hour, minute, second, nanosecond: Local clock time.
        offset: The UTC offset.

    Examples:
        >>> a = Instant.parse("2024-02-11T13:00:00Z")
        >>> b = Instant.parse("2024-02-11T14:00:00+01:00")
        >>> a == b
        True
        >>> b.to_fhir()
        '2024-02-11T14:00:00+01:00'
    """

    __slots__ = ("_year", "_month", "_day", "_nanos", "_offset", "_digits")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
        offset: UtcOffset,
        fraction_digits: int | None = None,
    ) -> None:
        """Create an Instant from local components and an offset.

        Args:
            year: The year (0-9999).
            month: The month (1-12).
            day: The day of the month.
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The fraction of the second (0-999999999).
            offset: The UTC offset the local components are expressed in.
            fraction_digits: Preferred number of fraction digits when
                written (1-9), or None for the minimal count.

        Raises:
            ValidationError: If any component is out of range or offset is
                not a UtcOffset.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)
        validate_clock(hour, minute, second, nanosecond)
        validate_fraction_digits(fraction_digits)
        if not isinstance(offset, UtcOffset):
            raise ValidationError(f"offset must be a UtcOffset, got {type(offset).__name__}")

        self._year: int = year
        self._month: int = month
        self._day: int = day
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )
        self._offset: UtcOffset = offset
        self._digits: int | None = fraction_digits

    @classmethod
    def parse(cls, s: str) -> Instant:
        """Parse a strict RFC 3339 timestamp.

        Raises:
            ParseError: If the string is not RFC 3339 or a component is
                out of range.

        Examples:
            >>> Instant.parse("2024-02-15T13:00:00.250-05:00").nanosecond
            250000000
        """
        from fhirtime.format.rfc3339 import parse_rfc3339

        return parse_rfc3339(s)

    @classmethod
    def from_datetime(cls, value: _datetime.datetime) -> Instant:
        """Create an Instant from an aware standard library datetime.

        Raises:
            ValidationError: If the datetime is naive.
            OffsetError: If its offset is not a whole number of minutes.
        """
        utcoffset = value.utcoffset()
        if utcoffset is None:
            raise ValidationError("an instant requires an aware datetime; got a naive one")

        total_seconds = int(utcoffset.total_seconds())
        if total_seconds % 60 or utcoffset.microseconds:
            raise OffsetError(f"offset {utcoffset} is not a whole number of minutes")

        offset = UtcOffset.utc() if total_seconds == 0 else UtcOffset(total_seconds // 60)
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            nanosecond=value.microsecond * 1_000,
            offset=offset,
        )

    @classmethod
    def now(cls) -> Instant:
        """Return the current moment, in UTC."""
        return cls.from_datetime(_datetime.datetime.now(_datetime.timezone.utc))

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
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    @property
    def fraction_digits(self) -> int | None:
        return self._digits

    @property
    def offset(self) -> UtcOffset:
        """Return the UTC offset as carried by this instant."""
        return self._offset

    @property
    def precision(self) -> Precision:
        """Return Precision.SECOND."""
        return Precision.SECOND

    @property
    def epoch_nanoseconds(self) -> int:
        """Return nanoseconds since 1970-01-01T00:00:00Z.

        This is the absolute instant used for ordering and equality.

        Examples:
            >>> Instant.parse("1970-01-01T01:00:00+01:00").epoch_nanoseconds
            0
        """
        local = ymd_to_epoch_days(self._year, self._month, self._day) * NANOS_PER_DAY + self._nanos
        return local - self._offset.seconds * NANOS_PER_SECOND

    def date(self) -> CalendarDate:
        """Return the local calendar date, in this instant's own offset."""
        return CalendarDate(self._year, self._month, self._day)

    def time(self) -> Time:
        """Return the local clock time, without the offset."""
        return Time(
            self.hour,
            self.minute,
            self.second,
            nanosecond=self.nanosecond,
            fraction_digits=self._digits,
        )

    def to_datetime(self) -> _datetime.datetime:
        """Return an aware standard library datetime.

        The stdlib type stops at microseconds; finer digits are dropped.
        """
        tz = _datetime.timezone(_datetime.timedelta(minutes=self._offset.minutes))
        return _datetime.datetime(
            self._year,
            self._month,
            self._day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // 1_000,
            tzinfo=tz,
        )

    def to_fhir(self) -> str:
        """Return the RFC 3339 wire form, keeping the carried offset.

        Examples:
            >>> Instant.parse("2024-02-11T13:00:00.500Z").to_fhir()
            '2024-02-11T13:00:00.500Z'
        """
        from fhirtime.format.rfc3339 import format_rfc3339

        return format_rfc3339(self)

    def _date_key(self) -> tuple[int, ...]:
        return (self._year, self._month, self._day)

    def __hash__(self) -> int:
        return hash(self.epoch_nanoseconds)

    def __repr__(self) -> str:
        return (
            f"Instant({self._year}, {self._month}, {self._day}, {self.hour}, "
            f"{self.minute}, {self.second}, nanosecond={self.nanosecond}, "
            f"offset={self._offset!r})"
        )

    def __str__(self) -> str:
        return self.to_fhir()


__all__ = ["Instant"]
