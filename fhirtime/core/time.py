"""Time class representing a civil time of day.

This module provides the Time class for the standard's ``time``
primitive: a clock reading with optional fractional seconds and no
date or zone.
"""

from __future__ import annotations

import datetime as _datetime
import re

from fhirtime._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from fhirtime._internal.fraction import format_fraction, parse_fraction
from fhirtime._internal.validation import validate_clock, validate_fraction_digits
from fhirtime.errors import ParseError, ValidationError

# hh:mm[:ss[.fraction]]
_TIME_PATTERN = re.compile(r"^([0-9]{2}):([0-9]{2})(?::([0-9]{2})(?:\.([0-9]{1,9}))?)?$")


class Time:
    """A time of day with nanosecond resolution.

    Time represents the time portion of a day, from midnight (00:00:00)
    to just before the next midnight (23:59:59.999999999). It does not
    include any date or timezone information.

    The fraction is compared numerically: ``13:00:00.5`` and
    ``13:00:00.500`` are equal. The digit count a value was parsed with
    is kept so that it is written back the same way.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nanosecond: The fraction of the second in nanoseconds.

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour
        14

        >>> Time.parse("13:00:00.500").to_fhir()
        '13:00:00.500'

        >>> Time.parse("13:00").to_fhir()
        '13:00:00'
    """

    __slots__ = ("_nanos", "_digits")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
        fraction_digits: int | None = None,
    ) -> None:
        """Create a Time from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nanosecond: The fraction of the second (0-999999999).
            fraction_digits: Preferred number of fraction digits when
                written (1-9), or None for the minimal count.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_clock(hour, minute, second, nanosecond)
        validate_fraction_digits(fraction_digits)

        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )
        self._digits: int | None = fraction_digits

    @classmethod
    def parse(cls, s: str) -> Time:
        """Parse a time from ``hh:mm[:ss[.fraction]]``.

        Minutes are mandatory. A fraction (1-9 digits) is only valid
        after seconds.

        Args:
            s: The time string.

        Returns:
            The parsed Time.

        Raises:
            ParseError: If the string has the wrong shape or a component
                is out of range.

        Examples:
            >>> Time.parse("14:30:45.123")
            Time(14, 30, 45, nanosecond=123000000)

            >>> Time.parse("14")
            Traceback (most recent call last):
            ...
            fhirtime.errors.ParseError: invalid time format: '14'. Expected hh:mm[:ss[.fraction]]
        """
        if not isinstance(s, str):
            raise ParseError(f"expected string, got {type(s).__name__}")

        match = _TIME_PATTERN.fullmatch(s)
        if not match:
            raise ParseError(f"invalid time format: {s!r}. Expected hh:mm[:ss[.fraction]]")

        hour_str, minute_str, second_str, frac_str = match.groups()
        try:
            return cls(
                int(hour_str),
                int(minute_str),
                int(second_str) if second_str else 0,
                nanosecond=parse_fraction(frac_str) if frac_str else 0,
                fraction_digits=len(frac_str) if frac_str else None,
            )
        except ValidationError as e:
            raise ParseError(f"invalid time {s!r}: {e}") from e

    @classmethod
    def from_time(cls, value: _datetime.time) -> Time:
        """Create a Time from a standard library ``datetime.time``.

        Any tzinfo on the value is ignored; FHIR times carry no zone.
        """
        return cls(
            value.hour,
            value.minute,
            value.second,
            nanosecond=value.microsecond * 1_000,
        )

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        """Return the fraction of the current second in nanoseconds."""
        return self._nanos % NANOS_PER_SECOND

    @property
    def fraction_digits(self) -> int | None:
        """Return the preferred fraction digit count, if any."""
        return self._digits

    def to_time(self) -> _datetime.time:
        """Return a standard library ``datetime.time``.

        The stdlib type stops at microseconds; finer digits are dropped.
        """
        return _datetime.time(
            self.hour, self.minute, self.second, self.nanosecond // 1_000
        )

    def to_fhir(self) -> str:
        """Return the wire form ``hh:mm:ss[.fraction]``.

        Seconds are always written. The fraction is written only when
        it is non-zero.

        Examples:
            >>> Time(13, 0).to_fhir()
            '13:00:00'
            >>> Time(13, 0, 0, nanosecond=500_000_000).to_fhir()
            '13:00:00.5'
        """
        base = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        return base + format_fraction(self.nanosecond, self._digits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this time is earlier in the day than another."""
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return (
            f"Time({self.hour}, {self.minute}, {self.second}, "
            f"nanosecond={self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_fhir()


__all__ = ["Time"]
