"""Cross-precision comparison of dates, date-times and instants.

Every ordering and equality operator on Date, CalendarDate, Instant and
DateTime is defined by the single function :func:`compare`, so the
result for ``(a, b)`` is always the mirror of the result for ``(b, a)``.

Comparison Rules:
    - DateTime is unwrapped to the Date or Instant it holds.
    - Instant vs Instant: compare the absolute instants; the displayed
      offsets do not matter.
    - Every other pairing compares calendar positions at the coarser of
      the two precisions:
        * Year: (year,)
        * YearMonth: (year, month)
        * FullDate, CalendarDate: (year, month, day)
        * Instant: (year, month, day) of its local date, in its own offset
      Positions the coarser value does not state are ignored, never
      filled with a period start.

The relation is deliberately not transitive across mixed precisions:

    >>> from fhirtime import FullDate, Year
    >>> Year(2024) == FullDate(2024, 1, 1)
    True
    >>> Year(2024) == FullDate(2024, 12, 31)
    True
    >>> FullDate(2024, 1, 1) == FullDate(2024, 12, 31)
    False
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from fhirtime.core.calendar_date import CalendarDate
    from fhirtime.core.date import Date
    from fhirtime.core.datetime import DateTime
    from fhirtime.core.instant import Instant

# Type alias for values ordered by the lattice
LatticeValue = Union["Date", "CalendarDate", "Instant", "DateTime"]


def is_lattice_value(value: object) -> bool:
    """Return True if value takes part in cross-precision comparison."""
    from fhirtime.core.calendar_date import CalendarDate
    from fhirtime.core.date import Date
    from fhirtime.core.datetime import DateTime
    from fhirtime.core.instant import Instant

    return isinstance(value, (Date, CalendarDate, Instant, DateTime))


def compare(left: LatticeValue, right: LatticeValue) -> int:
    """Compare two temporal values at the coarser of their precisions.

    Args:
        left: First value.
        right: Second value.

    Returns:
        -1 if left sorts before right, 0 if they are equal at the shared
        precision, 1 if left sorts after right.

    Raises:
        TypeError: If either value is not a Date, CalendarDate, Instant
            or DateTime.

    Examples:
        >>> from fhirtime import Date, DateTime
        >>> compare(Date.parse("2024-02"), DateTime.parse("2024-02-15T13:00:00Z"))
        0
        >>> compare(Date.parse("2024-02"), Date.parse("2024-03"))
        -1
    """
    from fhirtime.core.instant import Instant

    left = _unwrap(left)
    right = _unwrap(right)

    if isinstance(left, Instant) and isinstance(right, Instant):
        return _sign(left.epoch_nanoseconds - right.epoch_nanoseconds)

    left_key = _date_key(left)
    right_key = _date_key(right)
    shared = min(len(left_key), len(right_key))
    return _compare_tuples(left_key[:shared], right_key[:shared])


def _unwrap(value: object) -> object:
    from fhirtime.core.datetime import DateTime

    if isinstance(value, DateTime):
        return value.value
    return value


def _date_key(value: object) -> tuple[int, ...]:
    from fhirtime.core.calendar_date import CalendarDate
    from fhirtime.core.date import Date
    from fhirtime.core.instant import Instant

    if isinstance(value, (Date, CalendarDate, Instant)):
        return value._date_key()
    raise TypeError(f"cannot compare {type(value).__name__} with a FHIR date")


def _compare_tuples(left: tuple[int, ...], right: tuple[int, ...]) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class LatticeOrdered:
    """Mixin routing rich comparisons through :func:`compare`.

    Operands that are not lattice values yield NotImplemented, so ``==``
    falls back to identity and ordering raises TypeError.
    """

    __slots__ = ()

    def _compare_to(self, other: object) -> int | None:
        if not is_lattice_value(other):
            return None
        return compare(self, other)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __ne__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result != 0

    def __lt__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result >= 0

    __hash__ = None  # type: ignore[assignment]


__all__ = ["LatticeValue", "LatticeOrdered", "compare", "is_lattice_value"]
