"""Sorting and range filtering of records by a search parameter.

Records are ordered by the value :func:`~fhirtime.search.resolve`
extracts for the given selector. Temporal values are compared with
:func:`fhirtime.comparison.compare`, so dates of different precision sort
by their shared calendar positions. Records that resolve to None always
sort last.

Because cross-precision comparison is not transitive, sorting a mix of
precisions gives an order that is consistent for neighbours but not a
strict total order; values that compare equal keep their input order.

Examples:
    >>> from fhirtime import DateTime
    >>> from fhirtime.search.resources import Immunization
    >>> from fhirtime.search.parameters import ImmunizationSearchParameter as P
    >>> shots = [
    ...     Immunization(id="b", date=DateTime.parse("2024-03")),
    ...     Immunization(id="none"),
    ...     Immunization(id="a", date=DateTime.parse("2023")),
    ... ]
    >>> [i.id for i in sort_records(shots, P.DATE)]
    ['a', 'b', 'none']
    >>> [i.id for i in sort_records(shots, P.DATE, Order.DESCENDING)]
    ['b', 'a', 'none']
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from functools import cmp_to_key
from typing import Any, TypeVar

from fhirtime.comparison.lattice import compare, is_lattice_value
from fhirtime.search.resolve import Comparable, resolve

R = TypeVar("R")


class Order(Enum):
    """Sort direction."""

    ASCENDING = "asc"
    DESCENDING = "desc"


def compare_values(left: Comparable, right: Comparable) -> int:
    """Compare two resolved values.

    Temporal values use the cross-precision lattice; strings compare as
    strings.

    Returns:
        -1, 0 or 1.

    Raises:
        TypeError: If the values cannot be compared with each other.
    """
    if is_lattice_value(left) and is_lattice_value(right):
        return compare(left, right)
    if isinstance(left, str) and isinstance(right, str):
        return (left > right) - (left < right)
    raise TypeError(
        f"cannot compare {type(left).__name__} with {type(right).__name__}"
    )


def sort_records(
    records: Iterable[R],
    selector: Enum,
    order: Order = Order.ASCENDING,
) -> list[R]:
    """Return records sorted by their resolved value for selector.

    The sort is stable. Records without a value are placed last in both
    directions.

    Args:
        records: The records to sort.
        selector: The search parameter to sort by.
        order: Sort direction.

    Returns:
        A new list.

    Raises:
        UnsupportedSelectorError: If selector has no resolver.
        TypeError: If selector does not belong to a record's type.
    """
    present: list[tuple[Comparable, R]] = []
    absent: list[R] = []
    for record in records:
        value = resolve(record, selector)
        if value is None:
            absent.append(record)
        else:
            present.append((value, record))

    key = cmp_to_key(lambda a, b: compare_values(a[0], b[0]))
    present.sort(key=key, reverse=order is Order.DESCENDING)
    return [record for _, record in present] + absent


def filter_records(
    records: Iterable[R],
    selector: Enum,
    *,
    lower: Any = None,
    upper: Any = None,
) -> list[R]:
    """Return the records whose resolved value lies within the bounds.

    A record is kept when ``lower <= value <= upper`` under
    :func:`compare_values`. Either bound may be omitted. Records without
    a value are dropped.

    Because the bounds compare at the coarser precision, ``lower=Year(2024)``
    keeps every record dated anywhere in 2024.

    Raises:
        UnsupportedSelectorError: If selector has no resolver.
    """
    kept: list[R] = []
    for record in records:
        value = resolve(record, selector)
        if value is None:
            continue
        if lower is not None and compare_values(lower, value) > 0:
            continue
        if upper is not None and compare_values(value, upper) > 0:
            continue
        kept.append(record)
    return kept


__all__ = ["Order", "compare_values", "sort_records", "filter_records"]
