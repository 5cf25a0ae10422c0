"""Precision enumeration for temporal values.

This module provides the Precision enum naming the finest unit a
temporal value states explicitly.
"""

from __future__ import annotations

from enum import Enum


class Precision(Enum):
    """Finest explicitly stated unit of a temporal value.

    Members are declared coarse to fine. A date stated to YEAR precision
    says nothing about its month or day; those positions are unknown,
    not January or the first.

    Examples:
        >>> from fhirtime import Date
        >>> Date.parse("2024-02").precision
        <Precision.MONTH: 'month'>

        >>> Precision.YEAR.date_components
        1

        >>> Precision.SECOND.is_finer_than(Precision.DAY)
        True
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    SECOND = "second"

    @property
    def date_components(self) -> int:
        """Return how many of (year, month, day) this precision states.

        Examples:
            >>> Precision.MONTH.date_components
            2
            >>> Precision.SECOND.date_components
            3
        """
        return min(_RANK[self], 3)

    def is_finer_than(self, other: Precision) -> bool:
        """Return True if this precision states more units than other."""
        return _RANK[self] > _RANK[other]


_RANK: dict[Precision, int] = {
    Precision.YEAR: 1,
    Precision.MONTH: 2,
    Precision.DAY: 3,
    Precision.SECOND: 4,
}


__all__ = ["Precision"]
