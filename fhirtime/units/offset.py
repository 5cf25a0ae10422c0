"""UTC offset carried by an instant.

This module provides the UtcOffset class: a fixed offset from UTC as
written in an RFC 3339 timestamp, without IANA time zone support.
"""

from __future__ import annotations

import re
from typing import ClassVar

from fhirtime._internal.constants import MAX_OFFSET_MINUTES, SECONDS_PER_MINUTE
from fhirtime.errors import OffsetError

_OFFSET_PATTERN = re.compile(r"^([+-])([0-9]{2}):([0-9]{2})$")


class UtcOffset:
    """A UTC offset with minute resolution.

    The offset keeps the spelling it was read with. ``Z``, ``+00:00`` and
    ``-00:00`` are equal offsets, but each is written back unchanged so
    that an instant round-trips verbatim.

    Attributes:
        minutes: Offset from UTC in minutes, positive east of UTC.

    Examples:
        >>> UtcOffset.parse("+05:30").minutes
        330

        >>> str(UtcOffset.parse("Z"))
        'Z'

        >>> UtcOffset.parse("-00:00") == UtcOffset.utc()
        True
    """

    __slots__ = ("_minutes", "_text")

    _utc_instance: ClassVar[UtcOffset | None] = None

    def __init__(self, minutes: int = 0) -> None:
        """Create an offset of the given number of minutes.

        Args:
            minutes: Offset in minutes, within +/- 23:59.

        Raises:
            OffsetError: If minutes is not an integer or is out of range.
        """
        if not isinstance(minutes, int) or isinstance(minutes, bool):
            raise OffsetError(f"minutes must be an integer, got {type(minutes).__name__}")
        if abs(minutes) > MAX_OFFSET_MINUTES:
            raise OffsetError(
                f"offset {minutes} minutes is outside valid range "
                f"[-{MAX_OFFSET_MINUTES}, {MAX_OFFSET_MINUTES}]"
            )
        self._minutes: int = minutes
        self._text: str = _numeric_text(minutes, negative=minutes < 0)

    @classmethod
    def _from_parts(cls, minutes: int, text: str) -> UtcOffset:
        instance = object.__new__(cls)
        instance._minutes = minutes
        instance._text = text
        return instance

    @classmethod
    def utc(cls) -> UtcOffset:
        """Return the UTC offset, written as ``Z``.

        All calls return the same instance.
        """
        if cls._utc_instance is None:
            cls._utc_instance = cls._from_parts(0, "Z")
        return cls._utc_instance

    @classmethod
    def parse(cls, s: str) -> UtcOffset:
        """Parse an RFC 3339 offset: ``Z`` or ``+hh:mm`` / ``-hh:mm``.

        Args:
            s: The offset string.

        Returns:
            The parsed offset, keeping its spelling.

        Raises:
            OffsetError: If the string is not a valid offset.

        Examples:
            >>> UtcOffset.parse("-05:00").minutes
            -300

            >>> UtcOffset.parse("+0500")
            Traceback (most recent call last):
            ...
            fhirtime.errors.OffsetError: invalid UTC offset: '+0500'
        """
        if not isinstance(s, str):
            raise OffsetError(f"expected string, got {type(s).__name__}")
        if s in ("Z", "z"):
            return cls.utc()

        match = _OFFSET_PATTERN.fullmatch(s)
        if not match:
            raise OffsetError(f"invalid UTC offset: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str)
        if hours > 23 or minutes > 59:
            raise OffsetError(f"UTC offset out of range: {s!r}")

        total = hours * 60 + minutes
        if sign_str == "-":
            total = -total
        return cls._from_parts(total, s)

    @property
    def minutes(self) -> int:
        """Return the offset in minutes, positive east of UTC."""
        return self._minutes

    @property
    def seconds(self) -> int:
        """Return the offset in seconds, positive east of UTC."""
        return self._minutes * SECONDS_PER_MINUTE

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero, however it is spelled."""
        return self._minutes == 0

    def __eq__(self, other: object) -> bool:
        """Offsets are equal when they shift by the same amount."""
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._minutes == other._minutes

    def __hash__(self) -> int:
        return hash(self._minutes)

    def __repr__(self) -> str:
        return f"UtcOffset({self._text!r})"

    def __str__(self) -> str:
        """Return the offset as it appears in an RFC 3339 timestamp."""
        return self._text


def _numeric_text(minutes: int, *, negative: bool) -> str:
    hours, mins = divmod(abs(minutes), 60)
    sign = "-" if negative else "+"
    return f"{sign}{hours:02d}:{mins:02d}"


__all__ = ["UtcOffset"]
