"""JSON serialization and deserialization for temporal fields.

In a resource document a temporal field is a plain JSON string, and the
field's declared type decides how that string is read. This module
converts between temporal values and those strings.

Functions:
    to_json: Convert a temporal value to its JSON string value.
    from_json: Read a JSON value as the given field type.
    dumps_field: Encode a temporal value as a JSON document.
    loads_field: Decode a JSON document as the given field type.

Examples:
    >>> from fhirtime import Date
    >>> from fhirtime.convert import to_json, from_json, FieldType

    >>> to_json(Date.parse("2024-02"))
    '2024-02'

    >>> from_json(FieldType.DATE_TIME, "2024-02-11T13:00:00Z").is_instant
    True

    >>> dumps_field(Date.parse("2024"))
    '"2024"'
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from fhirtime.errors import ParseError

if TYPE_CHECKING:
    from fhirtime.core.date import Date
    from fhirtime.core.datetime import DateTime
    from fhirtime.core.instant import Instant
    from fhirtime.core.time import Time

# Type alias for values held in temporal fields
FieldValue = Union["Date", "DateTime", "Instant", "Time"]


class FieldType(Enum):
    """The declared type of a temporal field."""

    DATE = "date"
    DATE_TIME = "dateTime"
    INSTANT = "instant"
    TIME = "time"


def to_json(value: FieldValue) -> str:
    """Convert a temporal value to its JSON string value.

    Args:
        value: A Date, DateTime, Instant or Time.

    Returns:
        The wire string, ready to be placed in a JSON document.

    Raises:
        SerializationError: If the value cannot be written.
        TypeError: If value is not a supported temporal type.

    Examples:
        >>> from fhirtime import Time
        >>> to_json(Time(13, 0, 0, nanosecond=500_000_000, fraction_digits=3))
        '13:00:00.500'
    """
    from fhirtime.format.fhir import format_value

    return format_value(value)


def from_json(field_type: FieldType, data: Any) -> FieldValue:
    """Read a JSON value as the given field type.

    Args:
        field_type: The declared type of the field.
        data: The decoded JSON value; must be a string.

    Returns:
        A Date, DateTime, Instant or Time according to field_type.

    Raises:
        ParseError: If data is not a string or does not parse. Date and
            dateTime failures are DateFormatError.
        TypeError: If field_type is not a FieldType.

    Examples:
        >>> from_json(FieldType.DATE, "2024-02-11")
        FullDate(2024, 2, 11)

        >>> from_json(FieldType.TIME, 1300)
        Traceback (most recent call last):
        ...
        fhirtime.errors.ParseError: expected string for time field, got int
    """
    # Import here to avoid circular imports
    from fhirtime.format.fhir import (
        parse_date,
        parse_datetime,
        parse_instant,
        parse_time,
    )

    if not isinstance(field_type, FieldType):
        raise TypeError(f"expected FieldType, got {type(field_type).__name__}")
    if not isinstance(data, str):
        raise ParseError(
            f"expected string for {field_type.value} field, got {type(data).__name__}"
        )

    if field_type is FieldType.DATE:
        return parse_date(data)
    elif field_type is FieldType.DATE_TIME:
        return parse_datetime(data)
    elif field_type is FieldType.INSTANT:
        return parse_instant(data)
    else:
        return parse_time(data)


def dumps_field(value: FieldValue) -> str:
    """Encode a temporal value as a JSON string literal.

    Examples:
        >>> from fhirtime import Instant
        >>> dumps_field(Instant.parse("2024-02-11T13:00:00+01:00"))
        '"2024-02-11T13:00:00+01:00"'
    """
    return json.dumps(to_json(value))


def loads_field(field_type: FieldType, document: str) -> FieldValue:
    """Decode a JSON string literal as the given field type.

    Raises:
        ParseError: If the document is not valid JSON or its value does
            not parse as field_type.
        TypeError: If field_type is not a FieldType.
    """
    if not isinstance(field_type, FieldType):
        raise TypeError(f"expected FieldType, got {type(field_type).__name__}")
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON for {field_type.value} field: {e}") from e
    return from_json(field_type, data)


__all__ = ["FieldType", "FieldValue", "to_json", "from_json", "dumps_field", "loads_field"]
