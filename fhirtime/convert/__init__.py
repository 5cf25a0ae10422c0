"""Conversion utilities for fhirtime types.

This module provides functions for converting temporal values to and from
JSON field values.

Functions:
    to_json: Convert a temporal value to its JSON string value.
    from_json: Read a JSON value as a declared field type.
    dumps_field: Encode a temporal value as a JSON document.
    loads_field: Decode a JSON document as a declared field type.
"""

from __future__ import annotations

from fhirtime.convert.json import (
    FieldType,
    dumps_field,
    from_json,
    loads_field,
    to_json,
)

__all__: list[str] = [
    "FieldType",
    "to_json",
    "from_json",
    "dumps_field",
    "loads_field",
]
