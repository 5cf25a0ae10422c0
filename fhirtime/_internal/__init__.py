"""Internal utilities for fhirtime.

This module contains private implementation details:
    - Constants and wire limits
    - Gregorian calendar helpers
    - Range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from fhirtime._internal.validation import (
    check_wire_year,
    validate_clock,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "check_wire_year",
    "validate_clock",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
