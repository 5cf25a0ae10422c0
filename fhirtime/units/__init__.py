"""Unit types for fhirtime.

This module provides:
    - Precision: Finest unit a temporal value states
    - UtcOffset: Fixed UTC offset carried by an instant
"""

from __future__ import annotations

from fhirtime.units.offset import UtcOffset
from fhirtime.units.precision import Precision

__all__: list[str] = ["Precision", "UtcOffset"]
