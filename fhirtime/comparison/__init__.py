"""Cross-precision comparison for fhirtime.

This module provides:
    - compare: Three-way comparison at the coarser precision
    - LatticeOrdered: Mixin wiring rich comparisons to compare
"""

from __future__ import annotations

from fhirtime.comparison.lattice import (
    LatticeOrdered,
    LatticeValue,
    compare,
    is_lattice_value,
)

__all__: list[str] = [
    "LatticeOrdered",
    "LatticeValue",
    "compare",
    "is_lattice_value",
]
