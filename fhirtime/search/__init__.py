"""Search support for fhirtime.

This module provides:
    - resolve: Extract the comparable value of a record for a search parameter
    - supported_selectors: Search parameters a record type can resolve
    - unregistered_resource_types: Record types with no resolver
    - sort_records, filter_records: Order and range-filter records
    - Order: Sort direction
"""

from __future__ import annotations

from fhirtime.search import parameters, resources
from fhirtime.search.ordering import (
    Order,
    compare_values,
    filter_records,
    sort_records,
)
from fhirtime.search.resolve import (
    Comparable,
    resolve,
    supported_selectors,
    unregistered_resource_types,
)

__all__: list[str] = [
    "parameters",
    "resources",
    "Comparable",
    "Order",
    "compare_values",
    "filter_records",
    "resolve",
    "sort_records",
    "supported_selectors",
    "unregistered_resource_types",
]
