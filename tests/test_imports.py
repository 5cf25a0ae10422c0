"""Tests for fhirtime package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_fhirtime() -> None:
    """Import fhirtime package succeeds."""
    import fhirtime

    assert hasattr(fhirtime, "__version__")
    assert fhirtime.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import fhirtime.core submodule succeeds."""
    from fhirtime import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import fhirtime.units submodule succeeds."""
    from fhirtime import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import fhirtime.format submodule succeeds."""
    from fhirtime import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import fhirtime.convert submodule succeeds."""
    from fhirtime import convert

    assert hasattr(convert, "__all__")


def test_import_comparison_module() -> None:
    """Import fhirtime.comparison submodule succeeds."""
    from fhirtime import comparison

    assert hasattr(comparison, "__all__")


def test_import_search_module() -> None:
    """Import fhirtime.search submodule succeeds."""
    from fhirtime import search

    assert hasattr(search, "__all__")


def test_all_exports_exist() -> None:
    """Every name in __all__ is defined."""
    import fhirtime

    for name in fhirtime.__all__:
        assert hasattr(fhirtime, name), name


def test_error_hierarchy() -> None:
    """All errors derive from FhirTimeError."""
    from fhirtime import errors

    for name in errors.__all__:
        obj = getattr(errors, name)
        if isinstance(obj, type) and issubclass(obj, Exception):
            assert issubclass(obj, errors.FhirTimeError), name
