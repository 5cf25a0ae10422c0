"""Tests for the partial-precision Date classes and CalendarDate.

This module covers:
- Construction of Year, YearMonth and FullDate
- Precision reporting
- Narrowing to CalendarDate
- Serialization and the four-digit year bound
- Hashing
- datetime.date interop
"""

import datetime

import pytest

from fhirtime import CalendarDate, Date, FullDate, Precision, Year, YearMonth
from fhirtime.errors import (
    InsufficientDatePrecision,
    SerializationError,
    ValidationError,
)


class TestDateConstruction:
    """Tests for constructing each Date variant."""

    def test_year(self) -> None:
        """Year holds only a year."""
        y = Year(2024)
        assert y.year == 2024
        assert not hasattr(y, "month")

    def test_year_month(self) -> None:
        """YearMonth holds a year and month."""
        ym = YearMonth(2024, 2)
        assert (ym.year, ym.month) == (2024, 2)

    def test_full_date(self) -> None:
        """FullDate holds a complete date."""
        d = FullDate(2024, 2, 11)
        assert (d.year, d.month, d.day) == (2024, 2, 11)

    def test_date_is_abstract(self) -> None:
        """Date itself cannot be instantiated."""
        with pytest.raises(TypeError):
            Date()  # type: ignore[abstract]

    def test_variants_are_dates(self) -> None:
        """All variants share the Date base."""
        assert all(isinstance(v, Date) for v in (Year(1), YearMonth(1, 1), FullDate(1, 1, 1)))

    def test_year_month_rejects_bad_month(self) -> None:
        """YearMonth validates its month."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            YearMonth(2024, 13)

    def test_full_date_rejects_invalid_day(self) -> None:
        """FullDate validates against the calendar."""
        with pytest.raises(ValidationError, match="day must be between 1 and 28"):
            FullDate(2023, 2, 29)

    def test_full_date_leap_day(self) -> None:
        """29 February exists in leap years."""
        assert FullDate(2024, 2, 29).day == 29
        assert FullDate(2000, 2, 29).day == 29
        with pytest.raises(ValidationError):
            FullDate(1900, 2, 29)

    def test_year_rejects_non_integer(self) -> None:
        """Year requires an int."""
        with pytest.raises(ValidationError, match="year must be an integer"):
            Year("2024")  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        """Dates have no settable attributes."""
        y = Year(2024)
        with pytest.raises(AttributeError):
            y.year = 2025  # type: ignore[misc]
        with pytest.raises(AttributeError):
            y.extra = 1  # type: ignore[attr-defined]


class TestDatePrecision:
    """Tests for the precision property."""

    def test_precisions(self) -> None:
        """Each variant reports its own precision."""
        assert Year(2024).precision is Precision.YEAR
        assert YearMonth(2024, 2).precision is Precision.MONTH
        assert FullDate(2024, 2, 11).precision is Precision.DAY
        assert CalendarDate(2024, 2, 11).precision is Precision.DAY

    def test_precision_order(self) -> None:
        """Precision runs coarse to fine."""
        assert Precision.MONTH.is_finer_than(Precision.YEAR)
        assert Precision.SECOND.is_finer_than(Precision.DAY)
        assert not Precision.YEAR.is_finer_than(Precision.YEAR)
        assert [p.date_components for p in Precision] == [1, 2, 3, 3]


class TestDateNarrowing:
    """Tests for to_calendar_date."""

    def test_full_date_narrows(self) -> None:
        """FullDate narrows to the CalendarDate it wraps."""
        assert FullDate(2024, 2, 11).to_calendar_date() == CalendarDate(2024, 2, 11)

    @pytest.mark.parametrize("value", [Year(2024), YearMonth(2024, 2)])
    def test_coarse_dates_cannot_narrow(self, value: Date) -> None:
        """Year and YearMonth raise InsufficientDatePrecision."""
        with pytest.raises(InsufficientDatePrecision):
            value.to_calendar_date()

    def test_from_calendar_date(self) -> None:
        """FullDate can wrap an existing CalendarDate."""
        cd = CalendarDate(2024, 2, 11)
        assert FullDate.from_calendar_date(cd).to_calendar_date() is cd

    def test_from_calendar_date_type_check(self) -> None:
        """from_calendar_date rejects other types."""
        with pytest.raises(TypeError):
            FullDate.from_calendar_date(datetime.date(2024, 2, 11))  # type: ignore[arg-type]


class TestDateSerialization:
    """Tests for to_fhir and str."""

    def test_wire_forms(self) -> None:
        """Each variant writes its own precision, zero-padded."""
        assert Year(2024).to_fhir() == "2024"
        assert YearMonth(2024, 2).to_fhir() == "2024-02"
        assert FullDate(2024, 2, 1).to_fhir() == "2024-02-01"

    @pytest.mark.parametrize(
        "value",
        [Year(999), Year(10000), YearMonth(999, 1), FullDate(999, 1, 1), FullDate(0, 1, 1)],
    )
    def test_year_outside_wire_range(self, value: Date) -> None:
        """Years that are not four digits raise SerializationError."""
        with pytest.raises(SerializationError, match="year is not 4 digits long"):
            value.to_fhir()

    def test_boundary_years(self) -> None:
        """1000 and 9999 are writable."""
        assert Year(1000).to_fhir() == "1000"
        assert FullDate(9999, 12, 31).to_fhir() == "9999-12-31"

    def test_str_does_not_raise(self) -> None:
        """str() writes the value even when to_fhir would refuse."""
        assert str(Year(999)) == "0999"
        assert str(YearMonth(2024, 2)) == "2024-02"

    def test_repr(self) -> None:
        """repr names the variant."""
        assert repr(Year(2024)) == "Year(2024)"
        assert repr(YearMonth(2024, 2)) == "YearMonth(2024, 2)"
        assert repr(FullDate(2024, 2, 11)) == "FullDate(2024, 2, 11)"


class TestDateHashing:
    """Tests for Date hashing."""

    def test_equal_dates_hash_equal(self) -> None:
        """Mixed-precision dates that compare equal share a hash."""
        values = [Year(2024), YearMonth(2024, 6), FullDate(2024, 6, 15), CalendarDate(2024, 6, 15)]
        assert len({hash(v) for v in values}) == 1

    def test_set_membership(self) -> None:
        """A coarse date finds an equal finer date in a set."""
        assert Year(2024) in {FullDate(2024, 6, 15)}
        assert Year(2023) not in {FullDate(2024, 6, 15)}


class TestCalendarDate:
    """Tests for CalendarDate."""

    def test_construction(self) -> None:
        """CalendarDate holds year, month, day."""
        d = CalendarDate(2024, 2, 11)
        assert (d.year, d.month, d.day) == (2024, 2, 11)

    def test_year_zero(self) -> None:
        """Year 0 is a valid calendar year."""
        assert CalendarDate(0, 1, 1).year == 0

    def test_year_bounds(self) -> None:
        """Years outside 0-9999 are rejected."""
        with pytest.raises(ValidationError):
            CalendarDate(10000, 1, 1)
        with pytest.raises(ValidationError):
            CalendarDate(-1, 1, 1)

    def test_ordering(self) -> None:
        """Calendar dates are totally ordered."""
        assert CalendarDate(2024, 1, 31) < CalendarDate(2024, 2, 1)
        assert CalendarDate(2023, 12, 31) < CalendarDate(2024, 1, 1)

    def test_to_fhir(self) -> None:
        """CalendarDate writes YYYY-MM-DD."""
        assert CalendarDate(2024, 2, 11).to_fhir() == "2024-02-11"

    def test_stdlib_round_trip(self) -> None:
        """CalendarDate converts to and from datetime.date."""
        d = datetime.date(2024, 2, 29)
        assert CalendarDate.from_date(d).to_date() == d

    def test_full_date_from_stdlib(self) -> None:
        """FullDate.from_date wraps a datetime.date."""
        assert FullDate.from_date(datetime.date(2024, 2, 11)) == FullDate(2024, 2, 11)
