"""Tests for sorting and range filtering of records."""

import pytest

from fhirtime import Date, DateTime, FullDate, Instant, Year
from fhirtime.errors import UnsupportedSelectorError
from fhirtime.search import Order, compare_values, filter_records, sort_records
from fhirtime.search.parameters import (
    EncounterSearchParameter,
    ImmunizationSearchParameter,
    ObservationSearchParameter,
)
from fhirtime.search.resources import Encounter, Immunization, Observation, Period


def _shot(record_id: str, date: str | None = None) -> Immunization:
    return Immunization(id=record_id, date=DateTime.parse(date) if date else None)


@pytest.fixture
def shots() -> list[Immunization]:
    return [
        _shot("c", "2024-03-01T09:00:00Z"),
        _shot("none-1"),
        _shot("a", "2023"),
        _shot("b", "2024-02"),
        _shot("none-2"),
        _shot("d", "2024-03-01T08:00:00-05:00"),
    ]


def _ids(records: list) -> list[str]:
    return [record.id for record in records]


class TestSortRecords:
    """Tests for sort_records."""

    def test_ascending(self, shots: list[Immunization]) -> None:
        """Records sort by resolved value; absent values go last."""
        assert _ids(sort_records(shots, ImmunizationSearchParameter.DATE)) == [
            "a", "b", "c", "d", "none-1", "none-2"
        ]

    def test_descending(self, shots: list[Immunization]) -> None:
        """Descending order still puts absent values last."""
        result = sort_records(shots, ImmunizationSearchParameter.DATE, Order.DESCENDING)
        assert _ids(result) == ["d", "c", "b", "a", "none-1", "none-2"]

    def test_stable_for_equal_values(self) -> None:
        """Values equal at the shared precision keep input order."""
        records = [_shot("x", "2024-02-11"), _shot("y", "2024-02"), _shot("z", "2024-02-11T13:00:00Z")]
        assert _ids(sort_records(records, ImmunizationSearchParameter.DATE)) == ["x", "y", "z"]
        assert _ids(sort_records(records, ImmunizationSearchParameter.DATE, Order.DESCENDING)) == [
            "x", "y", "z"
        ]

    def test_returns_new_list(self, shots: list[Immunization]) -> None:
        """The input is not reordered."""
        before = list(shots)
        sort_records(shots, ImmunizationSearchParameter.DATE)
        assert shots == before

    def test_by_period(self) -> None:
        """Period fields sort by their resolved bound."""
        encounters = [
            Encounter(id="late", period=Period(end=DateTime.parse("2024-05-01"))),
            Encounter(id="early", period=Period(start=DateTime.parse("2024-01-01"), end=DateTime.parse("2024-12-31"))),
        ]
        assert _ids(sort_records(encounters, EncounterSearchParameter.DATE)) == ["early", "late"]

    def test_by_status(self) -> None:
        """Token selectors sort as strings."""
        observations = [Observation(id="2", status="preliminary"), Observation(id="1", status="final")]
        assert _ids(sort_records(observations, ObservationSearchParameter.STATUS)) == ["1", "2"]

    def test_unsupported_selector(self, shots: list[Immunization]) -> None:
        """Sorting by an unsupported selector raises."""
        with pytest.raises(UnsupportedSelectorError):
            sort_records(shots, ImmunizationSearchParameter.LOT_NUMBER)

    def test_empty(self) -> None:
        """An empty input gives an empty list."""
        assert sort_records([], ImmunizationSearchParameter.DATE) == []


class TestFilterRecords:
    """Tests for filter_records."""

    def test_lower_bound(self, shots: list[Immunization]) -> None:
        """Records before the lower bound are dropped, as are absent values."""
        result = filter_records(shots, ImmunizationSearchParameter.DATE, lower=FullDate(2024, 2, 15))
        assert _ids(result) == ["c", "b", "d"]

    def test_upper_bound(self, shots: list[Immunization]) -> None:
        """Records after the upper bound are dropped."""
        result = filter_records(shots, ImmunizationSearchParameter.DATE, upper=Date.parse("2024-02"))
        assert _ids(result) == ["a", "b"]

    def test_both_bounds_coarse(self, shots: list[Immunization]) -> None:
        """A Year bound keeps everything dated within that year."""
        result = filter_records(shots, ImmunizationSearchParameter.DATE, lower=Year(2024), upper=Year(2024))
        assert _ids(result) == ["c", "b", "d"]

    def test_instant_bounds(self, shots: list[Immunization]) -> None:
        """Instant bounds compare absolutely against instants."""
        bound = Instant.parse("2024-03-01T12:00:00Z")
        result = filter_records(shots, ImmunizationSearchParameter.DATE, lower=bound)
        assert _ids(result) == ["d"]

    def test_no_bounds(self, shots: list[Immunization]) -> None:
        """Without bounds only absent values are dropped."""
        result = filter_records(shots, ImmunizationSearchParameter.DATE)
        assert _ids(result) == ["c", "a", "b", "d"]


class TestCompareValues:
    """Tests for compare_values."""

    def test_temporal(self) -> None:
        """Temporal values use the lattice."""
        assert compare_values(Year(2024), FullDate(2024, 6, 1)) == 0

    def test_strings(self) -> None:
        """Strings compare as strings."""
        assert compare_values("amended", "final") == -1

    def test_mixed_raises(self) -> None:
        """A string and a date cannot be compared."""
        with pytest.raises(TypeError):
            compare_values("2024", Year(2024))
