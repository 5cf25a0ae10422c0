"""Tests for parsing the date, dateTime, instant and time primitives.

This module covers:
- Date parsing at each precision
- Every DateFormatErrorKind
- dateTime dispatch between dates and instants
- Strict RFC 3339 instant parsing
"""

import pytest

from fhirtime import (
    Date,
    DateTime,
    FullDate,
    Instant,
    Year,
    YearMonth,
)
from fhirtime.errors import (
    DateFormatError,
    DateFormatErrorKind,
    FhirTimeError,
    ParseError,
)
from fhirtime.format import parse_date, parse_datetime, parse_instant, parse_time


class TestParseDate:
    """Tests for Date.parse / parse_date."""

    def test_year(self) -> None:
        """One segment parses as Year."""
        assert repr(parse_date("2024")) == "Year(2024)"

    def test_year_month(self) -> None:
        """Two segments parse as YearMonth."""
        assert repr(parse_date("2024-02")) == "YearMonth(2024, 2)"

    def test_full_date(self) -> None:
        """Three segments parse as FullDate."""
        assert repr(parse_date("2024-02-11")) == "FullDate(2024, 2, 11)"

    def test_single_digit_month_accepted(self) -> None:
        """A year-month with an unpadded month is read as its integer."""
        ym = parse_date("2024-2")
        assert isinstance(ym, YearMonth)
        assert ym.month == 2

    def test_short_year_parses_but_cannot_be_written(self) -> None:
        """A short year parses; writing it fails instead of reformatting."""
        from fhirtime.errors import SerializationError

        y = parse_date("999")
        assert isinstance(y, Year)
        with pytest.raises(SerializationError):
            y.to_fhir()

    def test_classmethod_on_base(self) -> None:
        """Date.parse returns the matching variant."""
        assert type(Date.parse("2024-02-11")) is FullDate


class TestDateFormatErrorKinds:
    """Each malformed date surfaces the matching error kind."""

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("abcd", DateFormatErrorKind.INVALID_INTEGER),
            ("", DateFormatErrorKind.INVALID_INTEGER),
            ("+2024", DateFormatErrorKind.INVALID_INTEGER),
            ("2024-xx", DateFormatErrorKind.INVALID_INTEGER),
            ("20x4-02", DateFormatErrorKind.INVALID_INTEGER),
            ("2024-02-11-01", DateFormatErrorKind.SEGMENT_COUNT),
            ("2024-02-11-01-01", DateFormatErrorKind.SEGMENT_COUNT),
            ("2024-13", DateFormatErrorKind.INVALID_MONTH),
            ("2024-00", DateFormatErrorKind.INVALID_MONTH),
            ("2024-13-01", DateFormatErrorKind.INVALID_MONTH),
            ("2024-00-01", DateFormatErrorKind.INVALID_MONTH),
            ("2024-01-32", DateFormatErrorKind.INVALID_DAY),
            ("2024-01-00", DateFormatErrorKind.INVALID_DAY),
            ("2024-02-30", DateFormatErrorKind.INVALID_CALENDAR_DATE),
            ("2023-02-29", DateFormatErrorKind.INVALID_CALENDAR_DATE),
            ("2024-04-31", DateFormatErrorKind.INVALID_CALENDAR_DATE),
            ("2024-2-11", DateFormatErrorKind.INVALID_SHAPE),
            ("24-02-11", DateFormatErrorKind.INVALID_SHAPE),
            ("2024-02-1", DateFormatErrorKind.INVALID_SHAPE),
            ("2024-02-11 ", DateFormatErrorKind.INVALID_SHAPE),
            ("2024-02-11\n", DateFormatErrorKind.INVALID_SHAPE),
            ("2024\n", DateFormatErrorKind.INVALID_INTEGER),
        ],
    )
    def test_kind(self, text: str, kind: DateFormatErrorKind) -> None:
        """The error carries the expected kind."""
        with pytest.raises(DateFormatError) as info:
            Date.parse(text)
        assert info.value.kind is kind

    def test_date_format_error_is_parse_error(self) -> None:
        """DateFormatError belongs to the ParseError family."""
        with pytest.raises(ParseError):
            Date.parse("2024-13")
        with pytest.raises(FhirTimeError):
            Date.parse("2024-13")

    def test_calendar_message_names_month_length(self) -> None:
        """The calendar error says how long the month is."""
        with pytest.raises(DateFormatError, match="2023-02 has 28 days"):
            Date.parse("2023-02-29")

    def test_non_string(self) -> None:
        """A non-string is a shape error, not an AttributeError."""
        with pytest.raises(DateFormatError) as info:
            Date.parse(2024)  # type: ignore[arg-type]
        assert info.value.kind is DateFormatErrorKind.INVALID_SHAPE


class TestParseDateTime:
    """Tests for DateTime.parse / parse_datetime."""

    @pytest.mark.parametrize("text", ["2024", "2024-02", "2024-02-11"])
    def test_dates(self, text: str) -> None:
        """Strings without T parse as dates."""
        dt = parse_datetime(text)
        assert not dt.is_instant
        assert dt.value == Date.parse(text)
        assert type(dt.value) is type(Date.parse(text))

    def test_instant(self) -> None:
        """Strings with T parse as instants."""
        dt = parse_datetime("2024-02-11T13:00:00+01:00")
        assert dt.is_instant
        assert isinstance(dt.value, Instant)

    @pytest.mark.parametrize(
        "text",
        [
            "2024-02-11T13:00Z",
            "2024-02-11T13:00:00",
            "2024-02-11T25:00:00Z",
            "2024-02T13:00:00Z",
            "2024-02-11T13:00:00+24:00",
            "T",
        ],
    )
    def test_bad_instant_kind(self, text: str) -> None:
        """A malformed instant is INVALID_INSTANT, chained from ParseError."""
        with pytest.raises(DateFormatError) as info:
            DateTime.parse(text)
        assert info.value.kind is DateFormatErrorKind.INVALID_INSTANT
        assert isinstance(info.value.__cause__, ParseError)
        assert str(info.value) == str(info.value.__cause__)

    def test_bad_date_kind_passes_through(self) -> None:
        """A malformed date keeps its own kind."""
        with pytest.raises(DateFormatError) as info:
            DateTime.parse("2024-13")
        assert info.value.kind is DateFormatErrorKind.INVALID_MONTH


class TestParseInstant:
    """Tests for Instant.parse / parse_instant."""

    def test_basic(self) -> None:
        """All components are read."""
        inst = parse_instant("2024-02-11T13:45:30.125-05:30")
        assert (inst.year, inst.month, inst.day) == (2024, 2, 11)
        assert (inst.hour, inst.minute, inst.second) == (13, 45, 30)
        assert inst.nanosecond == 125_000_000
        assert inst.offset.minutes == -330

    def test_lowercase_separators(self) -> None:
        """Lowercase t and z are accepted; z is written as Z."""
        inst = Instant.parse("2024-02-11t13:00:00z")
        assert inst.to_fhir() == "2024-02-11T13:00:00Z"

    @pytest.mark.parametrize(
        "text",
        [
            "2024-02-11",
            "2024-02-11T13:00:00",
            "2024-02-11 13:00:00Z",
            "2024-02-11T13:00Z",
            "2024-2-11T13:00:00Z",
            "2024-02-11T13:00:00.Z",
            "2024-02-11T13:00:00.1234567890Z",
            "2024-02-11T13:00:00+0100",
            "2024-02-11T13:00:00+01",
            "2024-02-30T13:00:00Z",
            "2024-02-11T13:60:00Z",
            "2024-02-11T13:00:60Z",
            "2024-02-11T13:00:00+01:60",
        ],
    )
    def test_rejected(self, text: str) -> None:
        """Anything short of strict RFC 3339 raises ParseError."""
        with pytest.raises(ParseError):
            Instant.parse(text)

    def test_year_zero(self) -> None:
        """Year 0000 is within the RFC 3339 range."""
        assert Instant.parse("0000-01-01T00:00:00Z").year == 0


class TestParseTime:
    """Tests for parse_time."""

    def test_delegates(self) -> None:
        """parse_time reads the time primitive."""
        assert parse_time("13:00:00.500").to_fhir() == "13:00:00.500"


class TestAsciiDigitsOnly:
    """Digits outside 0-9 are rejected, even where int() would accept them."""

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("２０２４", DateFormatErrorKind.INVALID_INTEGER),
            ("٢٠٢٤", DateFormatErrorKind.INVALID_INTEGER),
            ("2024-٠٢", DateFormatErrorKind.INVALID_INTEGER),
            ("２０２４-02-11", DateFormatErrorKind.INVALID_SHAPE),
            ("2024-02-١١", DateFormatErrorKind.INVALID_SHAPE),
        ],
    )
    def test_date(self, text: str, kind: DateFormatErrorKind) -> None:
        """Fullwidth and Arabic-Indic digits are not a date."""
        with pytest.raises(DateFormatError) as info:
            Date.parse(text)
        assert info.value.kind is kind

    @pytest.mark.parametrize(
        "text",
        [
            "٢٠٢٤-02-11T13:00:00Z",
            "2024-02-11T１３:00:00Z",
            "2024-02-11T13:00:00.５Z",
            "2024-02-11T13:00:00+٠١:00",
        ],
    )
    def test_instant(self, text: str) -> None:
        """Non-ASCII digits anywhere in an instant raise ParseError."""
        with pytest.raises(ParseError):
            Instant.parse(text)
        with pytest.raises(DateFormatError) as info:
            DateTime.parse(text)
        assert info.value.kind is DateFormatErrorKind.INVALID_INSTANT

    @pytest.mark.parametrize("text", ["١٣:00:00", "13:００", "13:00:00.٥"])
    def test_time(self, text: str) -> None:
        """Non-ASCII digits in a time raise ParseError."""
        with pytest.raises(ParseError):
            parse_time(text)
