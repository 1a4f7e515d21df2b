"""Tests for MonthService."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from timegap.config.models import ParsingConfig
from timegap.config.settings import TimeGapSettings
from timegap.domain.year_month import YearMonth
from timegap.services.month import MonthService


@pytest.fixture
def service(settings: TimeGapSettings) -> MonthService:
    return MonthService(settings)


class TestParse:
    def test_iso_month(self, service: MonthService) -> None:
        result = service.parse("2018-10")
        assert result.ok
        assert result.op == "parse_month"
        assert result.data["year_month"] == "2018-10"
        assert result.data["year"] == 2018
        assert result.data["month"] == 10
        assert "locale" not in result.data

    def test_offset_is_converted_to_utc(self, service: MonthService) -> None:
        result = service.parse("2009-07-01T00:01:01+01:00")
        assert result.data["year_month"] == "2009-06"

    def test_blank_yields_minimum(self, service: MonthService) -> None:
        assert service.parse("   ").data["year_month"] == "0001-01"

    def test_unparseable(self, service: MonthService) -> None:
        result = service.parse("InvalidYearMonth")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "FORMAT_ERROR"
        assert result.error.detail == {"text": "InvalidYearMonth"}

    def test_locale_argument(self, service: MonthService) -> None:
        result = service.parse("05.02.2018", locale="nb-NO")
        assert result.data["year_month"] == "2018-02"
        assert result.data["locale"] == "nb-NO"

    def test_locale_from_config(self) -> None:
        settings = TimeGapSettings(parsing=ParsingConfig(locale="nb-NO"))
        result = MonthService(settings).parse("februar 2018")
        assert result.data["year_month"] == "2018-02"
        assert result.data["locale"] == "nb-NO"

    def test_blank_with_locale_is_an_error(self, service: MonthService) -> None:
        result = service.parse("", locale="en-US")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "FORMAT_ERROR"

    def test_unknown_locale_falls_back_to_invariant(self, service: MonthService) -> None:
        result = service.parse("2018-10", locale="xx-YY")
        assert result.data["locale"] == "invariant"
        assert result.warnings == [
            "Unknown locale 'xx-YY'; parsed with the invariant culture."
        ]

    def test_known_locale_has_no_warning(self, service: MonthService) -> None:
        assert service.parse("2018-10", locale="en-US").warnings == []


class TestShift:
    def test_years_only_shift(self, service: MonthService) -> None:
        result = service.shift(YearMonth(2018, 1), years=2)
        assert result.op == "shift_month"
        assert result.data["year_month"] == "2020-01"
        back = service.shift(YearMonth(2018, 1), years=2, backwards=True)
        assert back.op == "shift_month_back"
        assert back.data["year_month"] == "2016-01"

    def test_add(self, service: MonthService) -> None:
        result = service.shift(YearMonth(2018, 1), months=27)
        assert result.op == "shift_month"
        assert result.data["year_month"] == "2020-04"
        assert result.data["from"] == "2018-01"

    def test_add_years_then_months(self, service: MonthService) -> None:
        result = service.shift(YearMonth(2018, 12), years=1, months=1)
        assert result.data["year_month"] == "2020-01"

    def test_subtract(self, service: MonthService) -> None:
        result = service.shift(YearMonth(2018, 1), years=1, months=2, backwards=True)
        assert result.op == "shift_month_back"
        assert result.data["year_month"] == "2016-11"

    def test_negative_months(self, service: MonthService) -> None:
        result = service.shift(YearMonth(2018, 1), months=-1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NEGATIVE_ARGUMENT"
        assert result.error.detail == {"param": "months", "value": -1}

    def test_below_minimum(self, service: MonthService) -> None:
        result = service.shift(YearMonth(1, 6), months=7, backwards=True)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_YEAR_MONTH"


class TestCompare:
    @pytest.mark.parametrize(
        "first,second,outcome,relation",
        [
            (YearMonth(2018, 3), YearMonth(2020, 1), -1, "earlier"),
            (YearMonth(2019, 11), YearMonth(2019, 11), 0, "same"),
            (YearMonth(2019, 12), YearMonth(2019, 11), 1, "later"),
        ],
    )
    def test_relations(
        self,
        service: MonthService,
        first: YearMonth,
        second: YearMonth,
        outcome: int,
        relation: str,
    ) -> None:
        result = service.compare(first, second)
        assert result.op == "compare_months"
        assert result.data["result"] == outcome
        assert result.data["relation"] == relation


class TestNow:
    def test_local(self, service: MonthService) -> None:
        before = date.today()
        result = service.now()
        after = date.today()
        assert result.op == "current_month"
        assert result.data["clock"] == "local"
        assert result.data["year_month"] in {
            str(YearMonth.from_datetime(before)),
            str(YearMonth.from_datetime(after)),
        }

    def test_utc(self, service: MonthService) -> None:
        before = datetime.now(UTC)
        result = service.now(utc=True)
        after = datetime.now(UTC)
        assert result.data["clock"] == "utc"
        assert result.data["year_month"] in {
            str(YearMonth.from_datetime(before)),
            str(YearMonth.from_datetime(after)),
        }
