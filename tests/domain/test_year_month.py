"""Tests for the YearMonth value type: construction, arithmetic, ordering, text."""

from __future__ import annotations

import dataclasses
from datetime import UTC, date, datetime

import pytest

from timegap.domain.errors import (
    InvalidYearMonthError,
    NegativeArgumentError,
    TimeGapError,
)
from timegap.domain.year_month import YearMonth, compare


class TestConstruction:
    def test_valid(self) -> None:
        ym = YearMonth(2018, 10)
        assert ym.year == 2018
        assert ym.month == 10

    @pytest.mark.parametrize(
        "year,month",
        [(0, 1), (1, 0), (1, 13), (-5, 3), (2018, -1), (0, 0)],
    )
    def test_invalid_raises(self, year: int, month: int) -> None:
        with pytest.raises(InvalidYearMonthError) as exc_info:
            YearMonth(year, month)
        assert exc_info.value.year == year
        assert exc_info.value.month == month

    def test_message_names_year_and_month(self) -> None:
        with pytest.raises(InvalidYearMonthError, match="year '0' and month '1'"):
            YearMonth(0, 1)

    def test_year_above_documented_max_is_accepted(self) -> None:
        """Construction only enforces the lower year bound."""
        ym = YearMonth(10000, 1)
        assert ym > YearMonth.max_value()

    @pytest.mark.parametrize("year", [1, 2, 1999, 9999])
    @pytest.mark.parametrize("month", [1, 6, 12])
    def test_boundaries_accepted(self, year: int, month: int) -> None:
        assert YearMonth(year, month).month == month

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidYearMonthError, TimeGapError)
        assert issubclass(InvalidYearMonthError, ValueError)

    def test_frozen(self) -> None:
        ym = YearMonth(2018, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ym.month = 2  # type: ignore[misc]


class TestYears:
    def test_add_years(self) -> None:
        assert YearMonth(2018, 5).add_years(2) == YearMonth(2020, 5)

    def test_subtract_years(self) -> None:
        assert YearMonth(2018, 5).subtract_years(18) == YearMonth(2000, 5)

    def test_add_zero_is_equal(self) -> None:
        ym = YearMonth(2018, 5)
        assert ym.add_years(0) == ym

    def test_subtract_below_minimum(self) -> None:
        with pytest.raises(InvalidYearMonthError) as exc_info:
            YearMonth(1, 1).subtract_years(1)
        assert exc_info.value.year == 0

    @pytest.mark.parametrize("method", ["add_years", "subtract_years"])
    def test_negative_argument(self, method: str) -> None:
        with pytest.raises(NegativeArgumentError) as exc_info:
            getattr(YearMonth(2018, 1), method)(-1)
        assert exc_info.value.param_name == "years"
        assert "years" in str(exc_info.value)

    def test_receiver_unchanged(self) -> None:
        ym = YearMonth(2018, 5)
        ym.add_years(3)
        assert ym == YearMonth(2018, 5)


class TestMonths:
    @pytest.mark.parametrize(
        "start,months,expected",
        [
            ((2018, 1), 27, (2020, 4)),
            ((2018, 12), 1, (2019, 1)),
            ((2018, 5), 12, (2019, 5)),
            ((2018, 11), 13, (2019, 12)),
            ((2018, 12), 25, (2021, 1)),
            ((2018, 6), 0, (2018, 6)),
            ((2018, 1), 11, (2018, 12)),
        ],
    )
    def test_add_months(
        self, start: tuple[int, int], months: int, expected: tuple[int, int]
    ) -> None:
        assert YearMonth(*start).add_months(months) == YearMonth(*expected)

    @pytest.mark.parametrize(
        "start,months,expected",
        [
            ((2018, 1), 1, (2017, 12)),
            ((2018, 3), 15, (2016, 12)),
            ((2020, 4), 27, (2018, 1)),
            ((2018, 12), 11, (2018, 1)),
            ((2018, 6), 0, (2018, 6)),
            ((2018, 6), 24, (2016, 6)),
        ],
    )
    def test_subtract_months(
        self, start: tuple[int, int], months: int, expected: tuple[int, int]
    ) -> None:
        assert YearMonth(*start).subtract_months(months) == YearMonth(*expected)

    def test_subtract_below_minimum_reports_result(self) -> None:
        with pytest.raises(InvalidYearMonthError) as exc_info:
            YearMonth(1, 6).subtract_months(7)
        assert exc_info.value.year == 0
        assert exc_info.value.month == 11

    @pytest.mark.parametrize("method", ["add_months", "subtract_months"])
    def test_negative_argument(self, method: str) -> None:
        with pytest.raises(NegativeArgumentError) as exc_info:
            getattr(YearMonth(2018, 1), method)(-3)
        assert exc_info.value.param_name == "months"
        assert exc_info.value.value == -3

    @pytest.mark.parametrize("months", [0, 1, 5, 11, 12, 13, 27, 120, 1001])
    def test_add_then_subtract_is_identity(self, months: int) -> None:
        ym = YearMonth(2018, 7)
        assert ym.add_months(months).subtract_months(months) == ym


class TestOrdering:
    def test_compare_by_year_first(self) -> None:
        assert compare(YearMonth(2017, 12), YearMonth(2018, 1)) == -1
        assert compare(YearMonth(2018, 1), YearMonth(2017, 12)) == 1

    def test_compare_by_month(self) -> None:
        assert compare(YearMonth(2018, 3), YearMonth(2018, 4)) == -1
        assert compare(YearMonth(2018, 4), YearMonth(2018, 3)) == 1

    def test_compare_equal(self) -> None:
        assert YearMonth(2018, 3).compare_to(YearMonth(2018, 3)) == 0

    def test_operators(self) -> None:
        early, late = YearMonth(2018, 3), YearMonth(2020, 1)
        assert early < late
        assert early <= late
        assert late > early
        assert late >= early
        assert early != late
        assert not early == late
        assert early <= YearMonth(2018, 3)
        assert early >= YearMonth(2018, 3)

    def test_exactly_one_relation_holds(self) -> None:
        values = [YearMonth(y, m) for y in (1, 2018, 2019) for m in (1, 6, 12)]
        for a in values:
            for b in values:
                assert [a < b, a == b, a > b].count(True) == 1

    def test_transitive_and_antisymmetric(self) -> None:
        values = [YearMonth(2019, 2), YearMonth(2018, 12), YearMonth(2018, 1), YearMonth(2020, 10)]
        ordered = sorted(values)
        assert ordered == [
            YearMonth(2018, 1),
            YearMonth(2018, 12),
            YearMonth(2019, 2),
            YearMonth(2020, 10),
        ]
        for a in values:
            for b in values:
                if a <= b and b <= a:
                    assert a == b

    def test_not_equal_to_other_types(self) -> None:
        assert YearMonth(2018, 1) != (2018, 1)
        assert YearMonth(2018, 1) != "2018-01"

    def test_ordering_against_other_types_raises(self) -> None:
        with pytest.raises(TypeError):
            _ = YearMonth(2018, 1) < (2018, 2)  # type: ignore[operator]


class TestHashing:
    def test_equal_values_hash_equal(self) -> None:
        assert hash(YearMonth(2018, 1)) == hash(YearMonth(2018, 1))

    def test_set_deduplicates(self) -> None:
        values = {YearMonth(2018, 1), YearMonth(2018, 1), YearMonth(2018, 2)}
        assert len(values) == 2

    def test_usable_as_dict_key(self) -> None:
        totals = {YearMonth(2018, 1): 100}
        assert totals[YearMonth(2018, 1)] == 100


class TestText:
    @pytest.mark.parametrize(
        "year,month,expected",
        [
            (2018, 1, "2018-01"),
            (2018, 10, "2018-10"),
            (1, 1, "0001-01"),
            (999, 12, "0999-12"),
            (12345, 3, "12345-03"),
        ],
    )
    def test_str(self, year: int, month: int, expected: str) -> None:
        assert str(YearMonth(year, month)) == expected

    def test_repr(self) -> None:
        assert repr(YearMonth(2018, 10)) == "YearMonth(year=2018, month=10)"

    @pytest.mark.parametrize("ym", [YearMonth(2018, 10), YearMonth(1999, 1), YearMonth(9999, 12)])
    def test_parse_round_trip(self, ym: YearMonth) -> None:
        assert YearMonth.parse(str(ym)) == ym


class TestDerivedValues:
    def test_min_value(self) -> None:
        assert YearMonth.min_value() == YearMonth(1, 1)
        assert YearMonth.MIN_VALUE == YearMonth(1, 1)

    def test_max_value(self) -> None:
        assert YearMonth.max_value() == YearMonth(9999, 12)
        assert YearMonth.MAX_VALUE == YearMonth(9999, 12)

    def test_from_datetime_ignores_zone(self) -> None:
        value = datetime(2018, 12, 31, 23, 30, tzinfo=UTC)
        assert YearMonth.from_datetime(value) == YearMonth(2018, 12)

    def test_now_matches_local_date(self) -> None:
        before = date.today()
        current = YearMonth.now()
        after = date.today()
        assert current in {YearMonth.from_datetime(before), YearMonth.from_datetime(after)}

    def test_utc_now_matches_utc_date(self) -> None:
        before = datetime.now(UTC)
        current = YearMonth.utc_now()
        after = datetime.now(UTC)
        assert current in {YearMonth.from_datetime(before), YearMonth.from_datetime(after)}
