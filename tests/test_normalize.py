"""Tests for numeric input coercion."""

from decimal import Decimal

import pytest

from diagonal_advisor.models.inputs import StrategyInputs, Trend
from diagonal_advisor.normalize import FAR_DAYS_DEFAULT, to_number


class TestToNumber:
    @pytest.mark.parametrize("value, expected", [
        (1.5, 1.5),
        (-0.28, -0.28),
        (0, 0.0),
        (21, 21.0),
        (Decimal("1.25"), 1.25),
    ])
    def test_finite_numbers_pass_through(self, value, expected) -> None:
        assert to_number(value, 7.0) == expected

    @pytest.mark.parametrize("text, expected", [
        ("0.25", 0.25),
        (" -0.30 ", -0.30),
        ("+12", 12.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e2", 100.0),
        ("12abc", 12.0),
    ])
    def test_numeric_strings_parse_leading_literal(self, text, expected) -> None:
        assert to_number(text, 7.0) == pytest.approx(expected)

    @pytest.mark.parametrize("value", [
        None, "", "abc", "-", ".", float("nan"), float("inf"), float("-inf"),
        "Infinity", "nan", "1e999", True, False, [1], {"a": 1},
    ])
    def test_unusable_values_fall_back_to_default(self, value) -> None:
        assert to_number(value, 7.0) == 7.0

    @pytest.mark.parametrize("text", ["３", "٣", "٣.5", "३२"])
    def test_non_ascii_digits_fall_back_to_default(self, text) -> None:
        assert to_number(text, 7.0) == 7.0

    def test_default_can_be_none(self) -> None:
        assert to_number("", None) is None

    def test_far_days_default(self) -> None:
        assert to_number(None, FAR_DAYS_DEFAULT) == 999.0


class TestInputCoercion:
    def test_malformed_greeks_default_to_zero(self) -> None:
        inputs = StrategyInputs(trend="Up", buy_delta="abc", sell_theta=None, iv_near=float("nan"))
        assert inputs.buy_delta == 0.0
        assert inputs.sell_theta == 0.0
        assert inputs.iv_near == 0.0

    def test_blank_optional_fields_are_absent(self) -> None:
        inputs = StrategyInputs(trend="Down", earnings_days="", sell_dte="n/a", price_near=None)
        assert inputs.earnings_days is None
        assert inputs.sell_dte is None
        assert inputs.price_near is None

    def test_string_numbers_are_parsed(self) -> None:
        inputs = StrategyInputs(trend="Sideways", sell_delta="-0.28", sell_dte="12")
        assert inputs.sell_delta == -0.28
        assert inputs.sell_dte == 12.0

    def test_trend_is_case_insensitive(self) -> None:
        assert StrategyInputs(trend="sideways").trend == Trend.SIDEWAYS
        assert StrategyInputs(trend=" UP ").trend == Trend.UP
