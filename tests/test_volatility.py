"""Tests for volatility sources and raw form resolution."""

import pytest
from pydantic import ValidationError

from diagonal_advisor.engine import evaluate
from diagonal_advisor.models.inputs import Trend
from diagonal_advisor.models.result import StrategyName
from diagonal_advisor.volatility import (
    RankPairSource,
    TermStructureSource,
    build_inputs,
    get_volatility_source,
    normalize_keys,
)


def _form(**overrides) -> dict:
    """Sideways form using camelCase field names."""
    form = {
        "trend": "Sideways",
        "earningsDays": 3,
        "buyDelta": -0.30,
        "sellDelta": -0.28,
        "buyTheta": -0.03,
        "sellTheta": 0.08,
        "sellDTE": 12,
    }
    form.update(overrides)
    return form


class TestNormalizeKeys:
    def test_camel_case_keys(self) -> None:
        keys = normalize_keys({"ivNearRank": 1, "sellDTE": 2, "totalIvRank": 3, "earningsDays": 4})
        assert set(keys) == {"iv_near_rank", "sell_dte", "total_iv_rank", "earnings_days"}

    def test_snake_case_keys_untouched(self) -> None:
        assert normalize_keys({"sell_dte": 1, "iv_near": 2}) == {"sell_dte": 1, "iv_near": 2}


class TestRankPairSource:
    def test_near_rank_is_the_gate(self) -> None:
        inputs = build_inputs(_form(ivNearRank=75, ivFarRank=40), RankPairSource())
        assert inputs.iv_near == 75.0
        assert inputs.iv_far == 40.0
        assert inputs.earnings_gate_rank == 75.0
        assert evaluate(inputs).score == 50.0

    def test_canonical_field_names_accepted(self) -> None:
        inputs = build_inputs(_form(iv_near=65, iv_far=40), RankPairSource())
        assert inputs.iv_diff == 25.0
        assert inputs.sell_dte == 12.0

    def test_total_rank_field_ignored(self) -> None:
        inputs = build_inputs(_form(ivNearRank=75, ivFarRank=40, totalIvRank=30), RankPairSource())
        assert inputs.total_iv_rank is None
        assert inputs.earnings_gate_rank == 75.0
        result = evaluate(inputs)
        assert result.score == 50.0
        assert result.warnings[-1].startswith("Earnings are close")


class TestTermStructureSource:
    def test_term_ivs_feed_structure_and_total_rank_gates(self) -> None:
        inputs = build_inputs(
            _form(ivNearTerm=0.45, ivFarTerm=0.35, totalIvRank=65), TermStructureSource(),
        )
        assert inputs.iv_diff == pytest.approx(0.10)
        result = evaluate(inputs)
        assert result.name == StrategyName.PUT_DIAGONAL
        assert result.score == 65.0

    def test_high_total_rank_triggers_penalty(self) -> None:
        inputs = build_inputs(
            _form(ivNearTerm=0.45, ivFarTerm=0.35, totalIvRank=80), TermStructureSource(),
        )
        assert evaluate(inputs).score == 50.0

    def test_missing_total_rank_never_penalizes(self) -> None:
        inputs = build_inputs(_form(ivNearTerm=85, ivFarTerm=40), TermStructureSource())
        assert inputs.total_iv_rank == 0.0
        assert evaluate(inputs).score == 65.0


class TestRegistry:
    def test_known_kinds(self) -> None:
        assert get_volatility_source("rank_pair").kind == "rank_pair"
        assert get_volatility_source("term_structure").kind == "term_structure"

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="Unknown volatility source"):
            get_volatility_source("skew")


class TestBuildInputs:
    def test_unknown_trend_raises(self) -> None:
        with pytest.raises(ValidationError):
            build_inputs(_form(trend="Crash"), RankPairSource())

    def test_unknown_keys_ignored(self) -> None:
        inputs = build_inputs(_form(notes="hello", ivNearRank=50), RankPairSource())
        assert inputs.trend == Trend.SIDEWAYS

    def test_blank_form_values_fall_back(self) -> None:
        inputs = build_inputs(_form(earningsDays="", sellDTE="", ivNearRank="", ivFarRank=""), RankPairSource())
        assert inputs.earnings_days is None
        assert inputs.sell_dte is None
        assert inputs.iv_diff == 0.0
