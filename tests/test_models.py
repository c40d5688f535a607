"""Tests for input/result models."""

import json

import pytest
from pydantic import ValidationError

from diagonal_advisor.engine import evaluate
from diagonal_advisor.models.inputs import StrategyInputs, Trend
from diagonal_advisor.models.result import StrategyName, StrategyResult


class TestStrategyInputs:
    def test_unknown_trend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StrategyInputs(trend="Crash")

    def test_missing_trend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StrategyInputs()

    def test_frozen(self, bullish_inputs) -> None:
        with pytest.raises(ValidationError):
            bullish_inputs.sell_delta = 0.5

    def test_derived_quantities(self, bullish_inputs) -> None:
        assert bullish_inputs.net_delta == 0.80 + 0.25
        assert bullish_inputs.net_theta == -0.04 + 0.09
        assert bullish_inputs.iv_diff == 30.0

    def test_gate_falls_back_to_near_iv(self) -> None:
        assert StrategyInputs(trend=Trend.UP, iv_near=75).earnings_gate_rank == 75.0

    def test_gate_uses_total_rank_when_present(self) -> None:
        inputs = StrategyInputs(trend=Trend.UP, iv_near=0.45, total_iv_rank=80)
        assert inputs.earnings_gate_rank == 80.0


class TestStrategyName:
    def test_only_wait_is_not_actionable(self) -> None:
        assert not StrategyName.WAIT.is_actionable
        assert StrategyName.PMCC_CALL_DIAGONAL.is_actionable
        assert StrategyName.PUT_DIAGONAL.is_actionable
        assert StrategyName.BEAR_CALL_SPREAD.is_actionable


class TestResultSerialization:
    def test_round_trip_preserves_every_field(self, bullish_inputs) -> None:
        result = evaluate(bullish_inputs)
        restored = StrategyResult.model_validate_json(result.model_dump_json())
        assert restored == result

    def test_empty_lists_are_serialized_not_omitted(self, bearish_inputs) -> None:
        result = evaluate(bearish_inputs)
        payload = json.loads(result.model_dump_json())
        assert payload["warnings"] == []
        assert payload["adjustments"] == []
        restored = StrategyResult.model_validate_json(result.model_dump_json())
        assert restored.warnings == ()
        assert restored.adjustments == ()

    def test_warning_and_adjustment_sequences_are_immutable(self, sideways_inputs) -> None:
        result = evaluate(sideways_inputs)
        assert isinstance(result.warnings, tuple)
        assert isinstance(result.adjustments, tuple)
        with pytest.raises(AttributeError):
            result.warnings.append("extra")

    def test_absent_strike_guide_round_trips_as_null(self) -> None:
        result = evaluate(StrategyInputs(trend=Trend.DOWN))
        payload = json.loads(result.model_dump_json())
        assert "strike_guide" in payload
        assert payload["strike_guide"] is None
        assert StrategyResult.model_validate_json(result.model_dump_json()).strike_guide is None
