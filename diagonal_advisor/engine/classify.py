"""Strategy selection from trend and the signs of the position Greeks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagonal_advisor.models.inputs import Trend
from diagonal_advisor.models.result import Side, StrategyName

if TYPE_CHECKING:
    from diagonal_advisor.models.inputs import StrategyInputs


_TREND_SIDE: dict[Trend, Side] = {
    Trend.UP: Side.CALL,
    Trend.SIDEWAYS: Side.PUT,
    Trend.DOWN: Side.NEUTRAL,
}


def classify(inputs: StrategyInputs) -> tuple[Side, StrategyName]:
    """First matching rule wins; fallback keeps the trend-derived side."""
    trend = inputs.trend
    net_delta = inputs.net_delta
    net_theta = inputs.net_theta
    iv_diff = inputs.iv_diff

    if trend == Trend.UP and net_delta > 0 and net_theta > 0 and iv_diff > 0:
        return Side.CALL, StrategyName.PMCC_CALL_DIAGONAL

    if trend == Trend.SIDEWAYS and net_theta > 0 and iv_diff > 0:
        return Side.PUT, StrategyName.PUT_DIAGONAL

    # Short call credit spread above resistance, whatever the trend side says
    if trend == Trend.DOWN and net_theta > 0:
        return Side.CALL, StrategyName.BEAR_CALL_SPREAD

    return _TREND_SIDE[trend], StrategyName.WAIT
