"""Example input snapshots: one per trend."""

from __future__ import annotations

from diagonal_advisor.models.inputs import StrategyInputs, Trend

PRESETS: dict[str, StrategyInputs] = {
    "bullish": StrategyInputs(
        trend=Trend.UP, earnings_days=10, iv_near=70, iv_far=40,
        buy_delta=0.80, sell_delta=0.25, buy_theta=-0.04, sell_theta=0.09,
        price_near=205, price_far=207, sell_dte=21,
    ),
    "sideways": StrategyInputs(
        trend=Trend.SIDEWAYS, earnings_days=3, iv_near=65, iv_far=40,
        buy_delta=-0.30, sell_delta=-0.28, buy_theta=-0.03, sell_theta=0.08,
        price_near=205, price_far=206, sell_dte=12,
    ),
    "bearish": StrategyInputs(
        trend=Trend.DOWN, earnings_days=7, iv_near=72, iv_far=60,
        buy_delta=0.00, sell_delta=0.28, buy_theta=0.00, sell_theta=0.10,
        sell_dte=9,
    ),
}


def get_preset(name: str) -> StrategyInputs:
    """Look up a preset by name. Raises KeyError listing valid names."""
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown preset '{name}'. Choose from: {', '.join(PRESETS)}") from None
