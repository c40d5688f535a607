"""One-line human-readable summary of an evaluation."""

from __future__ import annotations

from diagonal_advisor.models.inputs import Trend
from diagonal_advisor.models.result import StrategyName
from diagonal_advisor.presentation import strategy_label


def build_explanation(
    trend: Trend,
    net_delta: float,
    net_theta: float,
    iv_diff: float,
    score: float,
    name: StrategyName,
    warnings: list[str],
) -> str:
    parts = [f"Trend: {trend.value}"]
    parts.append(f"Net Delta: {net_delta:.2f}")
    parts.append(f"Net Theta: {net_theta:.2f}")
    parts.append(f"IV diff (near-far): {iv_diff:.2f}")
    parts.append(f"Score: {score:.0f}")
    parts.append(f"Strategy: {strategy_label(name)}")
    if warnings:
        parts.append(f"Warnings: {' / '.join(warnings)}")
    return " | ".join(parts)
