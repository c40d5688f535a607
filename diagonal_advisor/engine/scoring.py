"""Composite confidence score."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagonal_advisor.normalize import to_number

if TYPE_CHECKING:
    from diagonal_advisor.config import ScoringSettings
    from diagonal_advisor.models.inputs import StrategyInputs


def earnings_risk(inputs: StrategyInputs, cfg: ScoringSettings) -> bool:
    """Earnings inside the window while near-term vol is already rich."""
    days = to_number(inputs.earnings_days, cfg.far_days_default)
    return days <= cfg.earnings_window_days and inputs.earnings_gate_rank > cfg.earnings_iv_rank_threshold


def compute_score(inputs: StrategyInputs, cfg: ScoringSettings) -> float:
    """Trend + net Delta + net Theta + IV structure, minus the earnings penalty.

    Plain sum, never clamped: with the default weights the ceiling is 100,
    and a heavier earnings penalty can push the score below zero.
    """
    score = cfg.trend_points.get(inputs.trend.value, 0.0)

    if inputs.net_delta > 0:
        score += cfg.net_delta_points
    if inputs.net_theta > 0:
        score += cfg.net_theta_points
    if inputs.iv_diff > 0:
        score += cfg.iv_structure_points

    if earnings_risk(inputs, cfg):
        score -= cfg.earnings_penalty

    return score
