"""Strategy evaluation: score, classify, advise, explain.

Pure function: consumes one input snapshot, returns a fresh result.
No I/O, no state between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagonal_advisor.config import get_settings
from diagonal_advisor.engine.advisor import (
    advise,
    build_adjustments,
    build_strike_guide,
    build_warnings,
)
from diagonal_advisor.engine.classify import classify
from diagonal_advisor.engine.explain import build_explanation
from diagonal_advisor.engine.scoring import compute_score
from diagonal_advisor.models.result import StrategyResult

if TYPE_CHECKING:
    from diagonal_advisor.config import Settings
    from diagonal_advisor.models.inputs import StrategyInputs


def evaluate(inputs: StrategyInputs, settings: Settings | None = None) -> StrategyResult:
    """Evaluate one input snapshot against the strategy menu."""
    cfg = settings or get_settings()

    net_delta = inputs.net_delta
    net_theta = inputs.net_theta
    iv_diff = inputs.iv_diff

    score = compute_score(inputs, cfg.scoring)
    side, name = classify(inputs)

    warnings = build_warnings(inputs, cfg.scoring)
    strike_guide = build_strike_guide(name, cfg.strike_guides, cfg.adjustments)
    adjustments = build_adjustments(inputs, name, cfg.adjustments, cfg.scoring.far_days_default)

    explanation = build_explanation(
        inputs.trend, net_delta, net_theta, iv_diff, score, name, warnings,
    )

    return StrategyResult(
        side=side,
        name=name,
        score=score,
        advice=advise(score, cfg.advice),
        net_delta=net_delta,
        net_theta=net_theta,
        iv_diff=iv_diff,
        warnings=warnings,
        adjustments=adjustments,
        strike_guide=strike_guide,
        explanation=explanation,
    )
