"""Pydantic models for the evaluation response."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Side(StrEnum):
    """Option side the recommendation trades."""

    CALL = "Call"
    PUT = "Put"
    NEUTRAL = "Neutral"


class StrategyName(StrEnum):
    """Closed set of recommendable strategies. Display text lives in presentation."""

    PMCC_CALL_DIAGONAL = "PMCC/CallDiagonal"
    PUT_DIAGONAL = "PutDiagonal"
    BEAR_CALL_SPREAD = "BearCallSpread"
    WAIT = "WaitStructureNotFavorable"

    @property
    def is_actionable(self) -> bool:
        return self is not StrategyName.WAIT


class Advice(StrEnum):
    """Open full size, open small, or stand aside."""

    OPEN = "open"
    SMALL = "small"
    WAIT = "wait"


class StrikeGuide(BaseModel):
    """Target Delta ranges for the legs of the selected strategy."""

    model_config = ConfigDict(frozen=True)

    long_delta_range: tuple[float, float] | None = None
    short_delta_range: tuple[float, float] | None = None
    target_net_delta: tuple[float, float] | None = None
    target_dte_range: tuple[int, int] | None = None
    note: str = ""


class StrategyResult(BaseModel):
    """Complete recommendation for one input snapshot."""

    model_config = ConfigDict(frozen=True)

    side: Side
    name: StrategyName
    score: float                    # nominally 0-100, not clamped
    advice: Advice
    net_delta: float
    net_theta: float
    iv_diff: float
    warnings: tuple[str, ...] = ()
    adjustments: tuple[str, ...] = ()
    strike_guide: StrikeGuide | None = None
    explanation: str
