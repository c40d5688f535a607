"""Pydantic models for the evaluation request (one input snapshot)."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from diagonal_advisor.normalize import to_number


class Trend(StrEnum):
    """Trader's read of the underlying's direction."""

    UP = "Up"
    SIDEWAYS = "Sideways"
    DOWN = "Down"

    @classmethod
    def _missing_(cls, value: object) -> Trend | None:
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class StrategyInputs(BaseModel):
    """Canonical input snapshot for one evaluation.

    Greeks are taken as-is from a broker's chain (calls positive, puts
    negative). ``iv_near`` / ``iv_far`` are whatever the configured
    volatility source resolved to (rank pair or term-structure IV pair);
    ``total_iv_rank`` is the environment gate for the earnings penalty and
    falls back to ``iv_near`` when absent.
    """

    model_config = ConfigDict(frozen=True)

    trend: Trend
    earnings_days: float | None = None
    iv_near: float = 0.0
    iv_far: float = 0.0
    total_iv_rank: float | None = None
    buy_delta: float = 0.0          # far-dated long leg
    sell_delta: float = 0.0         # near-dated short leg
    buy_theta: float = 0.0
    sell_theta: float = 0.0
    sell_dte: float | None = None
    price_near: float | None = None
    price_far: float | None = None

    @field_validator("trend", mode="before")
    @classmethod
    def _coerce_trend(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Trend(value)
        return value

    @field_validator(
        "iv_near", "iv_far", "buy_delta", "sell_delta", "buy_theta", "sell_theta",
        mode="before",
    )
    @classmethod
    def _coerce_number(cls, value: Any) -> float:
        return to_number(value, 0.0)

    @field_validator(
        "earnings_days", "total_iv_rank", "sell_dte", "price_near", "price_far",
        mode="before",
    )
    @classmethod
    def _coerce_optional(cls, value: Any) -> float | None:
        return to_number(value, None)

    @property
    def net_delta(self) -> float:
        return self.buy_delta + self.sell_delta

    @property
    def net_theta(self) -> float:
        return self.buy_theta + self.sell_theta

    @property
    def iv_diff(self) -> float:
        """Near minus far; positive means the short leg is the richer one."""
        return self.iv_near - self.iv_far

    @property
    def earnings_gate_rank(self) -> float:
        return self.total_iv_rank if self.total_iv_rank is not None else self.iv_near
