"""Volatility sources: map raw form fields onto the canonical inputs.

Two input schemas exist for the IV structure:

- rank pair: near-dated and far-dated IV Rank; the near rank doubles as
  the earnings gate.
- term structure: near-dated and far-dated ATM IV read off the chain, with
  a separate total IV Rank as the earnings gate.

The choice is configuration (``volatility.source``), resolved before a
``StrategyInputs`` is built. The evaluator never branches on it.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from diagonal_advisor.models.inputs import StrategyInputs
from diagonal_advisor.normalize import to_number

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# Fields shared by both schemas.
_COMMON_FIELDS = (
    "trend",
    "earnings_days",
    "buy_delta",
    "sell_delta",
    "buy_theta",
    "sell_theta",
    "sell_dte",
    "price_near",
    "price_far",
)

# camelCase form names that don't snake_case cleanly.
_ALIASES = {
    "sell_d_t_e": "sell_dte",
}


def _snake(key: str) -> str:
    snake = _CAMEL_BOUNDARY.sub("_", key).lower()
    return _ALIASES.get(snake, snake)


def normalize_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Accept camelCase form keys (``ivNearRank``, ``sellDTE``) as well as snake_case."""
    return {_snake(str(k)): v for k, v in raw.items()}


class VolatilitySource(ABC):
    """Resolves the IV structure fields of a raw form into canonical inputs."""

    @property
    @abstractmethod
    def kind(self) -> str: ...

    @abstractmethod
    def resolve(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Return ``iv_near``, ``iv_far`` and ``total_iv_rank`` from snake_case fields."""
        ...


class RankPairSource(VolatilitySource):
    """Near/far IV Rank pair; the near rank is the earnings gate."""

    @property
    def kind(self) -> str:
        return "rank_pair"

    def resolve(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "iv_near": raw.get("iv_near_rank", raw.get("iv_near")),
            "iv_far": raw.get("iv_far_rank", raw.get("iv_far")),
            # Gate is always the near rank; a stray total_iv_rank is ignored
            "total_iv_rank": None,
        }


class TermStructureSource(VolatilitySource):
    """Near/far ATM IV pair plus a separate total IV Rank gate."""

    @property
    def kind(self) -> str:
        return "term_structure"

    def resolve(self, raw: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "iv_near": raw.get("iv_near_term", raw.get("iv_near")),
            "iv_far": raw.get("iv_far_term", raw.get("iv_far")),
            # Missing gate means no penalty, not a fall back to the near IV level
            "total_iv_rank": to_number(raw.get("total_iv_rank"), 0.0),
        }


_SOURCES: dict[str, type[VolatilitySource]] = {
    "rank_pair": RankPairSource,
    "term_structure": TermStructureSource,
}


def get_volatility_source(kind: str) -> VolatilitySource:
    try:
        return _SOURCES[kind]()
    except KeyError:
        raise ValueError(
            f"Unknown volatility source '{kind}'. Choose from: {', '.join(sorted(_SOURCES))}"
        ) from None


def build_inputs(raw: Mapping[str, Any], source: VolatilitySource) -> StrategyInputs:
    """Build canonical inputs from a form-shaped mapping.

    Numeric fields are normalized by the model; an unknown trend raises
    ``pydantic.ValidationError``.
    """
    fields = normalize_keys(raw)
    data = {k: fields[k] for k in _COMMON_FIELDS if k in fields}
    data.update(source.resolve(fields))
    return StrategyInputs(**data)
