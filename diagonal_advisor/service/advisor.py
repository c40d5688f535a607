"""AdvisorService: resolve raw form input and evaluate it."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from diagonal_advisor.config import get_settings
from diagonal_advisor.engine import evaluate
from diagonal_advisor.volatility import build_inputs, get_volatility_source

if TYPE_CHECKING:
    from diagonal_advisor.config import Settings
    from diagonal_advisor.models.inputs import StrategyInputs
    from diagonal_advisor.models.result import StrategyResult
    from diagonal_advisor.volatility import VolatilitySource

logger = logging.getLogger(__name__)


class AdvisorService:
    """Evaluate diagonal / PMCC setups.

    Holds configuration only. The caller owns the input snapshot and calls
    ``evaluate`` again whenever it changes.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        volatility_source: VolatilitySource | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.volatility_source = volatility_source or get_volatility_source(
            self.settings.volatility.source
        )

    def build_inputs(self, raw: Mapping[str, Any]) -> StrategyInputs:
        """Form-shaped mapping -> canonical inputs via the configured volatility source."""
        return build_inputs(raw, self.volatility_source)

    def evaluate(self, inputs: StrategyInputs) -> StrategyResult:
        result = evaluate(inputs, self.settings)
        logger.debug(
            "Evaluated %s: %s score=%.0f advice=%s warnings=%d adjustments=%d",
            inputs.trend.value,
            result.name.value,
            result.score,
            result.advice.value,
            len(result.warnings),
            len(result.adjustments),
        )
        return result

    def evaluate_raw(self, raw: Mapping[str, Any]) -> StrategyResult:
        return self.evaluate(self.build_inputs(raw))
