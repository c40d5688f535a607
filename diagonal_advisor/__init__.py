"""Diagonal / PMCC strategy decision calculator: score, classify, advise, explain."""

__version__ = "0.1.0"

# Config
from diagonal_advisor.config import (
    AdjustmentSettings,
    AdviceSettings,
    ScoringSettings,
    Settings,
    StrikeGuideSettings,
    VolatilitySettings,
    get_settings,
)

# Models
from diagonal_advisor.models.inputs import StrategyInputs, Trend
from diagonal_advisor.models.result import (
    Advice,
    Side,
    StrategyName,
    StrategyResult,
    StrikeGuide,
)

# Evaluation
from diagonal_advisor.engine import evaluate
from diagonal_advisor.normalize import to_number
from diagonal_advisor.presets import PRESETS, get_preset
from diagonal_advisor.volatility import (
    RankPairSource,
    TermStructureSource,
    VolatilitySource,
    build_inputs,
    get_volatility_source,
)

# Services
from diagonal_advisor.service.advisor import AdvisorService

__all__ = [
    "__version__",
    # Config
    "AdjustmentSettings",
    "AdviceSettings",
    "ScoringSettings",
    "Settings",
    "StrikeGuideSettings",
    "VolatilitySettings",
    "get_settings",
    # Models
    "Advice",
    "Side",
    "StrategyInputs",
    "StrategyName",
    "StrategyResult",
    "StrikeGuide",
    "Trend",
    # Evaluation
    "PRESETS",
    "RankPairSource",
    "TermStructureSource",
    "VolatilitySource",
    "build_inputs",
    "evaluate",
    "get_preset",
    "get_volatility_source",
    "to_number",
    # Services
    "AdvisorService",
]
