"""Central configuration, loaded from YAML, overridable per-field."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


# --- Settings models ---


class ScoringSettings(BaseModel):
    trend_points: dict[str, float] = Field(default_factory=lambda: {
        "Up": 30.0,
        "Sideways": 20.0,
        "Down": 10.0,
    })
    net_delta_points: float = 25.0
    net_theta_points: float = 25.0
    iv_structure_points: float = 20.0
    earnings_penalty: float = 15.0
    earnings_window_days: float = 5.0
    earnings_iv_rank_threshold: float = 70.0
    far_days_default: float = 999.0     # stands in for missing earnings / DTE


class AdviceSettings(BaseModel):
    open_threshold: float = 80.0
    small_threshold: float = 60.0


class AdjustmentSettings(BaseModel):
    roll_short_delta: float = 0.45
    early_close_dte: float = 10.0
    early_close_delta: float = 0.15
    weak_theta: float = 0.01
    pmcc_net_delta_band: tuple[float, float] = (0.35, 0.65)
    put_diagonal_net_delta_band: tuple[float, float] = (-0.15, 0.15)


class StrikeGuideSettings(BaseModel):
    pmcc_long_delta: tuple[float, float] = (0.75, 0.85)
    pmcc_short_delta: tuple[float, float] = (0.20, 0.35)
    put_diagonal_long_delta: tuple[float, float] = (-0.45, -0.25)
    put_diagonal_short_delta: tuple[float, float] = (-0.35, -0.20)
    bear_call_short_delta: tuple[float, float] = (0.20, 0.35)
    bear_call_dte: tuple[int, int] = (7, 20)


class VolatilitySettings(BaseModel):
    source: str = "rank_pair"           # "rank_pair" | "term_structure"


class ApiSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000


class Settings(BaseModel):
    """Central config, loaded from YAML, overridable per-field."""

    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    advice: AdviceSettings = Field(default_factory=AdviceSettings)
    adjustments: AdjustmentSettings = Field(default_factory=AdjustmentSettings)
    strike_guides: StrikeGuideSettings = Field(default_factory=StrikeGuideSettings)
    volatility: VolatilitySettings = Field(default_factory=VolatilitySettings)
    api: ApiSettings = Field(default_factory=ApiSettings)


# --- Loading ---

_DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"
_USER_CONFIG_PATH = Path.home() / ".diagonal_advisor" / "config.yaml"

_cached_settings: Settings | None = None


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base. Returns new dict."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(
    user_config_path: Path | None = None,
    _force_reload: bool = False,
) -> Settings:
    """Load defaults.yaml, merge ~/.diagonal_advisor/config.yaml if present.

    Args:
        user_config_path: Override path for user config file.
        _force_reload: Bypass cache (for testing).

    Returns:
        Merged Settings instance.
    """
    global _cached_settings
    if _cached_settings is not None and not _force_reload:
        return _cached_settings

    # Layer 1: package defaults
    with open(_DEFAULTS_PATH) as f:
        defaults = yaml.safe_load(f) or {}

    # Layer 2: user overrides
    user_path = user_config_path or _USER_CONFIG_PATH
    if user_path.exists():
        with open(user_path) as f:
            user = yaml.safe_load(f) or {}
        merged = _deep_merge(defaults, user)
    else:
        merged = defaults

    _cached_settings = Settings(**merged)
    return _cached_settings


def get_settings() -> Settings:
    """Get cached settings (singleton). Loads on first call."""
    return load_settings()


def reset_settings() -> None:
    """Clear cached settings. Next get_settings() will reload from YAML."""
    global _cached_settings
    _cached_settings = None
