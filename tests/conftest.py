"""Shared test fixtures for diagonal_advisor tests."""

import pytest

import diagonal_advisor.config as config_module
from diagonal_advisor.config import Settings
from diagonal_advisor.models.inputs import StrategyInputs, Trend


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Never read the developer's ~/.diagonal_advisor/config.yaml during tests."""
    monkeypatch.setattr(config_module, "_USER_CONFIG_PATH", tmp_path / "no-user-config.yaml")
    config_module.reset_settings()
    yield
    config_module.reset_settings()


@pytest.fixture
def settings() -> Settings:
    return Settings()


def _make_inputs(**overrides) -> StrategyInputs:
    """Bullish PMCC baseline; override any field."""
    fields = dict(
        trend=Trend.UP,
        earnings_days=10,
        iv_near=70,
        iv_far=40,
        buy_delta=0.80,
        sell_delta=0.25,
        buy_theta=-0.04,
        sell_theta=0.09,
        sell_dte=21,
    )
    fields.update(overrides)
    return StrategyInputs(**fields)


@pytest.fixture
def bullish_inputs() -> StrategyInputs:
    return _make_inputs()


@pytest.fixture
def sideways_inputs() -> StrategyInputs:
    return _make_inputs(
        trend=Trend.SIDEWAYS, earnings_days=3, iv_near=65, iv_far=40,
        buy_delta=-0.30, sell_delta=-0.28, buy_theta=-0.03, sell_theta=0.08, sell_dte=12,
    )


@pytest.fixture
def bearish_inputs() -> StrategyInputs:
    return _make_inputs(
        trend=Trend.DOWN, earnings_days=7, iv_near=72, iv_far=60,
        buy_delta=0.0, sell_delta=0.28, buy_theta=0.0, sell_theta=0.10, sell_dte=9,
    )
