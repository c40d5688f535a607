"""Abstract market data provider: implement for each vendor / broker.

Providers are a future data source for the input snapshot (Greeks, IV
Rank, earnings dates). Nothing in the evaluation pipeline calls them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class MarketDataProvider(ABC):
    """Source of option-chain observables for one ticker."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Registry key: 'finnhub', 'ibkr', etc."""
        ...

    @property
    def display_name(self) -> str:
        return self.provider_name.capitalize()

    @abstractmethod
    def get_snapshot(self, ticker: str) -> dict:
        """Fetch the raw fields of an input snapshot for ``ticker``.

        Keys match the form fields accepted by ``volatility.build_inputs``.
        """
        ...
