"""Reserved providers with no integration yet."""

from __future__ import annotations

import logging

from diagonal_advisor.providers.base import MarketDataProvider
from diagonal_advisor.providers.exceptions import ProviderNotImplementedError

logger = logging.getLogger(__name__)


class _ReservedProvider(MarketDataProvider):
    def get_snapshot(self, ticker: str) -> dict:
        logger.warning("%s snapshot requested for %s but provider is not implemented", self.provider_name, ticker)
        raise ProviderNotImplementedError(
            self.provider_name, f"{self.display_name} API not implemented yet",
        )


class FinnhubProvider(_ReservedProvider):
    """Finnhub market data (earnings calendar, quotes)."""

    @property
    def provider_name(self) -> str:
        return "finnhub"


class IBKRProvider(_ReservedProvider):
    """Interactive Brokers gateway (option chain Greeks)."""

    @property
    def provider_name(self) -> str:
        return "ibkr"

    @property
    def display_name(self) -> str:
        return "IBKR"
