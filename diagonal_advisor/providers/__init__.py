"""Market data providers and the provider registry."""

from __future__ import annotations

from diagonal_advisor.providers.base import MarketDataProvider
from diagonal_advisor.providers.exceptions import ProviderError, ProviderNotImplementedError
from diagonal_advisor.providers.stubs import FinnhubProvider, IBKRProvider

_REGISTRY: dict[str, type[MarketDataProvider]] = {
    "finnhub": FinnhubProvider,
    "ibkr": IBKRProvider,
}


def available_providers() -> list[str]:
    return list(_REGISTRY)


def get_provider(name: str) -> MarketDataProvider:
    """Instantiate a registered provider. Raises KeyError for unknown names."""
    try:
        return _REGISTRY[name.lower()]()
    except KeyError:
        raise KeyError(f"Unknown provider '{name}'. Choose from: {', '.join(_REGISTRY)}") from None


def register_provider(name: str, provider_cls: type[MarketDataProvider]) -> None:
    """Register or replace a provider implementation."""
    _REGISTRY[name.lower()] = provider_cls


__all__ = [
    "FinnhubProvider",
    "IBKRProvider",
    "MarketDataProvider",
    "ProviderError",
    "ProviderNotImplementedError",
    "available_providers",
    "get_provider",
    "register_provider",
]
