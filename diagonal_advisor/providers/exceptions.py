"""Provider exceptions."""


class ProviderError(Exception):
    """Base for market data provider failures."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        self.message = message
        super().__init__(message)


class ProviderNotImplementedError(ProviderError):
    """Provider is reserved but has no integration yet."""
