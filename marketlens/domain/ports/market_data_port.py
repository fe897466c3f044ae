"""
Ports (interfaces) for market data retrieval.
Infrastructure adapters (e.g. BinanceCryptoDataSource) implement IAssetDataSource
for a single asset class; AssetClassRouter composes them into IMarketDataProvider.
Retrieval mechanics (route fallback, proxies, retries) stay behind these ports.
"""

from abc import ABC, abstractmethod

from marketlens.domain.entities.market_data import AssetClass, MarketData


class IMarketDataProvider(ABC):
    @abstractmethod
    def fetch(self, asset_class: AssetClass, query: str) -> MarketData:
        """Fetch the full available price history, identity and news for *query*.

        Must return bars in strictly increasing date order without duplicates.

        Raises:
            NotFoundError: if no instrument matches *query*.
            InsufficientHistoryError: if fewer than Series.MIN_BARS usable bars exist.
            DataProviderUnavailableError: if every retrieval route failed.
        """
        ...


class IAssetDataSource(ABC):
    asset_class: AssetClass

    @abstractmethod
    def fetch(self, query: str) -> MarketData:
        """Fetch market data for *query* within this source's asset class."""
        ...
