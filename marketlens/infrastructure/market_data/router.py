"""
Infrastructure adapter: per-asset-class data sources -> IMarketDataProvider.
"""

import logging
from typing import Iterable

from marketlens.domain.entities.market_data import AssetClass, MarketData
from marketlens.domain.ports.market_data_port import IAssetDataSource, IMarketDataProvider

logger = logging.getLogger(__name__)


class AssetClassRouter(IMarketDataProvider):
    """Dispatches each fetch to the data source registered for its asset class."""

    def __init__(self, sources: Iterable[IAssetDataSource]) -> None:
        self._sources = {source.asset_class: source for source in sources}

    def fetch(self, asset_class: AssetClass, query: str) -> MarketData:
        source = self._sources.get(AssetClass(asset_class))
        if source is None:
            raise ValueError(f"No data source registered for asset class {asset_class!r}")
        logger.debug("Routing %r to %s", query, type(source).__name__)
        return source.fetch(query)
