"""
Infrastructure adapter: Binance public market data API -> IAssetDataSource (crypto).

Queries are quoted against USDT; kline array positions are confined here.
"""

from datetime import datetime, timezone

from marketlens.domain.entities.market_data import AssetClass, Bar, MarketData, Series
from marketlens.domain.errors import DataProviderUnavailableError, NotFoundError
from marketlens.domain.ports.market_data_port import IAssetDataSource
from marketlens.infrastructure.market_data.http_fetcher import FallbackHttpFetcher


class BinanceCryptoDataSource(IAssetDataSource):
    """Fetches daily klines for <SYMBOL>USDT from Binance's public data endpoint."""

    asset_class = AssetClass.CRYPTO

    KLINES_URL = "https://data-api.binance.vision/api/v3/klines"
    QUOTE_ASSET = "USDT"
    INTERVAL = "1d"
    LIMIT = 150

    def __init__(self, fetcher: FallbackHttpFetcher) -> None:
        self._fetcher = fetcher

    def fetch(self, query: str) -> MarketData:
        base = self.base_symbol(query)
        pair = f"{base}{self.QUOTE_ASSET}"
        try:
            klines = self._fetcher.get_json(
                self.KLINES_URL,
                {"symbol": pair, "interval": self.INTERVAL, "limit": self.LIMIT},
            )
        except DataProviderUnavailableError as exc:
            # Binance answers unknown pairs with HTTP 400.
            if exc.status_code is not None and 400 <= exc.status_code < 500:
                raise NotFoundError(f"Crypto {base!r} not found.") from exc
            raise

        if not isinstance(klines, list) or not klines:
            raise NotFoundError(f"Crypto {base!r} not found.")

        series = Series.from_bars(
            Bar(
                date=datetime.fromtimestamp(k[0] / 1000, tz=timezone.utc).strftime("%Y-%m-%d"),
                open=float(k[1]),
                high=float(k[2]),
                low=float(k[3]),
                close=float(k[4]),
                volume=float(k[5]),
            )
            for k in klines
        )
        return MarketData(
            symbol=base,
            name=f"{base}/{self.QUOTE_ASSET}",
            asset_class=self.asset_class,
            series=series,
        )

    @classmethod
    def base_symbol(cls, query: str) -> str:
        """Uppercase *query* and strip a trailing quote-asset suffix (BTCUSDT -> BTC)."""
        symbol = query.strip().upper()
        if symbol.endswith(cls.QUOTE_ASSET) and len(symbol) > len(cls.QUOTE_ASSET):
            symbol = symbol[: -len(cls.QUOTE_ASSET)]
        return symbol
