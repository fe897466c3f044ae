"""
Infrastructure adapter: yfinance -> IAssetDataSource (precious metal futures).
All yfinance-specific details (Ticker, history(), column names, futures
tickers) are confined here; the rest of the codebase depends only on the ports.
"""

import logging
import math

import yfinance as yf

from marketlens.domain.entities.market_data import AssetClass, Bar, MarketData, Series
from marketlens.domain.errors import DataProviderUnavailableError, NotFoundError
from marketlens.domain.ports.market_data_port import IAssetDataSource

logger = logging.getLogger(__name__)


class YFinanceMetalDataSource(IAssetDataSource):
    """Fetches daily futures history from Yahoo Finance via the yfinance library."""

    asset_class = AssetClass.METAL

    PERIOD = "6mo"
    INTERVAL = "1d"
    ALIASES = {
        "GOLD": "GC=F",
        "XAU": "GC=F",
        "SILVER": "SI=F",
        "XAG": "SI=F",
        "PLATINUM": "PL=F",
    }
    NAMES = {
        "GC=F": "Gold Futures",
        "SI=F": "Silver Futures",
    }

    def fetch(self, query: str) -> MarketData:
        symbol = self.resolve_symbol(query)
        try:
            history = yf.Ticker(symbol).history(period=self.PERIOD, interval=self.INTERVAL)
        except Exception as exc:
            logger.warning("yfinance history failed for %s: %s", symbol, exc)
            raise DataProviderUnavailableError(
                f"Yahoo Finance request failed for {symbol}"
            ) from exc

        if history.empty:
            raise NotFoundError(f"Metal {query!r} not found.")

        bars = []
        for date, row in history.iterrows():
            close = float(row["Close"])
            if math.isnan(close):
                continue
            bars.append(
                Bar(
                    date=date.strftime("%Y-%m-%d"),
                    open=_or_default(row["Open"], close),
                    high=_or_default(row["High"], close),
                    low=_or_default(row["Low"], close),
                    close=close,
                    volume=_or_default(row["Volume"], 0.0),
                )
            )

        return MarketData(
            symbol=symbol,
            name=self.NAMES.get(symbol, symbol),
            asset_class=self.asset_class,
            series=Series.from_bars(bars),
        )

    @classmethod
    def resolve_symbol(cls, query: str) -> str:
        """Map aliases to futures tickers; append '=F' to bare roots (e.g. HG -> HG=F)."""
        key = query.strip().upper()
        if key in cls.ALIASES:
            return cls.ALIASES[key]
        return key if "=" in key else f"{key}=F"


def _or_default(value, default: float) -> float:
    value = float(value)
    return default if math.isnan(value) else value
