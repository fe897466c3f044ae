"""
Infrastructure adapter: FinMind open data API -> IAssetDataSource (Taiwan equities).

All FinMind dataset names and field names (stock_name, max, min,
Trading_Volume, ...) are confined here.
"""

import re
from datetime import date, timedelta
from typing import Any, Callable

from marketlens.domain.entities.market_data import (
    AssetClass,
    Bar,
    MarketData,
    NewsItem,
    Series,
)
from marketlens.domain.errors import NotFoundError
from marketlens.domain.ports.market_data_port import IAssetDataSource
from marketlens.infrastructure.market_data.http_fetcher import FallbackHttpFetcher

_STOCK_CODE = re.compile(r"\d{4}")


class FinMindEquityDataSource(IAssetDataSource):
    """Fetches Taiwan stock prices, names and news from FinMind."""

    asset_class = AssetClass.EQUITY

    BASE_URL = "https://api.finmindtrade.com/api/v4/data"
    HISTORY_DAYS = 200
    NEWS_LIMIT = 5

    def __init__(
        self,
        fetcher: FallbackHttpFetcher,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._fetcher = fetcher
        self._today = today

    def fetch(self, query: str) -> MarketData:
        code = self.resolve_code(query)
        start = (self._today() - timedelta(days=self.HISTORY_DAYS)).isoformat()

        prices = self._dataset("TaiwanStockPrice", data_id=code, start_date=start)
        if not prices:
            raise NotFoundError(f"Stock {query!r} not found.")
        series = Series.from_bars(
            Bar(
                date=row["date"],
                open=_or_default(row.get("open"), row["close"]),
                high=_or_default(row.get("max"), row["close"]),
                low=_or_default(row.get("min"), row["close"]),
                close=float(row["close"]),
                volume=float(row.get("Trading_Volume") or 0),
            )
            for row in prices
            if row.get("close") is not None
        )

        info = self._dataset("TaiwanStockInfo", data_id=code)
        name = info[0].get("stock_name", code) if info else code

        news_rows = self._dataset("TaiwanStockNews", data_id=code, start_date=start)
        news = tuple(
            NewsItem(
                title=row.get("title", ""),
                link=row.get("link", ""),
                date=row.get("date", ""),
                source=row.get("source", ""),
            )
            for row in list(reversed(news_rows))[: self.NEWS_LIMIT]
        )

        return MarketData(
            symbol=code,
            name=name,
            asset_class=self.asset_class,
            series=series,
            news=news,
        )

    def resolve_code(self, query: str) -> str:
        """Return *query* if it is a 4-digit code, else look it up by stock name.

        An exact name match wins over a substring match.

        Raises:
            NotFoundError: if no listed stock name matches.
        """
        query = query.strip()
        if _STOCK_CODE.fullmatch(query):
            return query

        stocks = self._dataset("TaiwanStockInfo")
        found = next((s for s in stocks if s.get("stock_name") == query), None)
        if found is None:
            found = next((s for s in stocks if query in s.get("stock_name", "")), None)
        if found is None:
            raise NotFoundError(f"Stock {query!r} not found.")
        return found["stock_id"]

    def _dataset(self, dataset: str, **params: Any) -> list[dict]:
        payload = self._fetcher.get_json(self.BASE_URL, {"dataset": dataset, **params})
        if not isinstance(payload, dict):
            return []
        return payload.get("data") or []


def _or_default(value: Any, default: Any) -> float:
    return float(default if value is None else value)
