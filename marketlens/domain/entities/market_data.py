"""
Domain entities for raw market data: bars, series, news and the provider payload.
Zero external dependencies, pure Python dataclasses only.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Optional

from marketlens.domain.errors import InsufficientHistoryError


class AssetClass(str, Enum):
    EQUITY = "equity"
    CRYPTO = "crypto"
    METAL = "metal"


@dataclass(frozen=True)
class Bar:
    date: str
    open: float
    high: float
    low: float
    close: float
    volume: float


@dataclass(frozen=True)
class Quote:
    price: float
    change: float
    change_percent: float
    volume: float


@dataclass(frozen=True)
class Series:
    """Bars in strictly increasing date order, at least MIN_BARS long.

    Build it with from_bars() when the input may be unsorted, duplicated or
    contain missing closes; the constructor only validates.
    """

    MIN_BARS: ClassVar[int] = 30

    bars: tuple[Bar, ...]

    def __post_init__(self) -> None:
        if len(self.bars) < self.MIN_BARS:
            raise InsufficientHistoryError(len(self.bars), self.MIN_BARS)
        for prev, curr in zip(self.bars, self.bars[1:]):
            if curr.date <= prev.date:
                raise ValueError(
                    f"Bars must be strictly increasing by date: {prev.date!r} then {curr.date!r}"
                )

    @classmethod
    def from_bars(cls, bars: Iterable[Bar]) -> "Series":
        """Drop bars without a close, sort by date and keep the last bar seen per date."""
        by_date: dict[str, Bar] = {}
        for bar in bars:
            if not _has_close(bar.close):
                continue
            by_date[bar.date] = bar
        return cls(bars=tuple(by_date[d] for d in sorted(by_date)))

    def __len__(self) -> int:
        return len(self.bars)

    @property
    def closes(self) -> tuple[float, ...]:
        return tuple(bar.close for bar in self.bars)

    @property
    def latest(self) -> Bar:
        return self.bars[-1]

    def tail(self, size: int) -> tuple[Bar, ...]:
        return self.bars[-size:]

    def latest_quote(self) -> Quote:
        """Latest close, its change against the previous close, and latest volume."""
        latest, prev = self.bars[-1], self.bars[-2]
        change = latest.close - prev.close
        change_percent = change / prev.close * 100 if prev.close else 0.0
        return Quote(
            price=latest.close,
            change=change,
            change_percent=change_percent,
            volume=latest.volume,
        )


@dataclass(frozen=True)
class NewsItem:
    title: str
    link: str
    date: str
    source: str


@dataclass(frozen=True)
class MarketData:
    symbol: str
    name: str
    asset_class: AssetClass
    series: Series
    news: tuple[NewsItem, ...] = ()


def _has_close(value: Optional[float]) -> bool:
    return value is not None and not math.isnan(value)
