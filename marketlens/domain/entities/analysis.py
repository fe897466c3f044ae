"""
Domain entities produced by the technical analysis pipeline.
Zero external dependencies, pure Python dataclasses only.
"""

from dataclasses import dataclass
from enum import Enum

from marketlens.domain.entities.market_data import AssetClass, NewsItem, Quote


class CrossSignal(str, Enum):
    GOLDEN = "golden"
    DEATH = "death"
    NONE = "none"


class Sentiment(str, Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class KD:
    k: float
    d: float


@dataclass(frozen=True)
class IndicatorSnapshot:
    rsi: float
    kd: KD
    cross_signal: CrossSignal


@dataclass(frozen=True)
class PriceRange:
    low: float
    high: float

    @classmethod
    def of(cls, prices: tuple[float, ...]) -> "PriceRange":
        return cls(low=min(prices), high=max(prices))

    @property
    def span(self) -> float:
        return self.high - self.low


@dataclass(frozen=True)
class Strategy:
    buy: float
    sell: float
    stop: float

    @property
    def is_ordered(self) -> bool:
        """True when stop < buy < sell. The heuristic only guarantees stop < buy."""
        return self.stop < self.buy < self.sell


@dataclass(frozen=True)
class NarrativeSource:
    title: str
    uri: str


@dataclass(frozen=True)
class Narrative:
    summary: str
    sentiment: Sentiment
    bullet_points: tuple[str, ...]
    sources: tuple[NarrativeSource, ...] = ()

    @classmethod
    def neutral_fallback(cls) -> "Narrative":
        """Fixed narrative used whenever the narrative provider cannot answer."""
        return cls(
            summary=(
                "AI analysis is temporarily unavailable. "
                "Please rely on the technical indicators below."
            ),
            sentiment=Sentiment.NEUTRAL,
            bullet_points=(
                "Narrative data could not be retrieved",
                "Check the network connection",
                "Follow the technical trend manually",
            ),
        )


@dataclass(frozen=True)
class AnalysisResult:
    symbol: str
    name: str
    asset_class: AssetClass
    quote: Quote
    indicators: IndicatorSnapshot
    score: int
    strategy: Strategy
    history_prices: tuple[float, ...]
    history_dates: tuple[str, ...]
    news: tuple[NewsItem, ...]
    narrative: Narrative
