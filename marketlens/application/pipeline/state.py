"""
LangGraph state for the analysis pipeline.
Each node writes its own keys once; no key is ever rewritten by a later node.
"""

from typing import TypedDict

from marketlens.domain.entities.analysis import (
    AnalysisResult,
    IndicatorSnapshot,
    Narrative,
    PriceRange,
    Strategy,
)
from marketlens.domain.entities.market_data import AssetClass, MarketData, Quote


class AnalysisState(TypedDict, total=False):
    """State threaded through fetch -> derive_indicators -> score_strategy -> narrate -> assemble.

    asset_class, query: request input.
    market:             provider payload (identity, Series, news).
    quote, indicators:  derived from the full Series.
    score, price_range, strategy: derived from indicators and the trailing window.
    narrative:          provider narrative or the neutral fallback.
    result:             the assembled, immutable AnalysisResult.
    """

    asset_class: AssetClass
    query: str
    market: MarketData
    quote: Quote
    indicators: IndicatorSnapshot
    score: int
    price_range: PriceRange
    strategy: Strategy
    narrative: Narrative
    result: AnalysisResult
