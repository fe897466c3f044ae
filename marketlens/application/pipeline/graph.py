"""
LangGraph analysis pipeline factory.

Dependency-injection contract:
  - Receives IMarketDataProvider and INarrativeProvider.
  - Never imports httpx, yfinance, ChatBedrock or langfuse directly.
  - Nodes run strictly in sequence; each is a total function of the state
    written by the nodes before it.

A fetch failure propagates out of graph.invoke() and no result is built.
A narrative failure is logged and replaced by Narrative.neutral_fallback().
"""

import logging

from langgraph.graph import END, START, StateGraph

from marketlens.application.pipeline.state import AnalysisState
from marketlens.domain.entities.analysis import (
    AnalysisResult,
    IndicatorSnapshot,
    Narrative,
    PriceRange,
)
from marketlens.domain.ports.market_data_port import IMarketDataProvider
from marketlens.domain.ports.narrative_port import INarrativeProvider
from marketlens.domain.services import indicators, scoring, signals, strategy

logger = logging.getLogger(__name__)

_NODES = ("fetch", "derive_indicators", "score_strategy", "narrate", "assemble")


def build_analysis_graph(
    provider: IMarketDataProvider,
    narrative_provider: INarrativeProvider,
):
    """Build and compile the linear analysis graph.

    Args:
        provider:           IMarketDataProvider implementation (e.g. AssetClassRouter).
        narrative_provider: INarrativeProvider implementation (e.g. LLMNarrativeProvider).

    Returns:
        Compiled LangGraph CompiledStateGraph ready for invoke() calls.
    """

    def fetch(state: AnalysisState) -> dict:
        market = provider.fetch(state["asset_class"], state["query"])
        logger.info(
            "Fetched %d bars for %s (%s)",
            len(market.series), market.symbol, market.asset_class.value,
        )
        return {"market": market}

    def derive_indicators(state: AnalysisState) -> dict:
        series = state["market"].series
        snapshot = IndicatorSnapshot(
            rsi=indicators.rsi(series.closes),
            kd=indicators.stochastic_kd(series.bars),
            cross_signal=signals.detect_crossover(series.bars),
        )
        return {"indicators": snapshot, "quote": series.latest_quote()}

    def score_strategy(state: AnalysisState) -> dict:
        market = state["market"]
        value = scoring.score(state["indicators"])
        window = market.series.tail(strategy.TRAILING_WINDOW)
        price_range = PriceRange.of(tuple(bar.close for bar in window))
        levels = strategy.generate_strategy(
            value, market.series.latest.close, price_range, market.asset_class
        )
        return {"score": value, "price_range": price_range, "strategy": levels}

    def narrate(state: AnalysisState) -> dict:
        market = state["market"]
        try:
            narrative = narrative_provider.analyze(
                market.name, market.symbol, state["indicators"], market.news, state["quote"]
            )
        except Exception:
            logger.warning(
                "Narrative unavailable for %s, using neutral fallback",
                market.symbol, exc_info=True,
            )
            narrative = Narrative.neutral_fallback()
        return {"narrative": narrative}

    def assemble(state: AnalysisState) -> dict:
        market = state["market"]
        window = market.series.tail(strategy.TRAILING_WINDOW)
        result = AnalysisResult(
            symbol=market.symbol,
            name=market.name,
            asset_class=market.asset_class,
            quote=state["quote"],
            indicators=state["indicators"],
            score=state["score"],
            strategy=state["strategy"],
            history_prices=tuple(bar.close for bar in window),
            history_dates=tuple(bar.date for bar in window),
            news=market.news,
            narrative=state["narrative"],
        )
        logger.info("Analysis complete for %s: score=%d", market.symbol, result.score)
        return {"result": result}

    workflow = StateGraph(AnalysisState)
    workflow.add_node("fetch", fetch)
    workflow.add_node("derive_indicators", derive_indicators)
    workflow.add_node("score_strategy", score_strategy)
    workflow.add_node("narrate", narrate)
    workflow.add_node("assemble", assemble)
    workflow.add_edge(START, _NODES[0])
    for current, following in zip(_NODES, _NODES[1:]):
        workflow.add_edge(current, following)
    workflow.add_edge(_NODES[-1], END)
    return workflow.compile()
