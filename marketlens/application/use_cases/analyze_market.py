"""
Use-case: run the full technical analysis pipeline for one instrument.
Depends only on Domain ports and entities plus the LangGraph pipeline; no
infrastructure imports. Each call builds its state from scratch.
"""

from marketlens.application.pipeline.graph import build_analysis_graph
from marketlens.domain.entities.analysis import AnalysisResult
from marketlens.domain.entities.market_data import AssetClass
from marketlens.domain.ports.market_data_port import IMarketDataProvider
from marketlens.domain.ports.narrative_port import INarrativeProvider


class AnalyzeMarketUseCase:
    def __init__(
        self,
        provider: IMarketDataProvider,
        narrative_provider: INarrativeProvider,
    ) -> None:
        self._graph = build_analysis_graph(provider, narrative_provider)

    def execute(self, asset_class: AssetClass, query: str) -> AnalysisResult:
        """Fetch, analyze and narrate *query* within *asset_class*.

        Raises:
            ValueError: if *query* is blank.
            NotFoundError, InsufficientHistoryError, DataProviderUnavailableError:
                propagated from the data provider; no partial result is built.
        """
        if not query or not query.strip():
            raise ValueError("query must be a non-empty string")
        final_state = self._graph.invoke(
            {"asset_class": AssetClass(asset_class), "query": query.strip()}
        )
        return final_state["result"]
