"""
Port (interface) for narrative providers.
Application adapters (e.g. LLMNarrativeProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from marketlens.domain.entities.analysis import IndicatorSnapshot, Narrative
from marketlens.domain.entities.market_data import NewsItem, Quote


class INarrativeProvider(ABC):
    @abstractmethod
    def analyze(
        self,
        name: str,
        symbol: str,
        indicators: IndicatorSnapshot,
        news: Sequence[NewsItem],
        quote: Optional[Quote] = None,
    ) -> Narrative:
        """Produce a narrative for the instrument from its computed indicators.

        Raises:
            NarrativeUnavailableError: on any provider or parsing failure.
        """
        ...
