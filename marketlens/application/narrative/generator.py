"""
Narrative provider backed by an injected ILanguageModel.

Dependency-injection contract:
  - Receives ILanguageModel and, optionally, IObservabilityHandler.
  - Never imports ChatBedrock or langfuse directly; langchain_core messages are
    treated as framework imports, acceptable in the application layer.
"""

import re
from typing import Any, Optional, Sequence

from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import ValidationError

from marketlens.application.narrative.prompts import SYSTEM_PROMPT, build_narrative_prompt
from marketlens.application.narrative.schema import NarrativePayload
from marketlens.domain.entities.analysis import (
    IndicatorSnapshot,
    Narrative,
    NarrativeSource,
    Sentiment,
)
from marketlens.domain.entities.market_data import NewsItem, Quote
from marketlens.domain.errors import NarrativeUnavailableError
from marketlens.domain.ports.llm_port import ILanguageModel
from marketlens.domain.ports.narrative_port import INarrativeProvider
from marketlens.domain.ports.observability_port import IObservabilityHandler

_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class LLMNarrativeProvider(INarrativeProvider):
    MAX_SOURCES = 3

    def __init__(
        self,
        llm: ILanguageModel,
        observability: Optional[IObservabilityHandler] = None,
    ) -> None:
        self._llm = llm
        self._observability = observability

    def analyze(
        self,
        name: str,
        symbol: str,
        indicators: IndicatorSnapshot,
        news: Sequence[NewsItem],
        quote: Optional[Quote] = None,
    ) -> Narrative:
        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=build_narrative_prompt(name, symbol, indicators, news, quote)),
        ]
        try:
            response = self._llm.invoke(messages, config=self._config(symbol))
        except Exception as exc:
            raise NarrativeUnavailableError(f"Narrative model call failed for {symbol!r}: {exc}") from exc

        return self.parse(_message_text(response))

    @classmethod
    def parse(cls, text: str) -> Narrative:
        """Parse the model's JSON answer into a Narrative.

        Tolerates a surrounding ```json fence. Sources without a URI are
        dropped and at most MAX_SOURCES are kept.

        Raises:
            NarrativeUnavailableError: on invalid JSON or schema violations.
        """
        stripped = text.strip()
        fenced = _FENCE.match(stripped)
        if fenced:
            stripped = fenced.group(1)
        try:
            payload = NarrativePayload.model_validate_json(stripped)
        except ValidationError as exc:
            raise NarrativeUnavailableError(f"Unusable narrative response: {exc}") from exc

        sources = [
            NarrativeSource(title=s.title, uri=s.uri)
            for s in payload.sources
            if s.uri and s.uri != "#"
        ][: cls.MAX_SOURCES]
        return Narrative(
            summary=payload.summary,
            sentiment=Sentiment(payload.sentiment),
            bullet_points=tuple(payload.bullet_points),
            sources=tuple(sources),
        )

    def _config(self, symbol: str) -> Optional[dict]:
        if self._observability is None:
            return None
        return self._observability.trace_config(symbol)


def _message_text(message: Any) -> str:
    """Extract plain text from a chat message whose content may be a list of blocks."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)
