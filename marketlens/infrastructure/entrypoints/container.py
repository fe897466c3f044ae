"""
Composition Root: wires infrastructure adapters into the application layer.
Shared by the FastAPI app and the CLI. Reads configuration from the
environment; call load_dotenv() before build_container().
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from marketlens.application.narrative.generator import LLMNarrativeProvider
from marketlens.application.use_cases.analyze_market import AnalyzeMarketUseCase
from marketlens.domain.ports.observability_port import IObservabilityHandler
from marketlens.infrastructure.llm.bedrock_adapter import BedrockChatAdapter
from marketlens.infrastructure.market_data.binance_adapter import BinanceCryptoDataSource
from marketlens.infrastructure.market_data.finmind_adapter import FinMindEquityDataSource
from marketlens.infrastructure.market_data.http_fetcher import FallbackHttpFetcher
from marketlens.infrastructure.market_data.router import AssetClassRouter
from marketlens.infrastructure.market_data.yfinance_adapter import YFinanceMetalDataSource

_FALSY = {"0", "false", "no", "off"}


@dataclass
class Container:
    use_case: AnalyzeMarketUseCase
    fetcher: FallbackHttpFetcher
    observability: Optional[IObservabilityHandler]

    def close(self) -> None:
        self.fetcher.close()
        if self.observability is not None:
            self.observability.flush()


def build_container() -> Container:
    fetcher = FallbackHttpFetcher(
        use_proxies=os.environ.get("MARKETLENS_USE_PROXIES", "true").lower() not in _FALSY,
        timeout=float(os.environ.get("HTTP_TIMEOUT_SECONDS", "15")),
    )
    router = AssetClassRouter(
        [
            FinMindEquityDataSource(fetcher),
            BinanceCryptoDataSource(fetcher),
            YFinanceMetalDataSource(),
        ]
    )

    observability: Optional[IObservabilityHandler] = None
    if os.environ.get("LANGFUSE_PUBLIC_KEY"):
        from marketlens.infrastructure.observability.langfuse_adapter import (
            LangfuseObservabilityHandler,
        )
        observability = LangfuseObservabilityHandler()

    narrative = LLMNarrativeProvider(BedrockChatAdapter(), observability)
    return Container(
        use_case=AnalyzeMarketUseCase(router, narrative),
        fetcher=fetcher,
        observability=observability,
    )


def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
