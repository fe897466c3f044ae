"""
Infrastructure adapter: Langfuse -> IObservabilityHandler.

Each narrative call becomes one Langfuse trace named RUN_NAME and tagged with
the instrument symbol, so traces can be filtered per instrument in the UI.

Langfuse is imported lazily so the module can be loaded without LANGFUSE_*
environment variables (e.g. during testing). The composition root only builds
this handler when LANGFUSE_PUBLIC_KEY is set.
"""

from typing import Any, Optional

from marketlens.domain.ports.observability_port import IObservabilityHandler


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Traces narrative model calls through the Langfuse LangChain CallbackHandler."""

    RUN_NAME = "market-narrative"

    def __init__(self, handler: Optional[Any] = None) -> None:
        if handler is None:
            from langfuse.langchain import CallbackHandler
            handler = CallbackHandler()
        self._handler = handler

    def trace_config(self, symbol: str) -> dict[str, Any]:
        return {
            "callbacks": [self._handler],
            "run_name": f"{self.RUN_NAME}:{symbol}",
            "metadata": {"langfuse_tags": [self.RUN_NAME, symbol]},
        }

    def flush(self) -> None:
        from langfuse import get_client
        get_client().flush()
