"""
Port (interface) for tracing narrative model calls.
Infrastructure adapters (e.g. LangfuseObservabilityHandler) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any


class IObservabilityHandler(ABC):
    @abstractmethod
    def trace_config(self, symbol: str) -> dict[str, Any]:
        """Return the runnable config (callbacks, run name, metadata) for one
        narrative call about *symbol*."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Send any buffered traces before the process exits."""
        ...
