"""
Domain exception hierarchy.
Zero external dependencies. Infrastructure adapters translate SDK and HTTP
failures into these types so the application layer never sees vendor errors.
"""

from typing import Optional


class MarketLensError(Exception):
    """Base class for every error raised on purpose by this package."""


class NotFoundError(MarketLensError):
    """No instrument matches the query for the requested asset class."""


class InsufficientHistoryError(MarketLensError):
    """Fewer usable bars than the analysis needs."""

    def __init__(self, available: int, required: int) -> None:
        super().__init__(
            f"Insufficient price history: {available} usable bars, {required} required."
        )
        self.available = available
        self.required = required


class DataProviderUnavailableError(MarketLensError):
    """Every retrieval route for a market data request failed.

    status_code is the HTTP status of the first route that answered at all,
    or None when no route produced a response.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NarrativeUnavailableError(MarketLensError):
    """The narrative provider failed or returned an unusable response."""
