"""Shared fixtures for bar and series construction."""

from datetime import date, timedelta

import pytest

from marketlens.domain.entities.market_data import Bar, Series

_START = date(2024, 1, 1)


def _day(i: int) -> str:
    return (_START + timedelta(days=i)).isoformat()


@pytest.fixture
def make_bars():
    """Build flat-range bars (high == low == close) from a list of closes."""

    def _make(closes, volume=1000.0):
        return [
            Bar(date=_day(i), open=c, high=c, low=c, close=c, volume=volume)
            for i, c in enumerate(closes)
        ]

    return _make


@pytest.fixture
def make_series(make_bars):
    """Build a validated Series from a list of closes."""

    def _make(closes, volume=1000.0):
        return Series.from_bars(make_bars(closes, volume))

    return _make
