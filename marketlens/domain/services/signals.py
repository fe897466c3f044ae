"""
Moving-average crossover detection (golden / death cross).
Single-step edge detector: a signal fires only on the bar where the short MA
crosses the long MA and does not persist afterwards.
"""

from typing import Optional, Sequence

from marketlens.domain.entities.analysis import CrossSignal
from marketlens.domain.entities.market_data import Bar
from marketlens.domain.services.indicators import moving_average

SHORT_WINDOW = 5
LONG_WINDOW = 20


def classify_crossover(
    prev_short: Optional[float],
    prev_long: Optional[float],
    curr_short: Optional[float],
    curr_long: Optional[float],
) -> CrossSignal:
    """Compare two consecutive (short, long) MA pairs.

    Any missing value yields NONE, as does equality at either index.
    """
    if None in (prev_short, prev_long, curr_short, curr_long):
        return CrossSignal.NONE
    if prev_short < prev_long and curr_short > curr_long:
        return CrossSignal.GOLDEN
    if prev_short > prev_long and curr_short < curr_long:
        return CrossSignal.DEATH
    return CrossSignal.NONE


def detect_crossover(
    bars: Sequence[Bar],
    at_index: Optional[int] = None,
    short_window: int = SHORT_WINDOW,
    long_window: int = LONG_WINDOW,
) -> CrossSignal:
    """Detect a crossover on the bar at *at_index* (defaults to the latest bar)."""
    if at_index is None:
        at_index = len(bars) - 1
    if at_index < 1:
        return CrossSignal.NONE
    return classify_crossover(
        prev_short=moving_average(bars, short_window, at_index - 1),
        prev_long=moving_average(bars, long_window, at_index - 1),
        curr_short=moving_average(bars, short_window, at_index),
        curr_long=moving_average(bars, long_window, at_index),
    )
