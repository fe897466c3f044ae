"""
Technical indicators: RSI, stochastic KD and simple moving average.
Pure functions over ordered price data, no I/O and no external dependencies.

An unavailable indicator is returned as None, never as zero or an exception.
"""

from typing import Optional, Sequence

from marketlens.domain.entities.analysis import KD
from marketlens.domain.entities.market_data import Bar

RSI_PERIOD = 14
KD_PERIOD = 9
NEUTRAL = 50.0


def rsi(prices: Sequence[float], period: int = RSI_PERIOD) -> float:
    """Relative Strength Index over the last *period* price changes.

    Uses a simple mean of gains and losses (no Wilder smoothing).

    Returns:
        50.0 when fewer than period + 1 prices are given, 100.0 when the
        window has no losses, otherwise 100 - 100 / (1 + avg_gain / avg_loss).
    """
    if len(prices) < period + 1:
        return NEUTRAL

    window = prices[-(period + 1):]
    gains = losses = 0.0
    for prev, curr in zip(window, window[1:]):
        change = curr - prev
        if change >= 0:
            gains += change
        else:
            losses -= change

    avg_gain = gains / period
    avg_loss = losses / period
    if avg_loss == 0:
        return 100.0
    return 100 - 100 / (1 + avg_gain / avg_loss)


def stochastic_kd(bars: Sequence[Bar], period: int = KD_PERIOD) -> KD:
    """Stochastic KD with 1/3 exponential smoothing, seeded at K = D = 50.

    The recurrence walks the whole sequence, so early bars bias the result:
    pass the full available history in ascending date order, not a display
    window. Only the final (K, D) pair is returned.
    """
    k = d = NEUTRAL
    for i, bar in enumerate(bars):
        window = bars[max(0, i - period + 1): i + 1]
        lowest = min(b.low for b in window)
        highest = max(b.high for b in window)
        if highest == lowest:
            rsv = NEUTRAL
        else:
            rsv = (bar.close - lowest) / (highest - lowest) * 100
        k += (rsv - k) / 3
        d += (k - d) / 3
    return KD(k=k, d=d)


def moving_average(bars: Sequence[Bar], window: int, at_index: int) -> Optional[float]:
    """Mean close over the *window* bars ending at *at_index* (inclusive).

    Returns None when there is not enough history before *at_index*.

    Raises:
        IndexError: if *at_index* is past the end of *bars*.
    """
    if at_index < window - 1:
        return None
    if at_index >= len(bars):
        raise IndexError(f"at_index {at_index} out of range for {len(bars)} bars")
    closes = [bar.close for bar in bars[at_index - window + 1: at_index + 1]]
    return sum(closes) / window
