"""
Composite score: additive heuristic over an IndicatorSnapshot, clamped to [0, 100].
"""

from marketlens.domain.entities.analysis import CrossSignal, IndicatorSnapshot

BASELINE = 50
MIN_SCORE = 0
MAX_SCORE = 100
BULLISH_THRESHOLD = 60


def score(indicators: IndicatorSnapshot) -> int:
    """Score a snapshot. Each band contributes at most once; order does not matter."""
    total = BASELINE

    if indicators.rsi < 30:
        total += 20
    elif indicators.rsi > 75:
        total -= 20

    if indicators.kd.k < 20:
        total += 15
    elif indicators.kd.k > 80:
        total -= 10

    if indicators.cross_signal is CrossSignal.GOLDEN:
        total += 20
    elif indicators.cross_signal is CrossSignal.DEATH:
        total -= 20

    return max(MIN_SCORE, min(MAX_SCORE, total))


def is_bullish(value: int) -> bool:
    return value >= BULLISH_THRESHOLD
