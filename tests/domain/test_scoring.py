"""Tests for the composite score heuristic."""

import itertools

import pytest

from marketlens.domain.entities.analysis import KD, CrossSignal, IndicatorSnapshot
from marketlens.domain.services.scoring import is_bullish, score


def snapshot(rsi=50.0, k=50.0, cross=CrossSignal.NONE):
    return IndicatorSnapshot(rsi=rsi, kd=KD(k=k, d=50.0), cross_signal=cross)


class TestScore:
    """Tests for additive, clamped scoring."""

    def test_neutral_baseline(self):
        assert score(snapshot()) == 50

    def test_all_bullish_rules_clamp_to_100(self):
        """50 + 20 + 15 + 20 = 105 is clamped to 100."""
        assert score(snapshot(rsi=25, k=15, cross=CrossSignal.GOLDEN)) == 100

    def test_all_bearish_rules_reach_0(self):
        """50 - 20 - 10 - 20 = 0, no negative values escape."""
        assert score(snapshot(rsi=80, k=85, cross=CrossSignal.DEATH)) == 0

    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({"rsi": 29.9}, 70),
            ({"rsi": 75.1}, 30),
            ({"k": 19.9}, 65),
            ({"k": 80.1}, 40),
            ({"cross": CrossSignal.GOLDEN}, 70),
            ({"cross": CrossSignal.DEATH}, 30),
        ],
    )
    def test_single_rule(self, kwargs, expected):
        assert score(snapshot(**kwargs)) == expected

    @pytest.mark.parametrize(
        "kwargs",
        [{"rsi": 30.0}, {"rsi": 75.0}, {"k": 20.0}, {"k": 80.0}],
    )
    def test_thresholds_are_strict(self, kwargs):
        assert score(snapshot(**kwargs)) == 50

    def test_mixed_rules_are_additive(self):
        """RSI oversold (+20) and KD overbought (-10) net to 60."""
        assert score(snapshot(rsi=10, k=90)) == 60

    def test_always_within_bounds(self):
        for rsi, k, cross in itertools.product(
            [0, 25, 50, 80, 100], [0, 15, 50, 85, 100], list(CrossSignal)
        ):
            value = score(snapshot(rsi=rsi, k=k, cross=cross))
            assert 0 <= value <= 100
            assert isinstance(value, int)


class TestIsBullish:
    def test_threshold(self):
        assert is_bullish(60)
        assert not is_bullish(59)
