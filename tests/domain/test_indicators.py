"""Tests for RSI, stochastic KD and moving average."""

import pytest

from marketlens.domain.entities.market_data import Bar
from marketlens.domain.services.indicators import moving_average, rsi, stochastic_kd


class TestRSI:
    """Tests for simple-mean RSI."""

    def test_monotonic_increase_is_100(self):
        """No losses in the window yields the 100 boundary value."""
        prices = [float(p) for p in range(10, 26)]
        assert rsi(prices) == 100.0

    def test_monotonic_decrease_is_0(self):
        """No gains in the window yields 0."""
        prices = [float(p) for p in range(30, 10, -1)]
        assert rsi(prices) == pytest.approx(0.0)

    @pytest.mark.parametrize("prices", [[], [1.0], [float(p) for p in range(14)], [5.0] * 14])
    def test_insufficient_data_is_neutral(self, prices):
        """Fewer than period + 1 prices returns exactly 50."""
        assert rsi(prices) == 50.0

    def test_flat_prices_is_100(self):
        """Zero changes count as zero gains, so avg_loss == 0 returns 100."""
        assert rsi([42.0] * 15) == 100.0

    def test_only_trailing_window_is_used(self):
        """Prices before the last period + 1 do not affect the result."""
        tail = [10.0, 12.0, 11.0, 13.0, 12.0, 14.0, 13.0, 15.0, 14.0, 16.0, 15.0, 17.0, 16.0, 18.0, 17.0]
        assert rsi([1000.0, 0.0] + tail) == rsi(tail)

    def test_mixed_changes(self):
        """Seven +2 moves and seven -1 moves: RS = 2, RSI = 100 - 100/3."""
        tail = [10.0, 12.0, 11.0, 13.0, 12.0, 14.0, 13.0, 15.0, 14.0, 16.0, 15.0, 17.0, 16.0, 18.0, 17.0]
        assert rsi(tail) == pytest.approx(100 - 100 / 3)

    def test_custom_period(self):
        """A shorter period only needs period + 1 prices."""
        assert rsi([1.0, 2.0, 1.0], period=2) == pytest.approx(50.0)


class TestStochasticKD:
    """Tests for the 1/3-smoothed KD recurrence."""

    def test_flat_series_stays_at_50(self, make_bars):
        """high == low in every window forces RSV = 50 at every step."""
        kd = stochastic_kd(make_bars([100.0] * 40))
        assert kd.k == pytest.approx(50.0)
        assert kd.d == pytest.approx(50.0)

    def test_empty_series_returns_seed(self):
        kd = stochastic_kd([])
        assert (kd.k, kd.d) == (50.0, 50.0)

    def test_single_step_recurrence(self):
        """One bar closing at its high: RSV = 100, K = 200/3, D = 500/9."""
        bars = [Bar(date="2024-01-01", open=5.0, high=10.0, low=0.0, close=10.0, volume=1.0)]
        kd = stochastic_kd(bars)
        assert kd.k == pytest.approx(50 * 2 / 3 + 100 / 3)
        assert kd.d == pytest.approx(50 * 2 / 3 + kd.k / 3)

    def test_closing_at_window_high_converges_to_100(self, make_bars):
        """Rising closes put RSV at 100 every step; K approaches 100 geometrically."""
        kd = stochastic_kd(make_bars([float(p) for p in range(1, 31)]))
        # The first bar's window is flat (RSV 50), the next 29 have RSV 100.
        assert kd.k == pytest.approx(100 - 50 * (2 / 3) ** 29)
        assert kd.k > kd.d

    def test_closing_at_window_low_approaches_0(self, make_bars):
        kd = stochastic_kd(make_bars([float(p) for p in range(60, 0, -1)]))
        assert kd.k < 1.0
        assert 0.0 <= kd.k < kd.d

    def test_outlier_keeps_values_in_bounds(self, make_bars):
        """K and D stay within [0, 100] after an extreme early bar."""
        closes = [1000.0] + [10.0, 11.0] * 10
        with_spike = stochastic_kd(make_bars(closes), period=3)
        assert 0.0 <= with_spike.k <= 100.0
        assert 0.0 <= with_spike.d <= 100.0

    def test_history_prefix_changes_the_reading(self, make_bars):
        """The recurrence depends on the whole history, not only the final window."""
        tail = [float(p) for p in range(20, 40)]
        full = stochastic_kd(make_bars([50.0] * 10 + tail))
        truncated = stochastic_kd(make_bars(tail))
        assert full.k != pytest.approx(truncated.k)


class TestMovingAverage:
    """Tests for simple moving average with absence handling."""

    def test_unavailable_before_window_fills(self, make_bars):
        bars = make_bars([float(p) for p in range(1, 11)])
        for i in range(4):
            assert moving_average(bars, 5, i) is None

    def test_first_available_index(self, make_bars):
        bars = make_bars([float(p) for p in range(1, 11)])
        assert moving_average(bars, 5, 4) == pytest.approx(3.0)

    def test_trailing_window_inclusive(self, make_bars):
        bars = make_bars([float(p) for p in range(1, 11)])
        assert moving_average(bars, 3, 9) == pytest.approx(9.0)

    def test_negative_index_is_unavailable(self, make_bars):
        assert moving_average(make_bars([1.0, 2.0]), 1, -1) is None

    def test_index_past_end_raises(self, make_bars):
        with pytest.raises(IndexError):
            moving_average(make_bars([1.0] * 5), 5, 5)
