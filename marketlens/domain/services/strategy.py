"""
Strategy generator: entry, target and stop levels from score and trailing range.

Levels widen with an asset-class volatility multiplier. For a positive close
and a non-degenerate range, stop < buy always holds; buy < sell is not
enforced (see Strategy.is_ordered).
"""

from marketlens.domain.entities.analysis import PriceRange, Strategy
from marketlens.domain.entities.market_data import AssetClass
from marketlens.domain.services.scoring import is_bullish

TRAILING_WINDOW = 60

_VOLATILITY = {AssetClass.CRYPTO: 1.5}
_DEFAULT_VOLATILITY = 1.0


def volatility_multiplier(asset_class: AssetClass) -> float:
    return _VOLATILITY.get(asset_class, _DEFAULT_VOLATILITY)


def generate_strategy(
    score: int,
    latest_close: float,
    trailing_range: PriceRange,
    asset_class: AssetClass,
) -> Strategy:
    """Derive buy / sell / stop prices.

    Bullish (score >= 60): buy on a shallow pullback but never below 30% of
    the trailing range; sell at +5% or the trailing high, whichever is higher.
    Otherwise: buy near the trailing low; sell at +5% capped below the high.
    """
    vol = volatility_multiplier(asset_class)
    low, high, span = trailing_range.low, trailing_range.high, trailing_range.span

    if is_bullish(score):
        buy = max(latest_close * (1 - 0.02 * vol), low + 0.3 * span)
        sell = max(latest_close * (1 + 0.05 * vol), high)
    else:
        buy = low + 0.1 * span
        sell = min(latest_close * (1 + 0.05 * vol), high - 0.1 * span)

    stop = buy * (1 - 0.06 * vol)
    return Strategy(buy=buy, sell=sell, stop=stop)
