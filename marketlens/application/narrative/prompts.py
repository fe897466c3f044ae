"""
Prompts for the market narrative model.
Kept in the application layer next to the indicator semantics they describe,
independent from any model SDK.
"""

from typing import Optional, Sequence

from marketlens.domain.entities.analysis import CrossSignal, IndicatorSnapshot
from marketlens.domain.entities.market_data import NewsItem, Quote

SYSTEM_PROMPT = """You are a professional financial and technical analyst.

Respond with a single JSON object and nothing else, using exactly these keys:
- "summary": a concise analysis summary (string).
- "sentiment": one of "Bullish", "Bearish", "Neutral".
- "bulletPoints": 3 to 5 key actionable insights (array of strings).
- "sources": optional array of {"title": string, "uri": string} you relied on.
"""

_CROSS_LABELS = {
    CrossSignal.GOLDEN: "golden cross",
    CrossSignal.DEATH: "death cross",
    CrossSignal.NONE: "no clear crossover",
}


def build_narrative_prompt(
    name: str,
    symbol: str,
    indicators: IndicatorSnapshot,
    news: Sequence[NewsItem],
    quote: Optional[Quote] = None,
) -> str:
    lines = [f"Run a professional financial and technical analysis of {name} ({symbol}).", ""]
    lines.append("Technical indicators:")
    if quote is not None:
        lines.append(f"- Current price: {quote.price}")
        lines.append(f"- Change vs. previous close: {quote.change_percent:.2f}%")
    lines.append(f"- RSI (14): {indicators.rsi:.2f}")
    lines.append(f"- KD (9,3,3): K={indicators.kd.k:.2f}, D={indicators.kd.d:.2f}")
    lines.append(f"- Moving average signal: {_CROSS_LABELS[indicators.cross_signal]}")
    lines.append("")
    lines.append("Latest related news:")
    if news:
        lines.extend(f"- {item.title} (source: {item.source})" for item in news)
    else:
        lines.append("- none available")
    lines.append("")
    lines.append(
        "Give a refined summary, a definite market sentiment rating and "
        "3-5 key actionable recommendations."
    )
    return "\n".join(lines)
