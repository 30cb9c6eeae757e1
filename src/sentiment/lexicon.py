from __future__ import annotations
from typing import Dict, Tuple

from src.core.models import Sentiment

BULLISH_WORDS: Tuple[str, ...] = ("bullish", "positive", "upside", "buy", "outperform", "strong", "favorable")
BEARISH_WORDS: Tuple[str, ...] = ("bearish", "negative", "downside", "sell", "underperform", "weak", "unfavorable")

SENTIMENT_COLORS: Dict[str, str] = {
    "Bullish": "bg-green-100 text-green-800 border-green-300",
    "Bearish": "bg-red-100 text-red-800 border-red-300",
    "Neutral": "bg-gray-100 text-gray-800 border-gray-300",
}


def count_occurrences(text: str, words: Tuple[str, ...]) -> int:
    """Every occurrence counts, substrings included ("buybacks" hits "buy")."""
    lowered = text.lower()
    return sum(lowered.count(w) for w in words)


def make_sentiment(label: str) -> Sentiment:
    return Sentiment(label=label, color=SENTIMENT_COLORS[label])


def neutral_sentiment() -> Sentiment:
    return make_sentiment("Neutral")


def classify_sentiment(text: str) -> Sentiment:
    """
    Bag-of-words polarity: more bullish hits -> Bullish, more bearish hits ->
    Bearish, anything else (ties, no hits) -> Neutral.
    """
    bullish = count_occurrences(text, BULLISH_WORDS)
    bearish = count_occurrences(text, BEARISH_WORDS)
    if bullish > bearish:
        return make_sentiment("Bullish")
    if bearish > bullish:
        return make_sentiment("Bearish")
    return neutral_sentiment()
