from __future__ import annotations
import re
from typing import List, Optional

from src.core.models import Metric

RSI_PATTERN = re.compile(r"RSI:\s*([\d.]+)", re.IGNORECASE)
MACD_PATTERN = re.compile(r"MACD:\s*([-\d.]+)", re.IGNORECASE)
SUPPORT_PATTERN = re.compile(r"Support:\s*\$?(\d[\d.,]*)", re.IGNORECASE)
RESISTANCE_PATTERN = re.compile(r"Resistance:\s*\$?(\d[\d.,]*)", re.IGNORECASE)

RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0

_LEADING_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)")


def parse_number(raw: str) -> Optional[float]:
    """Read the numeric prefix of raw ("7.89." -> 7.89); None if there is none."""
    m = _LEADING_NUMBER.match(raw)
    return float(m.group(0)) if m else None


def classify_rsi(value: Optional[float]) -> str:
    if value is None:
        return "neutral"
    if value > RSI_OVERBOUGHT:
        return "bearish"
    if value < RSI_OVERSOLD:
        return "bullish"
    return "neutral"


def classify_macd(value: Optional[float]) -> str:
    # No neutral zone: zero and unreadable values count as bearish
    if value is not None and value > 0:
        return "bullish"
    return "bearish"


def _price_level(label: str, pattern: re.Pattern, text: str) -> Optional[Metric]:
    m = pattern.search(text)
    if not m:
        return None
    return Metric(label=label, value="$" + m.group(1).rstrip(".,"), type="neutral")


def extract_metrics(text: str) -> List[Metric]:
    """RSI, MACD, Support and Resistance, first match per label; misses are omitted."""
    metrics = []

    m = RSI_PATTERN.search(text)
    if m:
        metrics.append(Metric(label="RSI", value=m.group(1), type=classify_rsi(parse_number(m.group(1)))))

    m = MACD_PATTERN.search(text)
    if m:
        metrics.append(Metric(label="MACD", value=m.group(1), type=classify_macd(parse_number(m.group(1)))))

    for label, pattern in (("Support", SUPPORT_PATTERN), ("Resistance", RESISTANCE_PATTERN)):
        level = _price_level(label, pattern, text)
        if level is not None:
            metrics.append(level)

    return metrics
