from __future__ import annotations
import re
from typing import Optional

CHART_URL_DECLARATION = re.compile(r"Chart URL:\s*`?https?://[^\s`]+`?\s*", re.IGNORECASE)
BACKTICK_URL = re.compile(r"(?:!\s*)?`https?://[^\s`]+`\s*")
IMAGE_URL_LINE = re.compile(r"^[ \t]*https?://\S+\.png[ \t]*$", re.MULTILINE | re.IGNORECASE)
RULE_LINE = re.compile(r"^[ \t]*-+[ \t]*$", re.MULTILINE)
BLANK_LINES = re.compile(r"^\s*\n+", re.MULTILINE)

CHART_URL = re.compile(r"https?://[^\s`)]+\.png", re.IGNORECASE)
DECLARED_TICKER = re.compile(r"Ticker for search(?:es)?:\s*([A-Z]+)", re.IGNORECASE)


def sanitize_content(raw: str) -> str:
    """
    Strip chart URLs and markdown noise from a raw report so the extractors
    only see prose. Order matters: URL removal can leave rule and blank lines
    behind, which the later passes clean up.
    """
    if not raw:
        return ""
    # Line-anchored passes below expect \n endings
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = CHART_URL_DECLARATION.sub("", text)
    text = BACKTICK_URL.sub("", text)
    text = IMAGE_URL_LINE.sub("", text)
    text = RULE_LINE.sub("", text)
    text = BLANK_LINES.sub("", text)
    return text.strip()


def extract_chart_url(raw: str) -> Optional[str]:
    m = CHART_URL.search(raw or "")
    return m.group(0) if m else None


def extract_ticker(raw: str) -> Optional[str]:
    """Ticker declared inside the report ("Ticker for searches: AAPL"), if any."""
    m = DECLARED_TICKER.search(raw or "")
    return m.group(1).upper() if m else None
