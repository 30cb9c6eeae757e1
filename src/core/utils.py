from __future__ import annotations
import logging
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install one stream handler on the root logger; safe to call repeatedly."""
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if getattr(handler, "_stock_report", False):
            return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._stock_report = True
    root.addHandler(handler)


def normalize_ticker(ticker: Optional[str]) -> str:
    return (ticker or "").strip().upper()


def first_text(*values: Any) -> str:
    """First non-empty string among values, else ''."""
    for value in values:
        if isinstance(value, str) and value:
            return value
    return ""
