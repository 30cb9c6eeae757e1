from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from src.core.config import Settings
from src.core.errors import UnexpectedPayloadError
from src.core.models import AnalysisSection, StockAnalysisResponse
from src.core.payload import (
    NAMED_SECTION_FIELDS,
    LegacyFieldPayload,
    PlainTextPayload,
    StructuredPayload,
    WrappedOutputPayload,
    classify_payload,
)
from src.core.utils import first_text, normalize_ticker
from src.data.loader import fetch_analysis
from src.extraction.metrics import extract_metrics
from src.extraction.sanitizer import extract_chart_url, extract_ticker, sanitize_content
from src.extraction.sections import extract_sections, fallback_section
from src.sentiment.lexicon import classify_sentiment, neutral_sentiment

logger = logging.getLogger(__name__)


def transform_markdown(raw_content: str, ticker: str) -> StockAnalysisResponse:
    """Turn raw report text into a Document: sanitize, then run each extractor on the clean text."""
    raw_content = raw_content or ""
    clean = sanitize_content(raw_content)
    return StockAnalysisResponse(
        ticker=extract_ticker(raw_content) or normalize_ticker(ticker),
        content=clean,
        chart_url=extract_chart_url(raw_content),
        sections=extract_sections(clean),
        metrics=extract_metrics(clean),
        sentiment=classify_sentiment(clean),
    )


def _named_sections(data: Dict[str, Any]) -> List[AnalysisSection]:
    sections = []
    for name, value in data.items():
        if name not in NAMED_SECTION_FIELDS or not isinstance(value, dict):
            continue
        content = value.get("content")
        if not isinstance(content, str) or not content:
            continue
        sections.append(
            AnalysisSection(
                key=first_text(value.get("key"), name),
                title=first_text(value.get("title"), name),
                content=content,
            )
        )
    return sections


def coerce_structured(data: Dict[str, Any], ticker: str) -> StockAnalysisResponse:
    """
    Pass a structured payload through without running extraction. Only the
    fields the view relies on are filled in; everything else is kept as sent.
    """
    fields = dict(data)
    resolved_ticker = first_text(fields.pop("ticker", None)).strip() or normalize_ticker(ticker)
    content = first_text(fields.pop("content", None), fields.get("output"))
    sections = fields.pop("sections", None) or _named_sections(data) or [fallback_section(content)]
    metrics = fields.pop("metrics", None) or []
    sentiment = fields.pop("sentiment", None) or neutral_sentiment()
    chart_url = fields.pop("chartUrl", None)
    fields.pop("chart_url", None)

    try:
        return StockAnalysisResponse(
            ticker=resolved_ticker,
            content=content,
            chartUrl=chart_url,
            sections=sections,
            metrics=metrics,
            sentiment=sentiment,
            **fields,
        )
    except ValidationError as exc:
        raise UnexpectedPayloadError(data, detail=f"invalid structured fields: {exc.error_count()} error(s)") from exc


def normalize_response(payload: Any, ticker: str) -> StockAnalysisResponse:
    """Build a Document from any known upstream shape; unknown shapes raise UnexpectedPayloadError."""
    report = classify_payload(payload)

    if isinstance(report, StructuredPayload):
        return coerce_structured(report.data, ticker)

    if isinstance(report, (WrappedOutputPayload, PlainTextPayload, LegacyFieldPayload)):
        logger.info("Unstructured %s for %s, extracting sections", type(report).__name__, ticker)
        return transform_markdown(report.text, ticker)

    raise UnexpectedPayloadError(payload)


async def analyze_ticker(ticker: str, settings: Optional[Settings] = None) -> StockAnalysisResponse:
    payload = await fetch_analysis(ticker, settings)
    document = normalize_response(payload, ticker)
    logger.info(
        "Analysis ready for %s: %d section(s), %d metric(s), %s",
        document.ticker,
        len(document.sections),
        len(document.metrics),
        document.sentiment.label,
    )
    return document
