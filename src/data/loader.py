from __future__ import annotations
import asyncio
import logging
from typing import Any, Optional

import httpx

from src.core.config import Settings, get_settings
from src.core.errors import AnalysisServiceError, UnexpectedPayloadError
from src.data.sample_report import SAMPLE_REPORT

logger = logging.getLogger(__name__)


async def fetch_analysis(ticker: str, settings: Optional[Settings] = None) -> Any:
    """
    Fetch the raw analysis payload for ticker from the webhook.

    Returns the decoded JSON body, whatever its shape. In demo mode (or with no
    webhook configured) the bundled sample report is returned as a bare string
    so it goes through the same extraction path as real text responses.
    """
    settings = settings or get_settings()

    if settings.serves_sample:
        logger.warning("Using sample analysis for %s (demo mode or no webhook configured)", ticker)
        if settings.mock_delay_seconds > 0:
            await asyncio.sleep(settings.mock_delay_seconds)
        return SAMPLE_REPORT

    async with httpx.AsyncClient(timeout=settings.timeout_seconds) as client:
        r = await client.get(
            settings.webhook_url,
            params={"query": ticker},
            headers={"Accept": "application/json"},
        )

    logger.info("Analysis webhook answered %s for %s", r.status_code, ticker)
    if not r.is_success:
        raise AnalysisServiceError(r.status_code, r.reason_phrase, r.text.strip())

    try:
        return r.json()
    except ValueError as exc:  # JSONDecodeError, or UnicodeDecodeError on non-UTF-8 bytes
        raise UnexpectedPayloadError(r.text, detail="body is not JSON") from exc
