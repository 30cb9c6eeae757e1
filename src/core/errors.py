from __future__ import annotations
import json
from typing import Any, Optional

MAX_DUMP_CHARS = 1000


class AnalysisError(Exception):
    """Base class for failures surfaced to the user as a single message."""


class AnalysisServiceError(AnalysisError):
    """Upstream webhook answered with a non-success status."""

    def __init__(self, status_code: int, reason: str = "", body: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        message = f"Error {status_code}: {reason}"
        if body:
            message += f" - {body}"
        super().__init__(message)


class UnexpectedPayloadError(AnalysisError):
    """Upstream payload matches none of the known shapes."""

    def __init__(self, payload: Any, detail: Optional[str] = None):
        self.payload = payload
        message = f"Analysis service returned data in an unexpected format. Received structure: {dump_structure(payload)}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


def dump_structure(payload: Any) -> str:
    try:
        text = json.dumps(payload, default=str)
    except (TypeError, ValueError):
        text = repr(payload)
    if len(text) > MAX_DUMP_CHARS:
        text = text[:MAX_DUMP_CHARS] + "..."
    return text
