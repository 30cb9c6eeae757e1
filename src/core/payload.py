"""
Upstream payload shapes.

The analysis webhook has returned several shapes over time. Each known shape
is a variant here and classify_payload picks one with ordered predicates, so
nothing downstream has to probe fields of an untyped payload.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Union

STRUCTURED_MARKERS = ("content", "ticker", "output")
NAMED_SECTION_FIELDS = (
    "executiveSummary",
    "financialSnapshot",
    "technicalAnalysis",
    "marketContext",
    "integratedThesis",
)
LEGACY_TEXT_FIELD = "myField"


@dataclass(frozen=True)
class StructuredPayload:
    data: Dict[str, Any]


@dataclass(frozen=True)
class WrappedOutputPayload:
    text: str


@dataclass(frozen=True)
class PlainTextPayload:
    text: str


@dataclass(frozen=True)
class LegacyFieldPayload:
    text: str


@dataclass(frozen=True)
class UnrecognizedPayload:
    raw: Any


RawReport = Union[StructuredPayload, WrappedOutputPayload, PlainTextPayload, LegacyFieldPayload, UnrecognizedPayload]


def is_structured(payload: Any) -> bool:
    if not isinstance(payload, dict):
        return False
    return any(payload.get(name) for name in STRUCTURED_MARKERS + NAMED_SECTION_FIELDS)


def is_wrapped_output(payload: Any) -> bool:
    if not isinstance(payload, list) or not payload:
        return False
    first = payload[0]
    return isinstance(first, dict) and isinstance(first.get("output"), str) and bool(first["output"])


def is_legacy_field(payload: Any) -> bool:
    return isinstance(payload, dict) and payload.get(LEGACY_TEXT_FIELD) is not None


def classify_payload(payload: Any) -> RawReport:
    if is_structured(payload):
        return StructuredPayload(data=payload)
    if is_wrapped_output(payload):
        return WrappedOutputPayload(text=payload[0]["output"])
    if isinstance(payload, str):
        return PlainTextPayload(text=payload)
    if is_legacy_field(payload):
        return LegacyFieldPayload(text=str(payload[LEGACY_TEXT_FIELD]))
    return UnrecognizedPayload(raw=payload)
