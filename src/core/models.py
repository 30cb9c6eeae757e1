from __future__ import annotations
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

MetricType = Literal["bullish", "bearish", "neutral"]
SentimentLabel = Literal["Bullish", "Bearish", "Neutral"]


class AnalysisSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    content: str


class Metric(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    type: MetricType


class Sentiment(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: SentimentLabel
    color_class: str = Field(..., alias="color", description="Display token for the badge")


class StockAnalysisResponse(BaseModel):
    """Structured analysis document handed to the view layer.

    sections, metrics and sentiment are always present so renderers never
    need to null-check them. Structured upstream payloads can carry extra
    fields (e.g. executiveSummary); those are kept as-is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    ticker: str
    content: str = ""
    chart_url: Optional[str] = Field(default=None, alias="chartUrl")
    sections: Tuple[AnalysisSection, ...]
    metrics: Tuple[Metric, ...] = ()
    sentiment: Sentiment

    def to_payload(self) -> dict:
        """JSON-ready dict using the wire names (chartUrl, color)."""
        return self.model_dump(by_alias=True, mode="json")
