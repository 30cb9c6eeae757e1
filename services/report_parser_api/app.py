from __future__ import annotations
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import Any, List

from src.core.errors import UnexpectedPayloadError
from src.core.pipeline import normalize_response, transform_markdown
from src.sentiment.lexicon import classify_sentiment

app = FastAPI(title="Report Parser API")


class TransformRequest(BaseModel):
    ticker: str = Field(..., description="Ticker the report was requested for")
    content: str = ""


class NormalizeRequest(BaseModel):
    ticker: str
    payload: Any = Field(None, description="Webhook response body, any shape")


class TextItem(BaseModel):
    id: str = Field(..., description="Unique id of the text item")
    text: str = ""


class SentimentItem(BaseModel):
    id: str
    label: str
    color: str


@app.post("/transform")
def transform(req: TransformRequest):
    """Markdown report text -> structured analysis document."""
    return transform_markdown(req.content, req.ticker).to_payload()


@app.post("/normalize")
def normalize(req: NormalizeRequest):
    """Any known webhook shape -> structured analysis document."""
    try:
        return normalize_response(req.payload, req.ticker).to_payload()
    except UnexpectedPayloadError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/sentiment_batch", response_model=List[SentimentItem])
def sentiment_batch(items: List[TextItem]):
    out: List[SentimentItem] = []
    for it in items:
        sentiment = classify_sentiment(it.text)
        out.append(SentimentItem(id=it.id, label=sentiment.label, color=sentiment.color_class))
    return out


@app.get("/health")
def health():
    return {"ok": True}
