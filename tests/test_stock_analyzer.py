from datetime import datetime

import httpx
import pytest
from fastapi.testclient import TestClient

from apps.stock_analyzer import app as stock_app
from src.core.config import Settings, get_settings

WEBHOOK = "http://webhook.test/analysis"


@pytest.fixture
def client():
    stock_app.app.dependency_overrides[get_settings] = lambda: Settings(webhook_url=WEBHOOK)
    stock_app.app.dependency_overrides[stock_app.get_clock] = lambda: (lambda: datetime(2025, 9, 22, 14, 5))
    yield TestClient(stock_app.app)
    stock_app.app.dependency_overrides.clear()


def upstream(monkeypatch, status_code=200, **kwargs):
    async def fake_get(self, url, params=None, headers=None, **rest):
        return httpx.Response(status_code, request=httpx.Request("GET", url), **kwargs)
    monkeypatch.setattr(httpx.AsyncClient, "get", fake_get, raising=True)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_home_has_search_form(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert 'action="/report"' in resp.text
    assert "Analyzing..." in resp.text


def test_analyze_demo_mode(client, monkeypatch):
    async def no_network(self, *args, **kwargs):
        raise AssertionError("demo mode must not call the webhook")
    monkeypatch.setattr(httpx.AsyncClient, "get", no_network, raising=True)

    resp = client.get("/analyze", params={"ticker": " aapl ", "mock": "true"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["ticker"] == "AAPL"
    assert data["sentiment"]["label"] == "Bullish"
    assert data["chartUrl"].endswith(".png")
    assert [s["key"] for s in data["sections"]][:2] == ["indicators", "levels"]


def test_analyze_wrapped_output(client, monkeypatch):
    upstream(monkeypatch, json=[{"output": "plain text with no headings"}])
    data = client.get("/analyze", params={"ticker": "tsla"}).json()
    assert data["ticker"] == "TSLA"
    assert data["sections"] == [{"key": "analysis", "title": "Analysis", "content": "plain text with no headings"}]
    assert data["metrics"] == []
    assert data["sentiment"]["label"] == "Neutral"


def test_analyze_structured_passthrough(client, monkeypatch):
    upstream(monkeypatch, json={"content": "RSI: 90 with bearish momentum", "chartUrl": "https://example.com/c.png"})
    data = client.get("/analyze", params={"ticker": "msft"}).json()
    assert data["ticker"] == "MSFT"
    assert data["content"] == "RSI: 90 with bearish momentum"
    assert data["metrics"] == []
    assert data["chartUrl"] == "https://example.com/c.png"


def test_blank_ticker_rejected(client):
    resp = client.get("/analyze", params={"ticker": "   "})
    assert resp.status_code == 400
    assert "Ticker is required" in resp.text


def test_upstream_error_status(client, monkeypatch):
    upstream(monkeypatch, status_code=500, text="boom")
    resp = client.get("/analyze", params={"ticker": "AAPL"})
    assert resp.status_code == 502
    assert resp.json()["detail"] == "Error 500: Internal Server Error - boom"


def test_unexpected_payload(client, monkeypatch):
    upstream(monkeypatch, json={"foo": 1})
    resp = client.get("/analyze", params={"ticker": "AAPL"})
    assert resp.status_code == 502
    assert "unexpected format" in resp.json()["detail"]
    assert '{"foo": 1}' in resp.json()["detail"]


def test_network_failure(client, monkeypatch):
    async def fake_get(self, url, params=None, headers=None, **rest):
        raise httpx.ConnectError("connection refused")
    monkeypatch.setattr(httpx.AsyncClient, "get", fake_get, raising=True)
    resp = client.get("/analyze", params={"ticker": "AAPL"})
    assert resp.status_code == 500
    assert "Failed to fetch analysis" in resp.text


def test_report_page(client):
    resp = client.get("/report", params={"ticker": "aapl", "mock": "true"})
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "AAPL" in resp.text
    assert "Indicator Confluence" in resp.text
    assert "Analysis updated: September 22, 2025 14:05" in resp.text


def test_report_page_error(client, monkeypatch):
    upstream(monkeypatch, status_code=404)
    resp = client.get("/report", params={"ticker": "ZZZZ"})
    assert resp.status_code == 502
    assert "Error 404: Not Found" in resp.text


def test_report_plain_text(client):
    resp = client.get("/report", params={"ticker": "aapl", "mock": "true", "format": "text"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text.startswith("=== AAPL Analysis ===")
    assert resp.text.endswith("Analysis updated: September 22, 2025 14:05")


def test_report_unknown_format(client):
    resp = client.get("/report", params={"ticker": "aapl", "mock": "true", "format": "pdf"})
    assert resp.status_code == 422


def test_undecodable_upstream_body(client, monkeypatch):
    upstream(monkeypatch, content=b'"\xff\xfe bad"')
    resp = client.get("/analyze", params={"ticker": "AAPL"})
    assert resp.status_code == 502
    assert "unexpected format" in resp.json()["detail"]
