from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, PlainTextResponse
from dataclasses import replace
from datetime import datetime
import logging
import httpx

from src.core.config import Settings, get_settings
from src.core.errors import AnalysisError
from src.core.models import StockAnalysisResponse
from src.core.pipeline import analyze_ticker
from src.core.report import Clock, make_report, render_html
from src.core.utils import configure_logging, normalize_ticker

configure_logging(get_settings().log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Stock Analysis Assistant")


def get_clock() -> Clock:
    return datetime.now


async def run_analysis(ticker: str, mock: bool, settings: Settings) -> StockAnalysisResponse:
    """Shared by the JSON and HTML routes: validate input, fetch, map failures to HTTP errors."""
    symbol = normalize_ticker(ticker)
    if not symbol:
        raise HTTPException(400, "Ticker is required")
    if mock:
        settings = replace(settings, use_mock_data=True)
    try:
        return await analyze_ticker(symbol, settings)
    except AnalysisError as e:
        logger.error("Analysis failed for %s: %s", symbol, e)
        raise HTTPException(502, str(e))
    except httpx.HTTPError as e:
        logger.error("Analysis webhook unreachable for %s: %s", symbol, e)
        raise HTTPException(500, f"Failed to fetch analysis: {str(e)}")


@app.get("/", response_class=HTMLResponse)
async def home():
    """Search page; the form posts to /report."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Stock Analysis Assistant</title>
        <style>
            body { font-family: Arial, sans-serif; max-width: 980px; margin: 0 auto; padding: 20px; }
            .form-group { margin: 20px 0; display: flex; gap: 8px; align-items: center; }
            input[type="text"] { padding: 10px; font-size: 16px; width: 260px; }
            button { padding: 10px 16px; font-size: 14px; background: #007cba; color: white; border: none; cursor: pointer; border-radius: 4px; }
            button:disabled { background: #9ca3af; cursor: not-allowed; }
            .muted { color: #666; }
        </style>
    </head>
    <body>
        <h1>Stock Analysis Assistant</h1>
        <form action="/report" method="get" onsubmit="return busy()">
            <div class="form-group">
                <input type="text" id="ticker" name="ticker" placeholder="Symbol or company" required />
                <label class="muted"><input type="checkbox" name="mock" value="true" /> Demo mode</label>
                <button id="search" type="submit">Search</button>
            </div>
        </form>
        <p class="muted">Try AAPL, TSLA, BTC... The analysis may take a few moments to complete.</p>
        <script>
            function busy() {
                const input = document.getElementById('ticker');
                input.value = input.value.trim().toUpperCase();
                if (!input.value) return false;
                const btn = document.getElementById('search');
                btn.disabled = true;
                btn.textContent = 'Analyzing...';
                return true;
            }
        </script>
    </body>
    </html>
    """


@app.get("/analyze")
async def analyze_stock(
    ticker: str = Query(..., description="Stock ticker symbol"),
    mock: bool = Query(False, description="Serve the bundled sample report"),
    settings: Settings = Depends(get_settings),
):
    """Structured analysis document for ticker"""
    document = await run_analysis(ticker, mock, settings)
    return document.to_payload()


@app.get("/report", response_class=HTMLResponse)
async def analysis_report(
    ticker: str = Query(..., description="Stock ticker symbol"),
    mock: bool = Query(False, description="Serve the bundled sample report"),
    format: str = Query("html", pattern="^(html|text)$", description="html page or plain-text report"),
    settings: Settings = Depends(get_settings),
    clock: Clock = Depends(get_clock),
):
    """Rendered analysis page for ticker"""
    document = await run_analysis(ticker, mock, settings)
    if format == "text":
        return PlainTextResponse(make_report(document, clock))
    return HTMLResponse(render_html(document, clock))


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "healthy", "service": "stock_analyzer"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
