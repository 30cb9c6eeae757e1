import asyncio
from dataclasses import replace
import httpx
import streamlit as st

from src.core.config import get_settings
from src.core.errors import AnalysisError
from src.core.pipeline import analyze_ticker
from src.core.report import footer_text, format_content, is_collapsible, make_report, FOOTER_NOTE
from src.core.utils import configure_logging, normalize_ticker

st.set_page_config(page_title="Stock Analyzer", layout="wide")
configure_logging(get_settings().log_level)

SENTIMENT_ICONS = {"Bullish": "🟢", "Bearish": "🔴", "Neutral": "⚪"}
METRIC_ICONS = {"bullish": "🟢", "bearish": "🔴", "neutral": "⚪"}


def _write_content(content: str):
    for item in format_content(content):
        if item.kind == "bullet":
            st.markdown(f"- {item.text}")
        elif item.kind == "field":
            st.markdown(f"**{item.label}:** {item.text}")
        else:
            st.write(item.text)


def _render(document):
    col1, col2 = st.columns([3, 1])
    with col1:
        st.title(document.ticker or "STOCK")
    with col2:
        label = document.sentiment.label
        st.subheader(f"{SENTIMENT_ICONS.get(label, '')} {label}")

    if document.metrics:
        cols = st.columns(len(document.metrics))
        for col, metric in zip(cols, document.metrics):
            col.metric(f"{METRIC_ICONS.get(metric.type, '')} {metric.label}", metric.value)

    if document.chart_url:
        st.subheader("Technical Chart")
        st.image(document.chart_url, caption=f"{document.ticker} chart")

    for index, section in enumerate(document.sections):
        st.subheader(section.title)
        if is_collapsible(section):
            with st.expander("View Full Analysis", expanded=(index == 0)):
                _write_content(section.content)
        else:
            _write_content(section.content)

    st.divider()
    st.caption(footer_text())
    st.caption(FOOTER_NOTE)
    st.download_button(
        "Download report",
        data=make_report(document),
        file_name=f"{document.ticker.lower()}_analysis.txt",
        mime="text/plain",
    )


st.sidebar.header("Settings")
demo_mode = st.sidebar.toggle("Demo mode", value=False)

with st.form("search"):
    ticker = st.text_input("Symbol or company", placeholder="AAPL")
    submitted = st.form_submit_button("Search")
st.caption("Try AAPL, TSLA, BTC... The analysis may take a few moments to complete.")

if submitted:
    symbol = normalize_ticker(ticker)
    if not symbol:
        st.info("Enter a ticker to analyze.")
    else:
        settings = get_settings()
        if demo_mode:
            settings = replace(settings, use_mock_data=True)
        try:
            with st.spinner("Analyzing..."):
                st.session_state["document"] = asyncio.run(analyze_ticker(symbol, settings))
        except AnalysisError as e:
            st.error(f"Could not fetch the analysis: {e}")
        except httpx.HTTPError as e:
            st.error(f"Could not reach the analysis service: {e}")

if st.session_state.get("document") is not None:
    _render(st.session_state["document"])
