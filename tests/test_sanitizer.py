import pytest

from src.data.sample_report import SAMPLE_REPORT
from src.extraction.sanitizer import extract_chart_url, extract_ticker, sanitize_content


def test_removes_backticked_chart_declaration():
    raw = "Chart URL: `https://r2.chart-img.com/abc.png`\nBody text follows here"
    assert sanitize_content(raw) == "Body text follows here"


def test_removes_plain_chart_declaration():
    raw = "Intro line\nChart URL: https://r2.chart-img.com/abc.png\nBody"
    assert sanitize_content(raw) == "Intro line\nBody"


def test_removes_standalone_image_line():
    raw = "https://r2.chart-img.com/x/y.png\n\n1) Indicator Confluence"
    assert sanitize_content(raw) == "1) Indicator Confluence"


def test_removes_rule_lines_and_blank_runs():
    raw = "\n\n\nA\n---\n\n\nB  \n-\nC\n"
    assert sanitize_content(raw) == "A\nB  \nC"


def test_crlf_line_endings():
    raw = "Intro paragraph\r\n---\r\nhttps://r2.chart-img.com/x.png\r\n\r\nBody text\r\n"
    clean = sanitize_content(raw)
    assert clean == "Intro paragraph\nBody text"
    assert "---" not in clean
    assert ".png" not in clean
    assert "\r" not in clean


def test_empty_input():
    assert sanitize_content("") == ""
    assert sanitize_content("   \n\n ") == ""


def test_keeps_bullets():
    raw = "- first point\n  - nested point"
    assert sanitize_content(raw) == raw


@pytest.mark.parametrize("text", [
    "  ---\n## 1. Executive Summary\n\n\nStrong quarter.\n- point\n\n---\n",
    "Plain paragraph\n\n\nwith gaps\n   \nand trailing space   ",
    "1) Indicator Confluence:\n- RSI: 66.23\n\n2) Market Context\n- Positive tone",
])
def test_idempotent_without_urls(text):
    once = sanitize_content(text)
    assert sanitize_content(once) == once


def test_sample_report_is_clean():
    clean = sanitize_content(SAMPLE_REPORT)
    assert ".png" not in clean
    assert "\n\n" not in clean
    assert clean.startswith("1) Indicator Confluence")
    assert clean.endswith("Sep 22, 2025.")


def test_extract_chart_url():
    assert extract_chart_url(SAMPLE_REPORT).startswith("https://r2.chart-img.com/")
    assert extract_chart_url(SAMPLE_REPORT).endswith(".png")
    assert extract_chart_url("Chart URL: `https://example.com/c.png`") == "https://example.com/c.png"
    assert extract_chart_url("no chart here") is None


def test_extract_ticker():
    assert extract_ticker("Ticker for searches: msft\nmore") == "MSFT"
    assert extract_ticker("Ticker for search: TSLA") == "TSLA"
    assert extract_ticker("nothing declared") is None
