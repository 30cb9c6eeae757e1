from __future__ import annotations
import html
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List

from src.core.models import AnalysisSection, Metric, StockAnalysisResponse

Clock = Callable[[], datetime]

COLLAPSE_THRESHOLD = 500
FOOTER_NOTE = "Data reflects sources accessed through market close"

METRIC_BADGE_CLASSES = {
    "bullish": "bg-green-100 text-green-800 border-green-200",
    "bearish": "bg-red-100 text-red-800 border-red-200",
    "neutral": "bg-gray-100 text-gray-800 border-gray-200",
}


@dataclass(frozen=True)
class ContentLine:
    kind: str  # bullet | field | paragraph
    text: str
    label: str = ""


def format_content(content: str) -> List[ContentLine]:
    """Classify each non-blank line of a section body for display."""
    lines = []
    for raw in content.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("-"):
            lines.append(ContentLine("bullet", line[1:].strip()))
        elif ":" in line and "http" not in line:
            label, rest = line.split(":", 1)
            lines.append(ContentLine("field", rest.strip(), label=label))
        else:
            lines.append(ContentLine("paragraph", line))
    return lines


def is_collapsible(section: AnalysisSection) -> bool:
    return len(section.content) > COLLAPSE_THRESHOLD


def metric_badge_class(metric: Metric) -> str:
    return METRIC_BADGE_CLASSES.get(metric.type, METRIC_BADGE_CLASSES["neutral"])


def footer_text(clock: Clock = datetime.now) -> str:
    return "Analysis updated: " + clock().strftime("%B %d, %Y %H:%M")


def make_report(document: StockAnalysisResponse, clock: Clock = datetime.now) -> str:
    lines = [
        f"=== {document.ticker} Analysis ===",
        f"Sentiment: {document.sentiment.label}",
    ]
    if document.metrics:
        lines.append("Metrics: " + ", ".join(f"{m.label} {m.value} ({m.type})" for m in document.metrics))
    if document.chart_url:
        lines.append(f"Chart: {document.chart_url}")
    for section in document.sections:
        lines.append(f"\n--- {section.title} ---")
        for item in format_content(section.content):
            if item.kind == "bullet":
                lines.append(f"  * {item.text}")
            elif item.kind == "field":
                lines.append(f"{item.label}: {item.text}")
            else:
                lines.append(item.text)
    lines.append("")
    lines.append(footer_text(clock))
    return "\n".join(lines)


def _render_lines(content: str) -> str:
    parts = []
    bullets = []
    for item in format_content(content):
        if item.kind == "bullet":
            bullets.append(f'<li class="ml-4 text-gray-300">{html.escape(item.text)}</li>')
            continue
        if bullets:
            parts.append('<ul class="list-disc">' + "".join(bullets) + "</ul>")
            bullets = []
        if item.kind == "field":
            parts.append(
                f'<div class="mt-3 mb-2"><span class="font-semibold text-white">{html.escape(item.label)}:</span>'
                f' <span class="text-gray-300">{html.escape(item.text)}</span></div>'
            )
        else:
            parts.append(f'<p class="text-gray-300 mb-2">{html.escape(item.text)}</p>')
    if bullets:
        parts.append('<ul class="list-disc">' + "".join(bullets) + "</ul>")
    return "\n".join(parts)


def _render_section(section: AnalysisSection, index: int) -> str:
    body = _render_lines(section.content)
    if is_collapsible(section):
        opened = " open" if index == 0 else ""
        body = f"<details{opened}><summary class=\"cursor-pointer font-medium\">View Full Analysis</summary>{body}</details>"
    return (
        f'<section class="card bg-gray-800 rounded-xl p-6 border border-gray-700" data-key="{html.escape(section.key)}">'
        f'<h3 class="text-xl font-semibold text-white mb-4">{html.escape(section.title)}</h3>{body}</section>'
    )


def render_html(document: StockAnalysisResponse, clock: Clock = datetime.now) -> str:
    """Full HTML page for one Document."""
    ticker = html.escape(document.ticker or "STOCK")
    badges = "".join(
        f'<span class="badge border {metric_badge_class(m)}"><b>{html.escape(m.label)}:</b> {html.escape(m.value)}</span>'
        for m in document.metrics
    )
    chart = ""
    if document.chart_url:
        chart = (
            '<div class="card"><h2>Technical Chart</h2>'
            f'<img src="{html.escape(document.chart_url)}" alt="{ticker} chart" '
            "onerror=\"this.style.display='none'\" style=\"max-width:100%\"/></div>"
        )
    sections = "\n".join(_render_section(s, i) for i, s in enumerate(document.sections))
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
        <title>{ticker} | Stock Analysis Assistant</title>
        <script src="https://cdn.tailwindcss.com"></script>
        <style>
            body {{ font-family: Arial, sans-serif; max-width: 980px; margin: 0 auto; padding: 20px; }}
            .card {{ margin-bottom: 16px; }}
            .badge {{ display: inline-block; padding: 2px 10px; margin: 2px; border-radius: 999px; font-size: 13px; }}
        </style>
    </head>
    <body class="bg-gray-900 text-white">
        <header class="card">
            <h1 class="text-3xl font-bold">{ticker}</h1>
            <span class="badge border-2 {html.escape(document.sentiment.color_class)}">{html.escape(document.sentiment.label)}</span>
            <div class="metrics">{badges}</div>
        </header>
        {chart}
        {sections}
        <footer class="card text-center">
            <p class="text-sm text-gray-300">{html.escape(footer_text(clock))}</p>
            <p class="text-xs text-gray-400">{FOOTER_NOTE}</p>
        </footer>
    </body>
    </html>
    """
