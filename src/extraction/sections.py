from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from src.core.models import AnalysisSection

MIN_SECTION_CHARS = 20
FALLBACK_KEY = "analysis"
FALLBACK_TITLE = "Analysis"

# "## Heading", "### 2. Heading", "#3 Heading"
_MARKDOWN_HEADING = r"#{1,6}\s*(?:\d+\.?\s*)?"
# Body boundaries only count at the start of a line
_NUMBERED_MARKDOWN_BOUNDARY = r"\n[ \t]*#{1,6}\s*\d+\."
_ENUMERATED_BOUNDARY = r"\n[ \t]*\d+\)"


@dataclass(frozen=True)
class SectionRule:
    """One catalog entry: which headings open the section and how it is shown.

    heading: phrase accepted after a markdown heading marker
    plain: phrase accepted anywhere as a plain-text heading
    enumerated: also accept "N) heading" and stop the body at the next "N)"
    """

    key: str
    title: str
    heading: str
    plain: Optional[str] = None
    enumerated: bool = False
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        openers = [_MARKDOWN_HEADING + re.escape(self.heading)]
        boundaries = [_NUMBERED_MARKDOWN_BOUNDARY]
        if self.plain:
            openers.append(re.escape(self.plain))
        if self.enumerated:
            openers.append(r"\d+\)\s*" + re.escape(self.heading))
            boundaries.append(_ENUMERATED_BOUNDARY)
        regex = rf"(?:{'|'.join(openers)})(.*?)(?={'|'.join(boundaries)}|\Z)"
        object.__setattr__(self, "pattern", re.compile(regex, re.IGNORECASE | re.DOTALL))

    def match(self, text: str) -> Optional[AnalysisSection]:
        m = self.pattern.search(text)
        if not m:
            return None
        body = m.group(1).strip()
        if len(body) <= MIN_SECTION_CHARS:
            return None
        return AnalysisSection(key=self.key, title=self.title, content=body)


# Catalog order is display order. Technical Analysis and Indicator Confluence
# lead regardless of where they appear in the report.
SECTION_CATALOG: Tuple[SectionRule, ...] = (
    SectionRule("technical", "Technical Analysis Deep Dive", "Technical Analysis", plain="Technical Analysis Deep Dive"),
    SectionRule("indicators", "Indicator Confluence", "Indicator Confluence", enumerated=True),
    SectionRule("executive", "Executive Summary", "Executive Summary", plain="Executive Summary"),
    SectionRule("snapshot", "Financial Snapshot", "Financial Snapshot", plain="Financial Snapshot"),
    SectionRule("levels", "Critical Levels", "Critical Levels", plain="Critical Levels"),
    SectionRule("outlook", "Technical Outlook", "Technical Outlook", plain="Technical Outlook"),
    SectionRule("market", "Market Context & Sentiment", "Market Context", plain="Market Context & Sentiment", enumerated=True),
    SectionRule("thesis", "Integrated Investment Thesis", "Integrated Investment Thesis", enumerated=True),
    SectionRule("summary", "Summary", "Summary", plain="Summary"),
)


def fallback_section(content: str) -> AnalysisSection:
    return AnalysisSection(key=FALLBACK_KEY, title=FALLBACK_TITLE, content=content)


def extract_sections(text: str, catalog: Tuple[SectionRule, ...] = SECTION_CATALOG) -> List[AnalysisSection]:
    """
    Apply every catalog rule to the full text, in catalog order.

    Rules are independent, so one stretch of text can feed several sections
    (e.g. "Executive Summary" also satisfies the "Summary" rule). When nothing
    matches, the whole text becomes a single generic section.
    """
    sections = []
    for rule in catalog:
        section = rule.match(text)
        if section is not None:
            sections.append(section)
    if not sections:
        sections.append(fallback_section(text))
    return sections
