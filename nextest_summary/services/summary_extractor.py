from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from nextest_summary.domain.errors import AmbiguousSummary, NoSummaryFound
from nextest_summary.repositories.report_repository import ReportRepository

# A line of 10+ dashes, then an indented "Summary" heading. Group 1 is the heading.
BOUNDARY_PATTERN = re.compile(r"\n-{10,}\r?\n([ \t]+Summary)\b")


def find_summary(text: str, source: Path) -> str:
    """
    Returns the text from the Summary heading line to the end, untrimmed.

    The first (leftmost) boundary wins. The remainder is then searched again:
    a second boundary means the file holds more than one run's report.
    """
    match = BOUNDARY_PATTERN.search(text)
    if match is None:
        raise NoSummaryFound(source)

    summary = text[match.start(1):]
    if BOUNDARY_PATTERN.search(summary):
        raise AmbiguousSummary(source)
    return summary


@dataclass
class SummaryExtractor:
    """
    Service layer: load one report and cut out its Summary section.
    """
    repo: ReportRepository = field(default_factory=ReportRepository)

    def extract(self, path: Path) -> str:
        text = self.repo.read_text(Path(path))
        return find_summary(text, Path(path))

    def extract_text(self, text: str, source: Path) -> str:
        return find_summary(text, Path(source))
