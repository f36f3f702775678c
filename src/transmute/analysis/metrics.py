"""Descriptive code metrics.

Line, comment and blank counts come from scanning the text. The complexity,
maintainability and readability scores are placeholders drawn at random
within fixed ranges; they do not reflect the code's structure and the report
is flagged with ``placeholder_scores=True``.
"""

from __future__ import annotations

import random

from transmute.core.models import CodeAnalysisReport

COMMENT_MARKERS = ("//", "#")

COMPLEXITY_RANGE = (1, 10)
MAINTAINABILITY_RANGE = (60, 99)
READABILITY_RANGE = (70, 99)


def count_lines(code: str) -> tuple[int, int, int]:
    """Return ``(total, comment, blank)`` line counts."""
    lines = code.split("\n")
    comment = sum(1 for line in lines if line.strip().startswith(COMMENT_MARKERS))
    blank = sum(1 for line in lines if not line.strip())
    return len(lines), comment, blank


class CodeMetricsAnalyzer:
    """Produces a fresh :class:`CodeAnalysisReport` for a code sample."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def analyze(self, code: str, lang: str) -> CodeAnalysisReport:
        total, comment, blank = count_lines(code)
        return CodeAnalysisReport(
            language_detected=lang,
            lines_of_code=total,
            comment_lines=comment,
            blank_lines=blank,
            cyclomatic_complexity=self.rng.randint(*COMPLEXITY_RANGE),
            maintainability_index=self.rng.randint(*MAINTAINABILITY_RANGE),
            readability_score=self.rng.randint(*READABILITY_RANGE),
            placeholder_scores=True,
        )
