"""Tests for line counting and the placeholder metrics report."""

from __future__ import annotations

import random

from transmute.analysis.metrics import (
    COMPLEXITY_RANGE,
    MAINTAINABILITY_RANGE,
    READABILITY_RANGE,
    CodeMetricsAnalyzer,
    count_lines,
)


SAMPLE = """\
// header
const a = 1;

# not really js
const b = 2;
"""


class TestCountLines:
    def test_counts(self):
        total, comment, blank = count_lines(SAMPLE)
        # trailing newline produces a final empty line
        assert total == 6
        assert comment == 2
        assert blank == 2

    def test_empty_code_is_one_blank_line(self):
        assert count_lines("") == (1, 0, 1)

    def test_indented_comment(self):
        assert count_lines("    // note") == (1, 1, 0)


class TestCodeMetricsAnalyzer:
    def test_scores_within_ranges(self):
        analyzer = CodeMetricsAnalyzer(rng=random.Random(7))
        for _ in range(50):
            report = analyzer.analyze(SAMPLE, "JavaScript")
            assert COMPLEXITY_RANGE[0] <= report.cyclomatic_complexity <= COMPLEXITY_RANGE[1]
            assert MAINTAINABILITY_RANGE[0] <= report.maintainability_index <= MAINTAINABILITY_RANGE[1]
            assert READABILITY_RANGE[0] <= report.readability_score <= READABILITY_RANGE[1]

    def test_report_fields(self):
        report = CodeMetricsAnalyzer().analyze(SAMPLE, "JavaScript")

        assert report.language_detected == "JavaScript"
        assert report.lines_of_code == 6
        assert report.comment_lines == 2
        assert report.blank_lines == 2
        assert report.placeholder_scores is True
        assert report.potential_security_issues == []

    def test_seeded_rng_is_repeatable(self):
        first = CodeMetricsAnalyzer(rng=random.Random(1)).analyze("x", "Python")
        second = CodeMetricsAnalyzer(rng=random.Random(1)).analyze("x", "Python")
        assert first.cyclomatic_complexity == second.cyclomatic_complexity
        assert first.readability_score == second.readability_score

    def test_each_call_returns_fresh_report(self):
        analyzer = CodeMetricsAnalyzer()
        first = analyzer.analyze("x", "Python")
        first.potential_security_issues.append("marker")  # type: ignore[arg-type]
        assert analyzer.analyze("x", "Python").potential_security_issues == []
