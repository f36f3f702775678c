"""Loop-nesting heuristic for performance insights."""

from __future__ import annotations

import re

from transmute.core.models import MigrationSettings, PerformanceAnalysisResult

_LOOP = re.compile(r"^\s*(for|while|foreach|loop)\b|\.(forEach|map|filter|reduce)\s*\(")


def max_loop_depth(code: str) -> int:
    """Deepest loop nesting, judged by indentation only."""
    stack: list[int] = []
    deepest = 0
    for line in code.split("\n"):
        if not line.strip():
            continue
        indent = len(line) - len(line.lstrip())
        while stack and stack[-1] >= indent:
            stack.pop()
        if _LOOP.search(line):
            stack.append(indent)
            deepest = max(deepest, len(stack))
    return deepest


class PerformanceOptimizer:
    def analyze_and_suggest(
        self, code: str, lang: str, settings: MigrationSettings
    ) -> list[PerformanceAnalysisResult]:
        if not settings.enable_performance_opt:
            return []

        depth = max_loop_depth(code)
        if depth <= 1:
            return [PerformanceAnalysisResult(
                metric="Loop Efficiency",
                value="O(n)" if depth else "O(1)",
                status="optimal",
                recommendation="No changes needed.",
            )]
        return [PerformanceAnalysisResult(
            metric="Loop Efficiency",
            value=f"O(n^{depth})",
            status="critical" if depth >= 3 else "warning",
            threshold=1,
            unit="nesting depth",
            recommendation="Replace nested iteration with a lookup table or a single pass.",
        )]
