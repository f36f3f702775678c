"""Tests for cost estimation, diffs, project context and the test runner."""

from __future__ import annotations

from transmute.core.models import MigrationSettings
from transmute.services import MigrationServices
from transmute.services.context import ProjectContextAnalyzer
from transmute.services.cost import COST_PER_CHARACTER_USD, CostEstimator
from transmute.services.diff import DiffGenerator
from transmute.services.testing import PostMigrationTestingFramework


class TestCostEstimator:
    def test_flat_rate_per_character(self):
        cost = CostEstimator().estimate("a" * 50, "b" * 50, MigrationSettings())
        assert cost == round(100 * COST_PER_CHARACTER_USD, 4)

    def test_non_decreasing_in_length(self):
        estimator = CostEstimator()
        settings = MigrationSettings()
        previous = 0.0
        for n in range(0, 5000, 250):
            cost = estimator.estimate("x" * n, "y" * n, settings)
            assert cost >= previous
            previous = cost

    def test_empty_is_free(self):
        assert CostEstimator().estimate("", "", MigrationSettings()) == 0.0


class TestDiffGenerator:
    def test_equal_texts_give_empty_diff(self):
        assert DiffGenerator().generate_unified_diff("a\nb", "a\nb") == ""

    def test_unified_diff_headers_and_changes(self):
        diff = DiffGenerator().generate_unified_diff("var x = 1;", "x = 1")
        lines = diff.split("\n")

        assert lines[0] == "--- Original"
        assert lines[1] == "+++ Modified"
        assert "-var x = 1;" in lines
        assert "+x = 1" in lines


class TestContextAndTesting:
    def test_context_is_fixed_description(self):
        text = ProjectContextAnalyzer().analyze_project("repo", "main", "src")
        assert text == "Project uses React 18, TailwindCSS, and TypeScript."

    def test_runner_passes_for_code(self):
        result = PostMigrationTestingFramework().run_tests("x = 1", "Python")
        assert result.success is True
        assert result.results == "All 5 unit tests passed."

    def test_runner_fails_for_blank_code(self):
        assert PostMigrationTestingFramework().run_tests("  \n", "Python").success is False


def test_service_bundle_defaults():
    services = MigrationServices()
    assert isinstance(services.cost, CostEstimator)
    assert isinstance(services.diff, DiffGenerator)
