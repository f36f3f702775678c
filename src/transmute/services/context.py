"""Project context used to enrich the migration prompt."""

from __future__ import annotations

DEFAULT_REPOSITORY = "repo"
DEFAULT_BRANCH = "main"
DEFAULT_PATH = "src"


class ProjectContextAnalyzer:
    """Placeholder analyzer: returns a fixed description of the project."""

    def analyze_project(self, repository: str, branch: str, path: str) -> str:
        return "Project uses React 18, TailwindCSS, and TypeScript."
