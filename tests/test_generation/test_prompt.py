"""Tests for prompt rendering and fenced-code extraction."""

from __future__ import annotations

from transmute.core.config import update_settings
from transmute.core.models import MigrationSettings
from transmute.generation.prompt import build_prompt, extract_code_block


class TestBuildPrompt:
    def test_contains_languages_and_code(self):
        prompt = build_prompt("var x = 1;", "JavaScript", "Python", MigrationSettings())

        assert "Task: Migrate the following JavaScript code to Python." in prompt
        assert "```JavaScript\nvar x = 1;\n```" in prompt
        assert "- Use modern Python idioms." in prompt
        assert "Code Style: Airbnb" in prompt
        assert "Strategy: direct" in prompt

    def test_deterministic(self):
        settings = MigrationSettings()
        first = build_prompt("a", "Go", "Rust", settings, "ctx")
        assert first == build_prompt("a", "Go", "Rust", settings, "ctx")

    def test_context_is_included(self):
        prompt = build_prompt("a", "Go", "Rust", MigrationSettings(), "Project uses Tokio.")
        assert "Project Context: Project uses Tokio." in prompt

    def test_custom_append_follows_instructions(self):
        settings = update_settings(MigrationSettings(), custom_prompt_append="Prefer iterators.")
        prompt = build_prompt("a", "Go", "Rust", settings)

        assert "Prefer iterators." in prompt
        assert prompt.index("Return ONLY the code") < prompt.index("Prefer iterators.")
        assert prompt.index("Prefer iterators.") < prompt.index("Input Code:")

    def test_missing_style_guide_renders_empty(self):
        settings = update_settings(MigrationSettings(), code_style_guide=None)
        assert "Code Style: \n" in build_prompt("a", "Go", "Rust", settings)


class TestExtractCodeBlock:
    def test_fenced_with_language_tag(self):
        assert extract_code_block("```python\nx = 1\n```") == "x = 1"

    def test_fenced_with_surrounding_prose(self):
        text = "Here you go:\n```go\nfunc main() {}\n```\nLet me know if you need more."
        assert extract_code_block(text) == "func main() {}"

    def test_first_block_wins(self):
        text = "```js\nfirst\n```\n```js\nsecond\n```"
        assert extract_code_block(text) == "first"

    def test_untagged_fence(self):
        assert extract_code_block("```\n  body  \n```") == "body"

    def test_no_fence_returns_text_unchanged(self):
        assert extract_code_block("  x = 1  ") == "  x = 1  "
