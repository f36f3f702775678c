"""Tests for the re-indenting formatter and the documentation header."""

from __future__ import annotations

import pytest

from transmute.services.documentor import CodeDocumentor
from transmute.services.formatter import CodeFormatter, indent_width


JS_FLAT = """\
function f(a) {
if (a) {
return [
1,
2
];
}
}"""


class TestFormatter:
    def test_reindents_by_bracket_depth(self):
        out = CodeFormatter().format(JS_FLAT, "JavaScript", "Airbnb")
        assert out == (
            "function f(a) {\n"
            "  if (a) {\n"
            "    return [\n"
            "      1,\n"
            "      2\n"
            "    ];\n"
            "  }\n"
            "}"
        )

    def test_pep8_uses_four_spaces(self):
        out = CodeFormatter().format("x = {\n'a': 1\n}", "Python", "PEP8")
        assert out == "x = {\n    'a': 1\n}"

    def test_idempotent(self):
        formatter = CodeFormatter()
        once = formatter.format(JS_FLAT, "JavaScript", "Standard")
        assert formatter.format(once, "JavaScript", "Standard") == once

    def test_blank_lines_stay_empty(self):
        out = CodeFormatter().format("a {\n   \nb\n}", "CSS", "Standard")
        assert out.split("\n")[1] == ""

    def test_unbalanced_closers_never_go_negative(self):
        out = CodeFormatter().format("}\n}\nx", "JavaScript")
        assert out == "}\n}\nx"

    def test_strips_existing_indentation(self):
        assert CodeFormatter().format("        x = 1", "Python") == "x = 1"

    @pytest.mark.parametrize(
        "guide, width",
        [("PEP8", 4), ("black", 4), ("Airbnb", 2), ("Google", 2), (None, 2), ("Unknown", 2)],
    )
    def test_indent_width(self, guide, width):
        assert indent_width(guide) == width


class TestDocumentor:
    def test_block_comment_by_default(self):
        docs = CodeDocumentor().generate_docs("x", "TypeScript")
        assert docs.startswith("/**")
        assert docs.endswith("*/")
        assert "Automatically generated documentation for TypeScript code." in docs

    def test_python_docstring(self):
        docs = CodeDocumentor().generate_docs("x = 1", "Python")
        assert docs.startswith('"""')
        assert docs.endswith('"""')

    def test_hash_comments(self):
        docs = CodeDocumentor().generate_docs("echo hi", "Bash")
        assert all(line.startswith("# ") for line in docs.split("\n"))

    def test_dash_comments(self):
        docs = CodeDocumentor().generate_docs("SELECT 1", "SQL")
        assert all(line.startswith("-- ") for line in docs.split("\n"))

    def test_markup_comments(self):
        docs = CodeDocumentor().generate_docs("<p/>", "HTML")
        assert docs.startswith("<!--")
        assert docs.endswith("-->")
