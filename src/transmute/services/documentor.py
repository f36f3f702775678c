"""Documentation header generation for migrated code."""

from __future__ import annotations

HASH_COMMENT_LANGUAGES = {
    "Bash", "Ruby", "Perl", "R", "YAML", "Kubernetes YAML", "Docker Compose",
    "Ansible", "Terraform", "PowerShell", "Elixir",
}
DASH_COMMENT_LANGUAGES = {"SQL", "PostgreSQL", "MySQL", "Haskell", "Lua"}
MARKUP_LANGUAGES = {"HTML", "XML", "Markdown", "Vue", "Angular"}
PYTHON_LANGUAGES = {"Python", "Django", "Flask", "FastAPI"}


class CodeDocumentor:
    """Builds a comment block to prepend to generated code."""

    def generate_docs(self, code: str, lang: str) -> str:
        lines = [
            f"Automatically generated documentation for {lang} code.",
            "This module handles core business logic.",
        ]
        if lang in PYTHON_LANGUAGES:
            return '"""\n' + "\n".join(lines) + '\n"""'
        if lang in HASH_COMMENT_LANGUAGES:
            return "\n".join(f"# {line}" for line in lines)
        if lang in DASH_COMMENT_LANGUAGES:
            return "\n".join(f"-- {line}" for line in lines)
        if lang in MARKUP_LANGUAGES:
            return "<!--\n" + "\n".join(f"  {line}" for line in lines) + "\n-->"
        return "/**\n" + "\n".join(f" * {line}" for line in lines) + "\n */"
