"""Keyword-scoring language detection."""

from __future__ import annotations

from transmute.core.languages import DEFAULT_LANGUAGE

# Order matters: on equal scores the earlier language wins.
KNOWN_KEYWORDS: dict[str, list[str]] = {
    "TypeScript": ["interface", "type", "const", "let", "async", "import", "export", "tsx"],
    "JavaScript": ["var", "function", "const", "let", "async", "import", "export"],
    "Python": ["def", "class", "import", "from", "if __name__"],
    "Go": ["package", "import", "func", "var", "type", "struct"],
    "React": ["import React", "useState", "useEffect", "<div", "className"],
    "CSS": ["{", "}", ":", ";", "body", ".class", "#id", "@media"],
}


def score_languages(code: str) -> dict[str, int]:
    """Return one point per keyword marker present in ``code``, per language."""
    return {
        lang: sum(1 for keyword in keywords if keyword in code)
        for lang, keywords in KNOWN_KEYWORDS.items()
    }


def detect_language(code: str) -> str:
    """Best-effort guess of the language of ``code``.

    Advisory only. Falls back to JavaScript when no marker matches.
    """
    max_score = 0
    detected = None
    for lang, score in score_languages(code).items():
        if score > max_score:
            max_score = score
            detected = lang
    return detected or DEFAULT_LANGUAGE
