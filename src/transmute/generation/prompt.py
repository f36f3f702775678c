"""Prompt assembly and code-fence extraction."""

from __future__ import annotations

import re

from transmute.core.models import MigrationSettings

_FENCE = re.compile(r"```(?:\w+)?\n([\s\S]+?)```")

INSTRUCTIONS = [
    "Maintain all logic and functionality.",
    "Use modern {to_lang} idioms.",
    "Return ONLY the code, inside a markdown block.",
]


def build_prompt(
    input_code: str,
    from_lang: str,
    to_lang: str,
    settings: MigrationSettings,
    context: str = "",
) -> str:
    """Render the migration prompt. Same inputs always give the same text."""
    lines = [
        "You are a world-class code migration expert.",
        f"Task: Migrate the following {from_lang} code to {to_lang}.",
        "",
        f"Project Context: {context}",
        "",
        f"Code Style: {settings.code_style_guide or ''}",
        f"Strategy: {settings.migration_strategy.value}",
        "Instructions:",
    ]
    lines.extend(f"- {item.format(to_lang=to_lang)}" for item in INSTRUCTIONS)
    if settings.custom_prompt_append:
        lines.append(settings.custom_prompt_append)
    lines.extend([
        "",
        "Input Code:",
        f"```{from_lang}",
        input_code,
        "```",
    ])
    return "\n".join(lines)


def extract_code_block(text: str) -> str:
    """Return the trimmed body of the first fenced block, else ``text`` as-is."""
    match = _FENCE.search(text)
    if match:
        return match.group(1).strip()
    return text
