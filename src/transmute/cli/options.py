"""Shared click options that map onto MigrationSettings fields."""

from __future__ import annotations

from typing import Any, Callable

import click

from transmute.core.config import update_settings
from transmute.core.languages import resolve_language
from transmute.core.models import MigrationSettings, MigrationStrategy

# flag name -> MigrationSettings field
TOGGLES = {
    "format": "enable_auto_format",
    "lint_fix": "enable_lint_fix",
    "security": "enable_security_scan",
    "performance": "enable_performance_opt",
    "diff": "enable_diff_view",
    "context": "enable_contextual_analysis",
    "test": "post_migration_testing",
    "docs": "generate_documentation",
}


def settings_options(fn: Callable) -> Callable:
    """Attach the model and workflow options to a command."""
    options = [
        click.option("--model", "model_name", help="Model identifier sent to the provider"),
        click.option("--temperature", type=click.FloatRange(0.0, 2.0), help="Sampling temperature"),
        click.option("--max-tokens", type=click.IntRange(min=1), help="Maximum output tokens"),
        click.option("--top-p", type=click.FloatRange(0.0, 1.0), help="Nucleus sampling"),
        click.option(
            "--strategy",
            type=click.Choice([s.value for s in MigrationStrategy]),
            help="Migration strategy",
        ),
        click.option("--style-guide", help="Code style guide (e.g. Airbnb, PEP8)"),
        click.option("--prompt-append", help="Extra instructions appended to the prompt"),
        click.option("--cost-limit", type=click.FloatRange(min=0.0), help="Warn above this USD estimate"),
        click.option("--format/--no-format", "format", default=None, help="Re-indent the output"),
        click.option("--lint-fix/--no-lint-fix", "lint_fix", default=None, help="Record the lint-fix preference"),
        click.option("--security/--no-security", "security", default=None, help="Scan the output for security issues"),
        click.option("--performance/--no-performance", "performance", default=None, help="Report loop efficiency"),
        click.option("--diff/--no-diff", "diff", default=None, help="Show a diff of input and output"),
        click.option("--context/--no-context", "context", default=None, help="Add project context to the prompt"),
        click.option("--test/--no-test", "test", default=None, help="Run post-migration tests"),
        click.option("--docs/--no-docs", "docs", default=None, help="Prepend a documentation block"),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def apply_options(settings: MigrationSettings, options: dict[str, Any]) -> MigrationSettings:
    """Return ``settings`` with every option the user actually passed applied."""
    changes: dict[str, Any] = {}

    for key in ("model_name", "temperature", "max_tokens", "top_p"):
        if options.get(key) is not None:
            changes[f"ai_config.{key}"] = options[key]

    if options.get("strategy"):
        changes["migration_strategy"] = options["strategy"]
    if options.get("style_guide"):
        changes["code_style_guide"] = options["style_guide"]
    if options.get("prompt_append"):
        changes["custom_prompt_append"] = options["prompt_append"]
    if options.get("cost_limit") is not None:
        changes["cost_limit_usd"] = options["cost_limit"]

    for flag, field_name in TOGGLES.items():
        if options.get(flag) is not None:
            changes[field_name] = options[flag]

    if not changes:
        return settings
    return update_settings(settings, **changes)


def language_argument(value: str | None) -> str | None:
    """Normalise a user-typed language label, or fail with a usage error."""
    if value is None:
        return None
    try:
        return resolve_language(value)
    except KeyError:
        raise click.BadParameter(
            f"'{value}' is not a supported language. Run `transmute languages` to list them."
        ) from None
