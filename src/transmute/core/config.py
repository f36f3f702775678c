"""Configuration management for Transmute (transmute.toml parsing + defaults)."""

from __future__ import annotations

import dataclasses
import enum
from pathlib import Path
from typing import Any

from transmute.core.errors import ValidationError
from transmute.core.models import (
    AIModelConfig,
    AIProvider,
    ExternalService,
    MigrationSettings,
    MigrationStrategy,
)

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]


CONFIG_FILENAME = "transmute.toml"
API_KEY_ENV_VARS = ("ANTHROPIC_API_KEY", "TRANSMUTE_API_KEY")

_AI_FIELDS = {f.name for f in dataclasses.fields(AIModelConfig)}
_SETTINGS_FIELDS = {f.name for f in dataclasses.fields(MigrationSettings)} - {"ai_config"}

_ENUM_FIELDS: dict[str, type[enum.Enum]] = {
    "provider": AIProvider,
    "migration_strategy": MigrationStrategy,
    "target_vcs_integration": ExternalService,
    "target_ci_integration": ExternalService,
    "target_cloud_platform": ExternalService,
    "code_reviewer_ai": AIProvider,
}


def default_settings() -> MigrationSettings:
    """Session-start defaults."""
    return MigrationSettings()


def coerce_enum(enum_cls: type[enum.Enum], raw: Any) -> enum.Enum | None:
    """Accept an enum member, its value, or its name (case-insensitive)."""
    if raw is None or isinstance(raw, enum_cls):
        return raw
    text = str(raw).strip()
    for member in enum_cls:
        if text == member.value or text.lower() == member.value.lower() or text.upper() == member.name:
            return member
    choices = ", ".join(m.value for m in enum_cls)
    raise ValidationError(f"Unknown {enum_cls.__name__} '{raw}'. Expected one of: {choices}")


def _coerce_fields(changes: dict[str, Any]) -> dict[str, Any]:
    coerced = dict(changes)
    for key, value in changes.items():
        if key in _ENUM_FIELDS:
            coerced[key] = coerce_enum(_ENUM_FIELDS[key], value)
    return coerced


def update_ai_config(settings: MigrationSettings, **changes: Any) -> MigrationSettings:
    """Return a copy of ``settings`` with AI model fields replaced."""
    unknown = set(changes) - _AI_FIELDS
    if unknown:
        raise ValidationError(f"Unknown AI setting(s): {', '.join(sorted(unknown))}")
    ai_config = dataclasses.replace(settings.ai_config, **_coerce_fields(changes))
    updated = dataclasses.replace(settings, ai_config=ai_config)
    updated.validate()
    return updated


def update_settings(settings: MigrationSettings, **changes: Any) -> MigrationSettings:
    """Return a validated copy of ``settings`` with ``changes`` applied.

    Keys prefixed with ``ai_config.`` (or passed as an ``ai_config`` dict)
    are routed to the nested :class:`AIModelConfig`.
    """
    ai_changes: dict[str, Any] = {}
    top_changes: dict[str, Any] = {}

    for key, value in changes.items():
        if key == "ai_config" and isinstance(value, dict):
            ai_changes.update(value)
        elif key.startswith("ai_config."):
            ai_changes[key.split(".", 1)[1]] = value
        else:
            top_changes[key] = value

    unknown = set(top_changes) - _SETTINGS_FIELDS - {"ai_config"}
    if unknown:
        raise ValidationError(f"Unknown setting(s): {', '.join(sorted(unknown))}")

    updated = dataclasses.replace(settings, **_coerce_fields(top_changes))
    if ai_changes:
        return update_ai_config(updated, **ai_changes)
    updated.validate()
    return updated


def parse_setting_value(key: str, raw: str) -> Any:
    """Convert a string typed at the prompt into the field's Python type."""
    name = key.split(".", 1)[1] if key.startswith("ai_config.") else key
    if name in _ENUM_FIELDS:
        return None if raw.lower() in ("none", "") else raw

    if key.startswith("ai_config."):
        current = getattr(AIModelConfig(), name, None)
    else:
        current = getattr(MigrationSettings(), name, None)

    lowered = raw.strip().lower()
    if isinstance(current, bool):
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
        raise ValidationError(f"Expected a boolean for '{key}', got '{raw}'")
    if lowered == "none":
        return None
    if isinstance(current, int) or name in ("complexity_threshold",):
        try:
            return int(raw)
        except ValueError:
            raise ValidationError(f"Expected an integer for '{key}', got '{raw}'") from None
    if isinstance(current, float) or name in ("cost_limit_usd",):
        try:
            return float(raw)
        except ValueError:
            raise ValidationError(f"Expected a number for '{key}', got '{raw}'") from None
    return raw


def load_settings(project_path: Path | None = None) -> MigrationSettings:
    """Load settings from transmute.toml if present, otherwise return defaults.

    Recognised tables::

        [ai]         provider, model_name, temperature, max_tokens, top_p,
                     cost_per_token_input, cost_per_token_output,
                     max_retries, timeout_ms
        [workflow]   the boolean toggles
        [migration]  strategy, style_guide, cost_limit_usd,
                     complexity_threshold, custom_prompt
    """
    settings = default_settings()

    if project_path is None:
        project_path = Path.cwd()

    config_file = project_path / CONFIG_FILENAME
    if not config_file.exists():
        return settings

    with open(config_file, "rb") as f:
        data = tomllib.load(f)

    changes: dict[str, Any] = {}

    if "ai" in data:
        ai = data["ai"]
        changes["ai_config"] = {k: v for k, v in ai.items() if k in _AI_FIELDS}

    if "workflow" in data:
        wf = data["workflow"]
        for attr in (
            "enable_auto_format",
            "enable_lint_fix",
            "enable_security_scan",
            "enable_performance_opt",
            "enable_diff_view",
            "enable_contextual_analysis",
            "post_migration_testing",
            "generate_documentation",
        ):
            if attr in wf:
                changes[attr] = bool(wf[attr])

    if "migration" in data:
        m = data["migration"]
        if "strategy" in m:
            changes["migration_strategy"] = m["strategy"]
        if "style_guide" in m:
            changes["code_style_guide"] = m["style_guide"]
        if "cost_limit_usd" in m:
            changes["cost_limit_usd"] = float(m["cost_limit_usd"])
        if "complexity_threshold" in m:
            changes["complexity_threshold"] = int(m["complexity_threshold"])
        if "custom_prompt" in m:
            changes["custom_prompt_append"] = m["custom_prompt"]
        for attr in ("target_vcs_integration", "target_ci_integration", "target_cloud_platform", "code_reviewer_ai"):
            if attr in m:
                changes[attr] = m[attr]

    return update_settings(settings, **changes)
