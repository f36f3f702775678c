"""Transmute: LLM-backed code migration with local post-processing."""

from transmute._version import __version__
from transmute.core.config import default_settings, load_settings, update_settings
from transmute.core.errors import (
    ConfigurationError,
    GenerationError,
    MigrationError,
    ValidationError,
)
from transmute.generation.client import GenerationClient
from transmute.migration.orchestrator import MigrationOrchestrator

__all__ = [
    "__version__",
    "ConfigurationError",
    "GenerationClient",
    "GenerationError",
    "MigrationError",
    "MigrationOrchestrator",
    "ValidationError",
    "default_settings",
    "load_settings",
    "update_settings",
]
