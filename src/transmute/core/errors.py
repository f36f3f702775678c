"""Exception hierarchy for migration runs."""

from __future__ import annotations


class TransmuteError(Exception):
    """Base class for all Transmute errors."""


class MigrationError(TransmuteError):
    """A migration run failed and committed nothing."""


class ValidationError(MigrationError):
    """Input or settings were rejected before any external call."""


class ConfigurationError(MigrationError):
    """The generation backend is not configured (e.g. missing API key)."""


class GenerationError(MigrationError):
    """The LLM provider call failed.

    ``upstream`` keeps the provider's own message so it can be shown
    verbatim to the user.
    """

    def __init__(self, message: str, upstream: str = ""):
        super().__init__(message)
        self.upstream = upstream or message


class MigrationInProgressError(MigrationError):
    """A second run was requested while one is still in flight."""


class MigrationCancelledError(MigrationError):
    """The active run was cancelled before it completed."""
