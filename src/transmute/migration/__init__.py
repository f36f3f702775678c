"""The migration request pipeline and its session history."""

from transmute.migration.history import MigrationHistory
from transmute.migration.orchestrator import MigrationOrchestrator

__all__ = ["MigrationHistory", "MigrationOrchestrator"]
