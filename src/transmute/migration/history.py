"""Session-scoped migration history."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from transmute.core.models import MigrationHistoryEntry, MigrationStatus


class MigrationHistory:
    """Append-only, most-recent-first sequence of completed runs.

    Entries are never removed or replaced within a session.
    """

    def __init__(self) -> None:
        self._entries: list[MigrationHistoryEntry] = []

    def record(self, entry: MigrationHistoryEntry) -> None:
        self._entries.insert(0, entry)

    @property
    def entries(self) -> tuple[MigrationHistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def latest(self) -> MigrationHistoryEntry | None:
        return self._entries[0] if self._entries else None

    def get(self, entry_id: str) -> MigrationHistoryEntry | None:
        return next((e for e in self._entries if e.id == entry_id), None)

    def total_cost(self) -> float:
        return round(sum(e.cost_estimate_usd or 0.0 for e in self._entries), 4)

    def count(self, status: MigrationStatus) -> int:
        return sum(1 for e in self._entries if e.status == status)

    def to_json(self) -> str:
        return json.dumps([e.to_dict() for e in self._entries], indent=2)

    def export(self, path: Path) -> Path:
        """Write the history as JSON. Only done on explicit request."""
        path.write_text(self.to_json())
        return path

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MigrationHistoryEntry]:
        return iter(tuple(self._entries))
