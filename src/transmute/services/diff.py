"""Line-based diff between the original input and the migrated output."""

from __future__ import annotations

import difflib


class DiffGenerator:
    def generate_unified_diff(self, original: str, modified: str, context: int = 3) -> str:
        """Return a unified diff; an empty string when the texts are equal."""
        lines = difflib.unified_diff(
            original.splitlines(),
            modified.splitlines(),
            fromfile="Original",
            tofile="Modified",
            n=context,
            lineterm="",
        )
        return "\n".join(lines)
