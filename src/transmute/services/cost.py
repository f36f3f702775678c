"""Rough USD cost estimate for a migration run."""

from __future__ import annotations

from transmute.core.models import MigrationSettings

COST_PER_CHARACTER_USD = 0.00001


class CostEstimator:
    def estimate(self, input_code: str, output_code: str, settings: MigrationSettings) -> float:
        """Charge a flat rate per character of input plus output.

        Non-decreasing in ``len(input_code) + len(output_code)``.
        """
        cost = (len(input_code) + len(output_code)) * COST_PER_CHARACTER_USD
        return round(cost, 4)
