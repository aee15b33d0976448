"""CLI command implementations for the Gilded Rose inventory.

Provides human-initiated actions through the command-line interface.

This adapter maps CLI commands (simulate, inspect, categories) to core
operations. It handles CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from gildedrose.adapters.report.stdout import StdoutReportAdapter
from gildedrose.core.models import CATEGORY_RULES, categorize
from gildedrose.core.ports import SimulationPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to SimulationPort."""

    def __init__(self, simulation: SimulationPort):
        """Initialize the CLI command handler.

        Args:
            simulation: SimulationPort implementation to run commands against.
        """
        self.simulation = simulation

    def simulate(
        self, days: int, output_format: str = "json", verbose: bool = False
    ) -> dict[str, Any]:
        """Run the inventory forward and return the final state.

        Args:
            days: Number of days to simulate.
            output_format: "json" or "text". Text adds a rendered listing
                of the final day.
            verbose: If True, log additional information.

        Returns:
            Dictionary with status and the final inventory state.
        """
        if output_format not in {"json", "text"}:
            return {
                "status": "error",
                "operation": "simulate",
                "message": f"Unknown output format: {output_format}",
            }

        try:
            reports = self.simulation.run(days)
        except (ValueError, OSError) as e:
            logger.error(f"Failed to simulate: {e}")
            return {
                "status": "error",
                "operation": "simulate",
                "days": days,
                "message": str(e),
            }

        final = reports[-1]
        result: dict[str, Any] = {
            "status": "success",
            "operation": "simulate",
            "days": days,
            "final_state": [
                {
                    "name": item.name,
                    "category": item.category.value,
                    "sell_in": item.sell_in,
                    "quality": item.quality,
                }
                for item in final.items
            ],
        }

        if output_format == "text":
            result["text"] = StdoutReportAdapter.format_day(final)

        if verbose:
            logger.info(
                f"Simulated {days} days",
                extra={"item_count": len(final.items), "verbose": True},
            )

        return result

    def inspect(self, name: str) -> dict[str, Any]:
        """Report which rule category an item name resolves to."""
        if not name:
            return {
                "status": "error",
                "operation": "inspect",
                "message": "name must be a non-empty string",
            }

        category = categorize(name)
        return {
            "status": "success",
            "operation": "inspect",
            "name": name,
            "category": category.value,
            "rule": CATEGORY_RULES[category],
        }

    def categories(self) -> dict[str, Any]:
        """List every category with its name-matching rule."""
        return {
            "status": "success",
            "operation": "categories",
            "categories": [
                {"category": category.value, "rule": rule}
                for category, rule in CATEGORY_RULES.items()
            ],
        }
