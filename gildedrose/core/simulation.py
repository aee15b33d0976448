"""Simulation service - runs the inventory forward day by day.

Implements SimulationPort by loading items from an InventoryPort,
advancing them with the DayUpdater and publishing each day's state
to a ReportPort.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any

from .models import MAX_QUALITY, MIN_QUALITY, DayReport, Item
from .ports import InventoryPort, ReportPort, SimulationPort
from .updater import DayUpdater

logger = logging.getLogger(__name__)


class SimulationService(SimulationPort):
    """Orchestrates a multi-day run over one inventory."""

    def __init__(
        self,
        inventory: InventoryPort,
        report: ReportPort,
        updater: DayUpdater | None = None,
    ):
        self.inventory = inventory
        self.report = report
        self.updater = updater or DayUpdater()

    def run(self, days: int) -> list[DayReport]:
        """Simulate the given number of days and report every one of them."""
        if days < 0:
            raise ValueError(f"days must be non-negative, got {days}")

        items = self.inventory.load_items()
        logger.info(f"Starting simulation: {len(items)} items, {days} days")

        reports = [self._publish(0, items)]
        for day in range(1, days + 1):
            self.updater.advance_one_day(items)
            reports.append(self._publish(day, items))

        self.report.report_summary(self.summarize(days, items))
        logger.info(f"Simulation complete after {days} days")
        return reports

    def _publish(self, day: int, items: Sequence[Item]) -> DayReport:
        report = DayReport(
            day=day, items=tuple(item.snapshot() for item in items)
        )
        logger.debug(f"Reporting day {day}")
        self.report.report_day(report)
        return report

    @staticmethod
    def summarize(days: int, items: Sequence[Item]) -> dict[str, Any]:
        """Build summary statistics for the final inventory state."""
        counts = Counter(item.category.value for item in items)
        return {
            "days": days,
            "item_count": len(items),
            "category_counts": dict(counts),
            "worthless_count": sum(
                1 for item in items if item.quality == MIN_QUALITY
            ),
            "max_quality_count": sum(
                1
                for item in items
                if not item.is_legendary and item.quality == MAX_QUALITY
            ),
        }
