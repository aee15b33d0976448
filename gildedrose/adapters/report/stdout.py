"""Stdout report adapter.

Implements ReportPort by printing the inventory to the terminal in the
classic day-by-day listing format.
"""

import logging
from typing import Any

from gildedrose.core.models import DayReport
from gildedrose.core.ports import ReportPort

logger = logging.getLogger(__name__)


class StdoutReportAdapter(ReportPort):
    """Prints each day's inventory to stdout."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout report adapter.

        Args:
            verbose: If True, also print the summary block at the end.
        """
        self.verbose = verbose

    def report_day(self, report: DayReport) -> None:
        """Print the listing for one day."""
        print(self.format_day(report))

    def report_summary(self, stats: dict[str, Any]) -> None:
        """Print the summary block when verbose."""
        if self.verbose:
            print(self._format_summary(stats))

    @staticmethod
    def format_day(report: DayReport) -> str:
        """Format one day as header, column line and one line per item."""
        lines = [
            f"-------- day {report.day} --------",
            "name, sellIn, quality",
        ]
        lines.extend(str(item) for item in report.items)
        lines.append("")
        return "\n".join(lines)

    @staticmethod
    def _format_summary(stats: dict[str, Any]) -> str:
        lines = [
            "=" * 40,
            "SUMMARY",
            "=" * 40,
            f"Days simulated: {stats.get('days', 0)}",
            f"Items: {stats.get('item_count', 0)}",
            f"Worthless (quality 0): {stats.get('worthless_count', 0)}",
            f"At max quality: {stats.get('max_quality_count', 0)}",
        ]

        category_counts = stats.get("category_counts", {})
        if category_counts:
            lines.append("By category:")
            for category, count in sorted(category_counts.items()):
                lines.append(f"  {category}: {count}")

        return "\n".join(lines)
