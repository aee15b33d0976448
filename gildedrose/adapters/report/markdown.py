"""Markdown file report adapter.

Implements ReportPort by appending each day's inventory as a markdown
table to a single report file. Useful for keeping a reviewable record
of a simulation run.
"""

import logging
from pathlib import Path
from typing import Any

from gildedrose.core.models import DayReport
from gildedrose.core.ports import ReportPort

logger = logging.getLogger(__name__)

REPORT_FILENAME = "inventory-report.md"


class MarkdownReportAdapter(ReportPort):
    """Appends day tables and a summary to a markdown report file."""

    def __init__(self, report_dir: str):
        """Initialize markdown report adapter.

        Args:
            report_dir: Directory where inventory-report.md is written.
                Created if missing.

        Raises:
            ValueError: If report_dir is a filesystem root.
            OSError: If the directory cannot be created.
        """
        self.base_dir = Path(report_dir).resolve()

        if self.base_dir.parent == self.base_dir:
            raise ValueError(f"report_dir cannot be a filesystem root: {report_dir}")

        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Failed to create report directory {report_dir}: {e}") from e

        self.report_path = self.base_dir / REPORT_FILENAME

    @staticmethod
    def _escape_cell(text: str) -> str:
        """Escape characters that would break a markdown table cell."""
        return (
            text.replace("\\", "\\\\")
            .replace("|", "\\|")
            .replace("\r\n", "<br>")
            .replace("\n", "<br>")
            .replace("\r", "<br>")
        )

    def _format_day(self, report: DayReport) -> str:
        lines = [
            f"## Day {report.day}",
            "",
            "| Name | Category | Sell In | Quality |",
            "|------|----------|---------|---------|",
        ]
        for item in report.items:
            lines.append(
                f"| {self._escape_cell(item.name)} | {item.category.value} "
                f"| {item.sell_in} | {item.quality} |"
            )
        lines.append("")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_summary(stats: dict[str, Any]) -> str:
        lines = [
            "## Summary",
            "",
            f"- **Days simulated:** {stats.get('days', 0)}",
            f"- **Items:** {stats.get('item_count', 0)}",
            f"- **Worthless (quality 0):** {stats.get('worthless_count', 0)}",
            f"- **At max quality:** {stats.get('max_quality_count', 0)}",
        ]
        for category, count in sorted(stats.get("category_counts", {}).items()):
            lines.append(f"- **{category}:** {count}")
        lines.append("")
        return "\n".join(lines) + "\n"

    def _append(self, content: str) -> None:
        try:
            with self.report_path.open("a", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write report {self.report_path}: {e}")
            raise

    def report_day(self, report: DayReport) -> None:
        """Append the table for one day."""
        self._append(self._format_day(report))

    def report_summary(self, stats: dict[str, Any]) -> None:
        """Append the summary section."""
        self._append(self._format_summary(stats))
        logger.info(f"Report written to {self.report_path}")
