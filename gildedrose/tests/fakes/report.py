"""Fake ReportPort implementation for testing."""

from typing import Any

from gildedrose.core.models import DayReport
from gildedrose.core.ports import ReportPort


class FakeReportPort(ReportPort):
    """In-memory report adapter for testing.

    Captures all reports sent through this port for test assertions.
    """

    def __init__(self):
        """Initialize with empty report history."""
        self.day_reports: list[DayReport] = []
        self.summaries: list[dict[str, Any]] = []

    def report_day(self, report: DayReport) -> None:
        self.day_reports.append(report)

    def report_summary(self, stats: dict[str, Any]) -> None:
        self.summaries.append(stats)

    def get_last_day_report(self) -> DayReport | None:
        """Get the most recent day report, if any."""
        if self.day_reports:
            return self.day_reports[-1]
        return None

    def get_last_summary(self) -> dict[str, Any] | None:
        """Get the most recent summary, if any."""
        if self.summaries:
            return self.summaries[-1]
        return None
