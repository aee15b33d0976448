"""Tests for the stdout and markdown report adapters."""

from pathlib import Path

import pytest

from gildedrose.adapters.report.markdown import REPORT_FILENAME, MarkdownReportAdapter
from gildedrose.adapters.report.stdout import StdoutReportAdapter
from gildedrose.core.models import DayReport, Item


@pytest.fixture
def day_report() -> DayReport:
    items = [
        Item("+5 Dexterity Vest", 10, 20),
        Item("Sulfuras, Hand of Ragnaros", 0, 80),
    ]
    return DayReport(day=0, items=tuple(item.snapshot() for item in items))


@pytest.fixture
def stats() -> dict:
    return {
        "days": 2,
        "item_count": 2,
        "category_counts": {"ordinary": 1, "legendary": 1},
        "worthless_count": 0,
        "max_quality_count": 0,
    }


class TestStdoutReportAdapter:
    def test_prints_day_listing(self, capsys, day_report: DayReport) -> None:
        StdoutReportAdapter().report_day(day_report)

        out = capsys.readouterr().out
        assert out == (
            "-------- day 0 --------\n"
            "name, sellIn, quality\n"
            "+5 Dexterity Vest, 10, 20\n"
            "Sulfuras, Hand of Ragnaros, 0, 80\n"
            "\n"
        )

    def test_summary_suppressed_when_not_verbose(self, capsys, stats: dict) -> None:
        StdoutReportAdapter().report_summary(stats)
        assert capsys.readouterr().out == ""

    def test_summary_printed_when_verbose(self, capsys, stats: dict) -> None:
        StdoutReportAdapter(verbose=True).report_summary(stats)

        out = capsys.readouterr().out
        assert "SUMMARY" in out
        assert "Days simulated: 2" in out
        assert "  legendary: 1" in out
        assert "  ordinary: 1" in out


class TestMarkdownReportAdapter:
    def test_creates_report_directory(self, tmp_path: Path) -> None:
        report_dir = tmp_path / "nested" / "reports"
        adapter = MarkdownReportAdapter(str(report_dir))
        assert report_dir.is_dir()
        assert adapter.report_path == report_dir.resolve() / REPORT_FILENAME

    def test_rejects_filesystem_root(self) -> None:
        with pytest.raises(ValueError, match="filesystem root"):
            MarkdownReportAdapter("/")

    def test_writes_day_table(self, tmp_path: Path, day_report: DayReport) -> None:
        adapter = MarkdownReportAdapter(str(tmp_path))
        adapter.report_day(day_report)

        content = adapter.report_path.read_text(encoding="utf-8")
        assert "## Day 0" in content
        assert "| Name | Category | Sell In | Quality |" in content
        assert "| +5 Dexterity Vest | ordinary | 10 | 20 |" in content
        assert "| Sulfuras, Hand of Ragnaros | legendary | 0 | 80 |" in content

    def test_appends_days_and_summary(
        self, tmp_path: Path, day_report: DayReport, stats: dict
    ) -> None:
        adapter = MarkdownReportAdapter(str(tmp_path))
        adapter.report_day(day_report)
        adapter.report_day(DayReport(day=1, items=day_report.items))
        adapter.report_summary(stats)

        content = adapter.report_path.read_text(encoding="utf-8")
        assert content.index("## Day 0") < content.index("## Day 1") < content.index("## Summary")
        assert "- **Days simulated:** 2" in content
        assert "- **legendary:** 1" in content

    def test_escapes_pipes_in_names(self, tmp_path: Path) -> None:
        adapter = MarkdownReportAdapter(str(tmp_path))
        snapshot = Item("Cheese | Wine", 1, 1).snapshot()
        adapter.report_day(DayReport(day=0, items=(snapshot,)))

        content = adapter.report_path.read_text(encoding="utf-8")
        assert "| Cheese \\| Wine | ordinary | 1 | 1 |" in content

    def test_newlines_in_names_stay_on_one_row(self, tmp_path: Path) -> None:
        adapter = MarkdownReportAdapter(str(tmp_path))
        snapshot = Item("Cheese\nWine", 1, 1).snapshot()
        adapter.report_day(DayReport(day=0, items=(snapshot,)))

        content = adapter.report_path.read_text(encoding="utf-8")
        assert "| Cheese<br>Wine | ordinary | 1 | 1 |" in content
