"""
Utility functions for formatting text reports.

Renders score results and the analysis history as aligned plain-text
tables for the command-line tools.
"""

from typing import Any, Dict, List

from fitcheck.contexts.targeting.result import (
    ScoreResult,
    displayed_matched_keywords,
    displayed_missing_keywords,
)
from fitcheck.utils.timestamp import format_timestamp

REPORT_WIDTH = 80


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        text = str(value)
        if len(text) > self.width:
            text = text[: self.width - 1] + "…"
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = REPORT_WIDTH):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section title between two separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        self.lines.append("-" * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(v) for col, v in zip(self.columns, values)))
        return self

    def add_text(self, text: str = "") -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_score_report(result: ScoreResult) -> str:
    """
    Render a ScoreResult as a text report.

    Shows overall score, fit level, completeness and confidence, the category
    breakdown, keyword chips (first 15 matched plus overflow count, first 10
    missing), strengths, gaps, and improvement feedback.
    """
    table = TableFormatter([Column("Category", 30), Column("Score", 8, ">")])
    table.add_section_header(f"Resume relevance: {result.target_title} ({result.mode} mode)")
    table.add_text(f"Overall score: {result.overall}/100   Fit: {result.fit_level.value}")
    table.add_text(
        f"Completeness:  {result.accuracy}%     Confidence: {result.confidence.value}"
    )
    table.add_text()

    if result.breakdown:
        table.add_table_header()
        for category, score in result.breakdown.items():
            table.add_row([category.capitalize(), f"{score}%"])
        table.add_text()

    matched, overflow = displayed_matched_keywords(result)
    if matched:
        more = f" (+{overflow} more)" if overflow else ""
        table.add_text(f"Matched keywords ({len(result.matched_keywords)}): {', '.join(matched)}{more}")

    missing = displayed_missing_keywords(result)
    if missing:
        table.add_text(f"Missing keywords (top {len(missing)}): {', '.join(missing)}")

    if result.strengths:
        table.add_text()
        table.add_text(f"Strengths: {', '.join(result.strengths)}")

    if result.gaps:
        table.add_text()
        table.add_text("Gaps:")
        for gap in result.gaps:
            table.add_text(f"  {gap.category.capitalize()} [{gap.severity.value} priority]")
            table.add_text(f"    Missing: {', '.join(gap.missing)}")
            for suggestion in gap.suggestions:
                table.add_text(f"    - {suggestion}")

    if result.improvement_feedback:
        table.add_text()
        table.add_text("Improvement feedback:")
        for line in result.improvement_feedback:
            table.add_text(f"  * {line}")

    table.add_text()
    table.add_text(f"Analysis completed {format_timestamp(result.timestamp)}")
    return table.render()


def format_history_table(records: List[Dict[str, Any]], relative: bool = False) -> str:
    """Render history records (oldest first) as an indexed table."""
    table = TableFormatter(
        [
            Column("#", 4, ">"),
            Column("Job", 28),
            Column("Company", 16),
            Column("Score", 6, ">"),
            Column("Fit", 7),
            Column("When", 19),
        ]
    )
    table.add_section_header(f"Analysis history ({len(records)} entries)")
    table.add_table_header()
    for index, record in enumerate(records):
        table.add_row(
            [
                index,
                record.get("job_title", ""),
                record.get("job_company", ""),
                record.get("overall", ""),
                record.get("fit_level", ""),
                format_timestamp(record.get("timestamp", ""), relative=relative),
            ]
        )
    return table.render()
