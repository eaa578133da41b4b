"""
report.py — Text Report Assembly

Renders ColumnSummary lists into the plain-text column report and the
file/shape banner. Pure formatting: the only arithmetic is the
frequency-table percentage.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from profiling.statistics import CategoricalStats, ColumnSummary, NumericalStats


# =============================================================================
# CONSTANTS
# =============================================================================

REPORT_TITLE = "📋 Column Analysis"
REPORT_RULE = "━━━━━━━━━━━━━━━━━━"
SHAPE_TITLE = "📊 File Analysis"
SHAPE_RULE = "━━━━━━━━━━━━━━━━━━━━━━━━━"
COMPLETION_MARKER = "✅ Analysis complete!"
NOT_AVAILABLE = "N/A (no valid values)"

INDENT_BLOCK = "   "
INDENT_ITEM = "      "


# =============================================================================
# FORMATTING HELPERS
# =============================================================================

def _fmt_stat(value: float | None) -> str:
    return f"{value:.6f}" if value is not None else NOT_AVAILABLE


def frequency_percentages(frequency_table: Sequence[tuple[str, int]]) -> list[float]:
    """
    Percentage of each displayed entry.

    The denominator is the sum of the displayed counts, not the column's
    row count. For a truncated (top-N) table the long tail is therefore
    left out and the percentages only describe the displayed subset.
    """
    total = sum(count for _, count in frequency_table)
    if total == 0:
        return [0.0 for _ in frequency_table]
    return [count / total * 100.0 for _, count in frequency_table]


def _numerical_lines(stats: NumericalStats) -> list[str]:
    lines = [
        f"{INDENT_BLOCK}📈 Numerical Statistics:",
        f"{INDENT_ITEM}Mean: {_fmt_stat(stats.mean)}",
        f"{INDENT_ITEM}Std Dev: {_fmt_stat(stats.std_dev)}",
    ]
    # Quartiles are all-or-nothing
    if stats.q25 is not None and stats.q75 is not None and stats.iqr is not None:
        lines.extend([
            f"{INDENT_ITEM}Q1 (25%): {stats.q25:.6f}",
            f"{INDENT_ITEM}Q3 (75%): {stats.q75:.6f}",
            f"{INDENT_ITEM}IQR: {stats.iqr:.6f}",
        ])
    else:
        lines.append(f"{INDENT_ITEM}Quartiles: {NOT_AVAILABLE}")
    return lines


def _categorical_lines(stats: CategoricalStats) -> list[str]:
    table = stats.frequency_table
    if not table:
        return [
            f"{INDENT_BLOCK}📊 Categorical: {stats.total_unique} unique values (too many to display)"
        ]

    if stats.showing_top_n:
        header = (
            f"{INDENT_BLOCK}📊 Categorical: {stats.total_unique} total unique values "
            f"(showing top {len(table)}):"
        )
    else:
        header = f"{INDENT_BLOCK}📊 Categorical: {stats.total_unique} unique values:"

    lines = [header]
    for (value, count), pct in zip(table, frequency_percentages(table)):
        lines.append(f"{INDENT_ITEM}'{value}': {count} ({pct:.1f}%)")
    return lines


# =============================================================================
# RENDERING
# =============================================================================

def render_summary(summaries: Iterable[ColumnSummary]) -> str:
    """
    Render the column report.

    Args:
        summaries: Column summaries in table column order

    Returns:
        Report text: title, one numbered block per column, completion marker
    """
    lines = [REPORT_TITLE, REPORT_RULE, ""]

    for index, summary in enumerate(summaries, start=1):
        lines.append(f"{index}. Column: '{summary.name}' ({summary.data_type})")
        if isinstance(summary.stats, NumericalStats):
            lines.extend(_numerical_lines(summary.stats))
        else:
            lines.extend(_categorical_lines(summary.stats))
        lines.append("")

    lines.append(COMPLETION_MARKER)
    return "\n".join(lines) + "\n"


def render_shape_header(path: str, row_count: int, col_count: int) -> str:
    """Banner printed before the report: file path and table shape."""
    return "\n".join([
        SHAPE_TITLE,
        SHAPE_RULE,
        f"📁 File: {path}",
        f"📏 Shape: {row_count} rows × {col_count} columns",
        "",
    ]) + "\n"
