"""
statistics.py — Column Statistics Engine

Turns every column of a loaded table into an immutable ColumnSummary:
- Numerical columns: mean, sample std dev, nearest-rank quartiles, IQR
- Categorical columns: unique count plus a bounded, count-ranked
  frequency table

Undefined statistics are None, never NaN or another sentinel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Union

import numpy as np
import pandas as pd

from config.summary_config import CATEGORICAL_DISPLAY_CAP, DEFAULT_CATEGORICAL_THRESHOLD
from profiling.classifier import (
    Categorical,
    CategoricalOverflow,
    Numerical,
    classify,
    dtype_tag,
)
from profiling.errors import StatisticsError


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

QUARTILE_LOW = 0.25
QUARTILE_HIGH = 0.75
QUANTILE_METHOD = "nearest"
STD_DDOF = 1
MAX_COUNT_VALUE = 2**32 - 1  # Counts outside uint32 are dropped from the table


# =============================================================================
# RESULT TYPES
# =============================================================================

@dataclass(frozen=True)
class NumericalStats:
    mean: float | None = None
    std_dev: float | None = None
    q25: float | None = None
    q75: float | None = None
    iqr: float | None = None


@dataclass(frozen=True)
class CategoricalStats:
    total_unique: int
    frequency_table: tuple[tuple[str, int], ...] = ()
    showing_top_n: bool = False


ColumnStats = Union[NumericalStats, CategoricalStats]


@dataclass(frozen=True)
class ColumnSummary:
    name: str
    data_type: str
    stats: ColumnStats


# =============================================================================
# HELPERS
# =============================================================================

def _optional_real(value: Any) -> float | None:
    """Convert an engine scalar to float, mapping NA/NaN and non-numbers to None."""
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
        return float(value)
    except (TypeError, ValueError):
        return None


def _optional_stat(name: str, compute: Callable[[], Any]) -> float | None:
    try:
        return _optional_real(compute())
    except (TypeError, ValueError, ArithmeticError) as e:
        logger.debug("Statistic %s not available: %s", name, e)
        return None


def _as_count(value: Any) -> int | None:
    """Accept only non-bool integers that fit an unsigned 32-bit count."""
    if isinstance(value, (bool, np.bool_)):
        return None
    if not isinstance(value, (int, np.integer)):
        return None
    if 0 <= value <= MAX_COUNT_VALUE:
        return int(value)
    return None


def count_unique(series: pd.Series, column_name: str) -> int:
    """
    Count distinct non-null values (full scan).

    Raises:
        StatisticsError: If the engine cannot count the values (e.g. unhashable cells)
    """
    try:
        return int(series.nunique(dropna=True))
    except Exception as e:
        raise StatisticsError(column_name, e) from e


# =============================================================================
# NUMERICAL SUMMARY
# =============================================================================

def compute_numerical(series: pd.Series) -> NumericalStats:
    """
    Descriptive statistics over the non-null values of a numeric column.

    Never raises: each statistic is independently None when undefined
    (no valid values, or a single value for the std dev). IQR is present
    only when both quartiles are.
    """
    mean = _optional_stat("mean", series.mean)
    std_dev = _optional_stat("std_dev", lambda: series.std(ddof=STD_DDOF))
    q25 = _optional_stat(
        "q25", lambda: series.quantile(QUARTILE_LOW, interpolation=QUANTILE_METHOD)
    )
    q75 = _optional_stat(
        "q75", lambda: series.quantile(QUARTILE_HIGH, interpolation=QUANTILE_METHOD)
    )

    iqr = q75 - q25 if q25 is not None and q75 is not None else None

    return NumericalStats(mean=mean, std_dev=std_dev, q25=q25, q75=q75, iqr=iqr)


# =============================================================================
# CATEGORICAL SUMMARY
# =============================================================================

def _value_counts(series: pd.Series) -> pd.Series:
    # sort=False keeps engine order (first appearance for object/string,
    # category order for categoricals); the stable sort breaks ties by it
    counts = series.value_counts(sort=False, dropna=True)
    counts = counts[counts > 0]
    return counts.sort_values(ascending=False, kind="stable")


def compute_categorical(
    series: pd.Series,
    threshold: int,
    column_name: str | None = None,
    display_cap: int = CATEGORICAL_DISPLAY_CAP,
    unique_count: int | None = None,
) -> CategoricalStats:
    """
    Unique count plus a frequency table ranked by occurrence count.

    Args:
        series: Column values
        threshold: Categorical threshold; more unique values than this
            marks the table as a top-N view
        column_name: Name used in errors and logs (defaults to series.name)
        display_cap: Max number of table entries
        unique_count: Already-known unique count, skips the scan

    Returns:
        CategoricalStats. If the value-count breakdown fails, the table is
        empty and showing_top_n is False (degraded, not an error).

    Raises:
        StatisticsError: If the unique count cannot be computed
    """
    name = column_name if column_name is not None else str(series.name)

    if unique_count is None:
        unique_count = count_unique(series, name)

    try:
        counts = _value_counts(series)
    except Exception as e:
        logger.warning("Value counts unavailable for column '%s': %s", name, e)
        return CategoricalStats(total_unique=unique_count)

    showing_top_n = unique_count > threshold or unique_count > display_cap
    limit = min(display_cap, unique_count) if showing_top_n else unique_count

    frequency_table = []
    for value, raw_count in counts.iloc[:limit].items():
        count = _as_count(raw_count)
        if count is None:
            continue
        # Categorical codes are already resolved to their labels by value_counts
        frequency_table.append((str(value), count))

    return CategoricalStats(
        total_unique=unique_count,
        frequency_table=tuple(frequency_table),
        showing_top_n=showing_top_n,
    )


# =============================================================================
# TABLE ORCHESTRATION
# =============================================================================

def _get_column(df: pd.DataFrame, name: Any) -> pd.Series:
    try:
        column = df[name]
    except KeyError as e:
        raise StatisticsError(str(name), f"column lookup failed: {e}") from e
    if isinstance(column, pd.DataFrame):
        raise StatisticsError(str(name), "column name is not unique")
    return column


def summarize_column(
    name: str,
    series: pd.Series,
    categorical_threshold: int = DEFAULT_CATEGORICAL_THRESHOLD,
    display_cap: int = CATEGORICAL_DISPLAY_CAP,
) -> ColumnSummary:
    """Classify one column and compute the matching statistics."""
    tag = dtype_tag(series)
    decision = classify(
        tag,
        lambda: count_unique(series, name),
        categorical_threshold,
    )
    logger.debug("Column '%s' (%s): %s", name, tag.value, decision)

    if isinstance(decision, Numerical):
        stats = compute_numerical(series)
    elif isinstance(decision, Categorical):
        stats = compute_categorical(
            series,
            decision.threshold,
            column_name=name,
            display_cap=display_cap,
            unique_count=decision.unique_count,
        )
    elif isinstance(decision, CategoricalOverflow):
        stats = CategoricalStats(total_unique=decision.unique_count)
    else:
        raise TypeError(f"Unhandled classification decision: {decision!r}")

    return ColumnSummary(name=name, data_type=str(series.dtype), stats=stats)


def summarize_table(
    df: pd.DataFrame,
    categorical_threshold: int = DEFAULT_CATEGORICAL_THRESHOLD,
    display_cap: int = CATEGORICAL_DISPLAY_CAP,
) -> list[ColumnSummary]:
    """
    Summarize every column of a table, in column order.

    Args:
        df: Fully loaded table
        categorical_threshold: Unique-count threshold for categorical handling
        display_cap: Max frequency-table entries per column

    Returns:
        One ColumnSummary per column, same order as df.columns

    Raises:
        StatisticsError: On the first column that cannot be classified or
            counted; no partial result is returned
    """
    summaries = []
    for name in df.columns:
        series = _get_column(df, name)
        summaries.append(
            summarize_column(str(name), series, categorical_threshold, display_cap)
        )
    return summaries
