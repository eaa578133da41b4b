# state.py — Shared SummaryState schema
# TypedDict definition for state passed between workflow nodes
"""
state.py — Workflow State Schema

Defines the TypedDict structure for state passed between LangGraph nodes.
"""

from __future__ import annotations

from typing import Any, Callable, TypedDict

import pandas as pd

from config.summary_config import SummaryConfig


class SummaryState(TypedDict, total=False):
    """
    Shared state passed between all workflow nodes.

    All fields are optional (total=False) to support partial updates.
    """

    # =========================================================================
    # INPUT LAYER
    # =========================================================================
    input_path: str
    categorical_threshold: int
    display_cap: int
    low_memory: bool

    # =========================================================================
    # DATA LAYER
    # =========================================================================
    dataframe: pd.DataFrame | None
    row_count: int
    col_count: int
    shape_header: str | None  # File/shape banner

    # =========================================================================
    # ANALYSIS LAYER
    # =========================================================================
    column_summaries: list[Any] | None  # list[ColumnSummary], table order

    # =========================================================================
    # OUTPUT LAYER
    # =========================================================================
    report_text: str | None

    # =========================================================================
    # CONTROL LAYER
    # =========================================================================
    current_node: str | None
    progress: float  # 0.0 - 1.0
    progress_message: str | None

    # =========================================================================
    # ERROR LAYER
    # =========================================================================
    error: str | None
    error_type: str | None  # CONFIG_INVALID | INPUT_INVALID | LOAD_FAILED | STATISTICS_FAILED
    failed_node: str | None
    failed_column: str | None
    recovery_hint: str | None

    # =========================================================================
    # CALLBACKS (not persisted)
    # =========================================================================
    progress_callback: Callable[[dict], None] | None


def create_initial_state(
    input_path: str,
    config: SummaryConfig | None = None,
    progress_callback: Callable[[dict], None] | None = None,
) -> SummaryState:
    """
    Create a fresh SummaryState with default values.

    Args:
        input_path: Table file to summarize
        config: Run configuration, defaults to SummaryConfig()
        progress_callback: Optional callback for progress updates

    Returns:
        Initialized SummaryState dict
    """
    config = config or SummaryConfig()

    return SummaryState(
        # Input
        input_path=input_path,
        categorical_threshold=config.categorical_threshold,
        display_cap=config.display_cap,
        low_memory=config.low_memory,

        # Data
        dataframe=None,
        row_count=0,
        col_count=0,
        shape_header=None,

        # Analysis
        column_summaries=None,

        # Output
        report_text=None,

        # Control
        current_node=None,
        progress=0.0,
        progress_message=None,

        # Error
        error=None,
        error_type=None,
        failed_node=None,
        failed_column=None,
        recovery_hint=None,

        # Callbacks
        progress_callback=progress_callback,
    )
