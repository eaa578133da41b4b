# nodes.py — Workflow node functions
# Steps: ingest → summarize → render (errors → handle_error)
"""
nodes.py — LangGraph Workflow Nodes

Each node is a function that takes SummaryState and returns state updates.

Node Responsibilities:
- ingest_table_node: Validate the path, load the table, build the shape banner
- summarize_columns_node: Classify and summarize every column
- render_report_node: Render the column report text
- handle_error_node: Log the failure and drop intermediate results

A fatal error in any node sets state["error"]; the graph then routes to
handle_error_node and no report is rendered.
"""

from __future__ import annotations

import logging

from profiling.data_loader import safe_load_table
from profiling.errors import StatisticsError
from profiling.report import render_shape_header, render_summary
from profiling.statistics import summarize_table
from profiling.validators import (
    validate_dataframe,
    validate_display_cap,
    validate_input_path,
    validate_threshold,
)


logger = logging.getLogger(__name__)


# =============================================================================
# PROGRESS HELPERS
# =============================================================================

def _emit_progress(
    state: dict,
    node: str,
    progress: float,
    message: str,
    status: str = "running",
) -> None:
    """
    Emit a progress update via the callback if available.

    Args:
        state: Current workflow state
        node: Current node name
        progress: Progress value (0.0 - 1.0)
        message: Human-readable progress message
        status: "running" | "complete" | "failed"
    """
    callback = state.get("progress_callback")
    if callback and callable(callback):
        try:
            callback({
                "node": node,
                "status": status,
                "progress": progress,
                "message": message,
            })
        except Exception:
            logger.debug("Progress callback failed in %s", node, exc_info=True)


def _create_error_state(
    node: str,
    error_msg: str,
    error_type: str,
    recovery_hint: str,
    failed_column: str | None = None,
) -> dict:
    """
    Create state update for error routing.
    """
    return {
        "error": error_msg,
        "error_type": error_type,
        "failed_node": node,
        "failed_column": failed_column,
        "recovery_hint": recovery_hint,
        "current_node": node,
    }


# =============================================================================
# NODE: INGEST TABLE
# =============================================================================

def ingest_table_node(state: dict) -> dict:
    """
    Validate inputs and load the table.

    Input state:
        - input_path: str (required)
        - categorical_threshold, display_cap, low_memory

    Output state updates:
        - dataframe, row_count, col_count, shape_header

    On error:
        - error, error_type, failed_node, recovery_hint
    """
    node_name = "ingest_table"
    _emit_progress(state, node_name, 0.05, "Checking input...")

    for validator, key in (
        (validate_threshold, "categorical_threshold"),
        (validate_display_cap, "display_cap"),
    ):
        is_valid, param_error = validator(state.get(key))
        if not is_valid:
            return _create_error_state(
                node_name,
                param_error,
                "CONFIG_INVALID",
                "Fix the categorical threshold / display cap settings.",
            )

    input_path = state.get("input_path")
    is_valid_path, path_error = validate_input_path(input_path)
    if not is_valid_path:
        return _create_error_state(
            node_name,
            path_error,
            "INPUT_INVALID",
            "Pass an existing .parquet, .pq or .csv file.",
        )

    _emit_progress(state, node_name, 0.10, "Loading table...")

    df, load_error = safe_load_table(input_path, low_memory=bool(state.get("low_memory")))
    if load_error:
        return _create_error_state(
            node_name,
            load_error,
            "LOAD_FAILED",
            "Check that the file is a valid Parquet or CSV file.",
        )

    is_valid_df, df_error = validate_dataframe(df)
    if not is_valid_df:
        return _create_error_state(
            node_name,
            df_error,
            "LOAD_FAILED",
            "The file appears to be empty. Please check the input.",
        )

    row_count, col_count = df.shape
    _emit_progress(state, node_name, 0.30, "Table loaded", "complete")

    return {
        "dataframe": df,
        "row_count": row_count,
        "col_count": col_count,
        "shape_header": render_shape_header(input_path, row_count, col_count),
        "current_node": node_name,
        "progress": 0.30,
        "progress_message": f"Loaded {row_count:,} rows × {col_count} columns",
    }


# =============================================================================
# NODE: SUMMARIZE COLUMNS
# =============================================================================

def summarize_columns_node(state: dict) -> dict:
    """
    Classify and summarize every column in table order.

    Input state:
        - dataframe (required), categorical_threshold, display_cap

    Output state updates:
        - column_summaries: list[ColumnSummary]

    On error:
        - error, error_type, failed_node, failed_column, recovery_hint
    """
    node_name = "summarize_columns"
    _emit_progress(state, node_name, 0.35, "Summarizing columns...")

    df = state.get("dataframe")
    if df is None:
        return _create_error_state(
            node_name,
            "No table available for summarization",
            "LOAD_FAILED",
            "Please re-run the summary.",
        )

    try:
        summaries = summarize_table(
            df,
            categorical_threshold=state["categorical_threshold"],
            display_cap=state["display_cap"],
        )
    except StatisticsError as e:
        return _create_error_state(
            node_name,
            str(e),
            "STATISTICS_FAILED",
            "The column holds values the engine cannot count (e.g. nested lists).",
            failed_column=e.column,
        )

    _emit_progress(state, node_name, 0.85, "Columns summarized", "complete")

    return {
        "column_summaries": summaries,
        "current_node": node_name,
        "progress": 0.85,
        "progress_message": f"Summarized {len(summaries)} columns",
    }


# =============================================================================
# NODE: RENDER REPORT
# =============================================================================

def render_report_node(state: dict) -> dict:
    """
    Render the report text from column summaries.

    Output state updates:
        - report_text: str
    """
    node_name = "render_report"
    _emit_progress(state, node_name, 0.90, "Rendering report...")

    summaries = state.get("column_summaries")
    if summaries is None:
        return _create_error_state(
            node_name,
            "No column summaries available",
            "STATISTICS_FAILED",
            "Please re-run the summary.",
        )

    report_text = render_summary(summaries)

    _emit_progress(state, node_name, 1.0, "Report ready", "complete")

    return {
        "report_text": report_text,
        "current_node": node_name,
        "progress": 1.0,
        "progress_message": "Analysis complete",
    }


# =============================================================================
# NODE: HANDLE ERROR
# =============================================================================

def handle_error_node(state: dict) -> dict:
    """
    Terminal error node: log the failure and discard partial results.
    """
    node_name = "handle_error"
    failed_node = state.get("failed_node") or "unknown"

    logger.error(
        "Summary failed in %s (%s): %s",
        failed_node,
        state.get("error_type"),
        state.get("error"),
    )
    _emit_progress(state, node_name, 1.0, state.get("error") or "Failed", "failed")

    return {
        "column_summaries": None,
        "report_text": None,
        "current_node": node_name,
        "progress_message": state.get("recovery_hint"),
    }
