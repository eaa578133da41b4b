# graph.py — LangGraph workflow definition
# Defines state machine, node edges, and conditional routing
"""
graph.py — LangGraph Workflow Definition

Wires the summary nodes into a linear graph with error routing.

Flow:
    START → ingest_table → summarize_columns → render_report → END
                 ↓                 ↓                  ↓
              [ERROR]   →      [ERROR]      →      [ERROR]   → handle_error → END

Any node that sets state["error"] routes to handle_error_node.
"""

from __future__ import annotations

from typing import Callable, Literal

from langgraph.graph import END, START, StateGraph

from config.summary_config import SummaryConfig
from pipeline.nodes import (
    handle_error_node,
    ingest_table_node,
    render_report_node,
    summarize_columns_node,
)
from pipeline.state import SummaryState, create_initial_state


# =============================================================================
# CONDITIONAL ROUTING
# =============================================================================

def route_after_node(state: SummaryState) -> Literal["continue", "error"]:
    """
    Conditional router: check if error occurred, route accordingly.

    Returns:
        "error" if state has error, "continue" otherwise
    """
    if state.get("error"):
        return "error"
    return "continue"


# =============================================================================
# GRAPH BUILDER
# =============================================================================

def build_summary_graph() -> StateGraph:
    """
    Build the LangGraph workflow for a table summary.

    Returns:
        Uncompiled StateGraph
    """
    workflow = StateGraph(SummaryState)

    workflow.add_node("ingest_table", ingest_table_node)
    workflow.add_node("summarize_columns", summarize_columns_node)
    workflow.add_node("render_report", render_report_node)
    workflow.add_node("handle_error", handle_error_node)

    workflow.add_edge(START, "ingest_table")

    workflow.add_conditional_edges(
        "ingest_table",
        route_after_node,
        {
            "continue": "summarize_columns",
            "error": "handle_error",
        },
    )

    workflow.add_conditional_edges(
        "summarize_columns",
        route_after_node,
        {
            "continue": "render_report",
            "error": "handle_error",
        },
    )

    workflow.add_conditional_edges(
        "render_report",
        route_after_node,
        {
            "continue": END,
            "error": "handle_error",
        },
    )

    workflow.add_edge("handle_error", END)

    return workflow


# Compiled graph singleton (lazy initialization)
_compiled_graph = None


def get_compiled_graph():
    """
    Get or create the compiled graph singleton.

    Returns:
        Compiled StateGraph
    """
    global _compiled_graph
    if _compiled_graph is None:
        _compiled_graph = build_summary_graph().compile()
    return _compiled_graph


# =============================================================================
# GRAPH EXECUTION
# =============================================================================

def run_summary(
    input_path: str,
    config: SummaryConfig | None = None,
    progress_callback: Callable[[dict], None] | None = None,
) -> dict:
    """
    Run the complete summary workflow.

    Args:
        input_path: Parquet or CSV file to summarize
        config: Run configuration (threshold, display cap, low-memory flag)
        progress_callback: Optional callback for progress updates

    Returns:
        Final SummaryState dict. On success "report_text" and
        "shape_header" are set; on failure "error" is set and
        "report_text" is None.

    Example:
        result = run_summary("data.parquet")
        if result.get("error"):
            print(result["error"], file=sys.stderr)
        else:
            print(result["report_text"])
    """
    initial_state = create_initial_state(
        input_path=input_path,
        config=config,
        progress_callback=progress_callback,
    )

    graph = get_compiled_graph()
    return graph.invoke(initial_state)
