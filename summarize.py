"""
summarize.py — Command-Line Entry Point

Table Summarizer: Parquet / CSV file → per-column statistical summary

Argument handling and output only; loading, classification and rendering
are delegated to the summary workflow.
"""

from __future__ import annotations

import argparse
import sys

from config.logging_config import setup_logging
from config.summary_config import VALID_LOG_LEVELS, get_summary_config
from pipeline.graph import run_summary
from profiling.errors import ConfigError


__version__ = "0.1.0"


# =============================================================================
# ARGUMENTS
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="table-summary",
        description="Analyze and summarize Parquet or CSV files efficiently",
    )
    parser.add_argument("input_file", help="Path to the .parquet/.pq/.csv file to analyze")
    parser.add_argument(
        "-o", "--output",
        help="Optional output file path. If not provided, prints to stdout",
    )
    parser.add_argument(
        "--categorical-threshold",
        type=int,
        default=None,
        help=(
            "Maximum number of distinct values to consider a column categorical "
            "(default: 10). Frequency tables still list at most 10 entries"
        ),
    )
    parser.add_argument(
        "--low-memory",
        action="store_true",
        default=None,
        help="Process file with reduced memory usage (limits parallelism)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        default=None,
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


# =============================================================================
# OUTPUT
# =============================================================================

def _write_report(report_text: str, output_path: str | None) -> None:
    if output_path is None:
        sys.stdout.write(report_text)
        return

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(report_text)
    print(f"Summary written to: {output_path}")


# =============================================================================
# MAIN
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_summary_config().with_overrides(
            categorical_threshold=args.categorical_threshold,
            low_memory=args.low_memory,
            log_level=args.log_level,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    result = run_summary(args.input_file, config=config)

    if result.get("error"):
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    sys.stdout.write(result["shape_header"])

    try:
        _write_report(result["report_text"], args.output)
    except OSError as e:
        print(f"Error: Failed to write to output file '{args.output}': {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
