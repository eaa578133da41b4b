# validators.py — Input validation
# Path checks, DataFrame checks, threshold guards
"""
validators.py — Input Validation

Production implementation for:
- Input path validation (existence, file type)
- Loaded table validation
- Threshold / display-cap sanity checks
"""

from __future__ import annotations

import os
from typing import Any

import pandas as pd

from config.summary_config import SUPPORTED_EXTENSIONS


# =============================================================================
# FILE VALIDATION
# =============================================================================

def validate_input_path(path: str | None) -> tuple[bool, str | None]:
    """
    Validate that the input path names an existing file of a supported type.

    Returns:
        (is_valid, error_message)
    """
    if not path:
        return False, "No input file provided"

    if not os.path.exists(path):
        return False, f"Input file '{path}' does not exist"

    if not os.path.isfile(path):
        return False, f"Input path '{path}' is not a file"

    ext = os.path.splitext(path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        return False, (
            f"Invalid file type: {ext or '(none)'}. "
            f"Allowed: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )

    return True, None


def validate_dataframe(df: Any) -> tuple[bool, str | None]:
    """
    Validate that a loaded object is a usable table.

    Zero rows is allowed: every statistic is then reported as not available.

    Returns:
        (is_valid, error_message)
    """
    if df is None:
        return False, "No data provided"

    if not isinstance(df, pd.DataFrame):
        return False, "Data is not a valid DataFrame"

    if len(df.columns) == 0:
        return False, "Table has no columns"

    return True, None


# =============================================================================
# PARAMETER VALIDATION
# =============================================================================

def validate_threshold(value: Any) -> tuple[bool, str | None]:
    """Categorical threshold must be a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False, f"Categorical threshold must be an integer, got {value!r}"
    if value < 0:
        return False, f"Categorical threshold must be >= 0, got {value}"
    return True, None


def validate_display_cap(value: Any) -> tuple[bool, str | None]:
    """Display cap must be a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        return False, f"Display cap must be an integer, got {value!r}"
    if value < 1:
        return False, f"Display cap must be >= 1, got {value}"
    return True, None
