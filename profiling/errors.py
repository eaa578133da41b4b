# errors.py — Exception hierarchy for the summarizer
"""
errors.py — Summarizer Exceptions

Fatal failures abort the whole run; no partial report is produced.
"""

from __future__ import annotations


# =============================================================================
# EXCEPTIONS
# =============================================================================

class SummaryError(Exception):
    """Base exception for summarizer errors."""
    pass


class LoadError(SummaryError):
    """Raised when the input table cannot be loaded."""
    pass


class ConfigError(SummaryError):
    """Raised when a configuration value is invalid."""
    pass


class StatisticsError(SummaryError):
    """
    Raised when a column cannot be classified or its unique count fails.

    Attributes:
        column: Name of the offending column
        cause: Underlying exception (or message)
    """

    def __init__(self, column: str, cause: BaseException | str):
        self.column = column
        self.cause = cause
        super().__init__(f"Column '{column}': {cause}")
