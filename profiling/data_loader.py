# data_loader.py — Parquet / CSV loading
# Reads a file into a pandas DataFrame without altering columns
"""
data_loader.py — Table Loading

Safe table loading with:
- Parquet (pyarrow engine) and CSV support
- Encoding fallback for CSV
- Low-memory mode (no pyarrow threads / chunked CSV parsing)
- Error messages instead of exceptions

Columns are never dropped, renamed or reordered: the summary depends on
the table's original column order.
"""

from __future__ import annotations

import logging
import os

import pandas as pd

from profiling.errors import LoadError


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

PARQUET_EXTENSIONS = {".parquet", ".pq"}
CSV_EXTENSIONS = {".csv"}
SUPPORTED_ENCODINGS = ["utf-8", "cp1252", "latin-1"]  # latin-1 accepts any byte sequence; keep it last


# =============================================================================
# DATA LOADING
# =============================================================================

def _extension(path: str) -> str:
    return os.path.splitext(path)[1].lower()


def _read_parquet(path: str, low_memory: bool) -> pd.DataFrame:
    return pd.read_parquet(path, engine="pyarrow", use_threads=not low_memory)


def _read_csv(path: str, low_memory: bool) -> pd.DataFrame:
    last_error = None

    for encoding in SUPPORTED_ENCODINGS:
        try:
            return pd.read_csv(path, encoding=encoding, low_memory=low_memory)
        except UnicodeDecodeError:
            last_error = f"Encoding {encoding} failed"
            continue
        except pd.errors.ParserError as e:
            last_error = f"CSV parsing error: {str(e)}"
            continue

    raise LoadError(last_error or "Failed to parse CSV with any supported encoding")


def load_table(path: str, low_memory: bool = False) -> pd.DataFrame:
    """
    Load a Parquet or CSV file into a DataFrame.

    Args:
        path: File path (.parquet, .pq or .csv)
        low_memory: Limit parallelism / memory use while loading

    Returns:
        Loaded DataFrame

    Raises:
        LoadError: If the file is empty, unsupported or unreadable
    """
    ext = _extension(path)
    logger.debug("Loading %s (format=%s, low_memory=%s)", path, ext, low_memory)

    try:
        if os.path.getsize(path) == 0:
            raise LoadError("File is empty")
    except OSError as e:
        raise LoadError(f"Failed to read file: {str(e)}") from e

    try:
        if ext in PARQUET_EXTENSIONS:
            return _read_parquet(path, low_memory)
        if ext in CSV_EXTENSIONS:
            return _read_csv(path, low_memory)
    except pd.errors.EmptyDataError as e:
        raise LoadError("CSV file contains no data") from e
    except LoadError:
        raise
    except Exception as e:
        raise LoadError(f"Failed to load '{path}': {str(e)}") from e

    raise LoadError(f"Unsupported file type: {ext or '(none)'}")


def safe_load_table(
    path: str,
    low_memory: bool = False,
) -> tuple[pd.DataFrame | None, str | None]:
    """
    Load a table, reporting failure as a message.

    Returns:
        Tuple of (DataFrame or None, error_message or None)
        - On success: (df, None)
        - On failure: (None, error_string)
    """
    try:
        return load_table(path, low_memory=low_memory), None
    except LoadError as e:
        return None, str(e)
