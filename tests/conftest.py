# ==============================================
# Pytest Configuration and Fixtures
# ==============================================

import logging

import pandas as pd
import pytest


@pytest.fixture
def mixed_df() -> pd.DataFrame:
    """One numerical, one string and one 'other' (bool) column."""
    return pd.DataFrame({
        "amount": [1, 2, 3, 4, 5],
        "city": ["a", "a", "b", "c", "c"],
        "active": [True, False, True, True, False],
    })


@pytest.fixture
def many_categories() -> pd.Series:
    """15 distinct labels; label k appears k+1 times, so ranking is unambiguous."""
    values = []
    for k in range(15):
        values.extend([f"v{k:02d}"] * (k + 1))
    return pd.Series(values, name="label")


@pytest.fixture
def parquet_file(tmp_path, mixed_df):
    path = tmp_path / "sample.parquet"
    mixed_df.to_parquet(path, engine="pyarrow")
    return path


@pytest.fixture
def csv_file(tmp_path, mixed_df):
    path = tmp_path / "sample.csv"
    mixed_df.to_csv(path, index=False)
    return path


@pytest.fixture
def restore_root_logger():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
