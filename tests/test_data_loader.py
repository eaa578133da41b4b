# ==============================================
# Tests for Data Loader and Validators
# ==============================================

import pandas as pd
import pytest

from profiling.data_loader import load_table, safe_load_table
from profiling.errors import LoadError
from profiling.validators import (
    validate_dataframe,
    validate_display_cap,
    validate_input_path,
    validate_threshold,
)


class TestLoadTable:
    def test_parquet(self, parquet_file, mixed_df):
        df = load_table(str(parquet_file))
        assert list(df.columns) == ["amount", "city", "active"]
        assert df.shape == mixed_df.shape

    def test_parquet_low_memory(self, parquet_file):
        df = load_table(str(parquet_file), low_memory=True)
        assert len(df) == 5

    def test_pq_extension(self, tmp_path, mixed_df):
        path = tmp_path / "sample.pq"
        mixed_df.to_parquet(path, engine="pyarrow")
        assert list(load_table(str(path)).columns) == ["amount", "city", "active"]

    def test_csv(self, csv_file):
        df = load_table(str(csv_file))
        assert list(df.columns) == ["amount", "city", "active"]
        assert df["amount"].tolist() == [1, 2, 3, 4, 5]

    def test_csv_low_memory(self, csv_file):
        assert len(load_table(str(csv_file), low_memory=True)) == 5

    def test_csv_encoding_fallback(self, tmp_path):
        path = tmp_path / "latin.csv"
        path.write_bytes("name,city\nJosé,Málaga\n".encode("latin-1"))
        df = load_table(str(path))
        assert df["name"].tolist() == ["José"]

    def test_csv_cp1252_before_latin1(self, tmp_path):
        path = tmp_path / "euro.csv"
        path.write_bytes("item,price\nbook,€5\n".encode("cp1252"))
        assert load_table(str(path))["price"].tolist() == ["€5"]

    def test_csv_latin1_last_resort(self, tmp_path):
        path = tmp_path / "raw.csv"
        path.write_bytes(b"code\nA\x81B\n")
        assert load_table(str(path))["code"].tolist() == ["A\x81B"]

    def test_column_order_preserved(self, tmp_path):
        path = tmp_path / "order.parquet"
        pd.DataFrame({"z": [1], "a": [2], "m": [3]}).to_parquet(path, engine="pyarrow")
        assert list(load_table(str(path)).columns) == ["z", "a", "m"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(LoadError, match="empty"):
            load_table(str(path))

    def test_csv_without_columns(self, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text("\n")
        with pytest.raises(LoadError, match="no data"):
            load_table(str(path))

    def test_corrupt_parquet(self, tmp_path):
        path = tmp_path / "broken.parquet"
        path.write_bytes(b"not a parquet file")
        with pytest.raises(LoadError, match="Failed to load"):
            load_table(str(path))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{}")
        with pytest.raises(LoadError, match="Unsupported file type"):
            load_table(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError):
            load_table(str(tmp_path / "missing.parquet"))


class TestSafeLoadTable:
    def test_success(self, parquet_file):
        df, error = safe_load_table(str(parquet_file))
        assert error is None
        assert isinstance(df, pd.DataFrame)

    def test_failure_returns_message(self, tmp_path):
        df, error = safe_load_table(str(tmp_path / "missing.csv"))
        assert df is None
        assert "Failed to read file" in error


class TestValidateInputPath:
    def test_valid(self, parquet_file):
        assert validate_input_path(str(parquet_file)) == (True, None)

    def test_missing(self, tmp_path):
        path = str(tmp_path / "nope.parquet")
        is_valid, error = validate_input_path(path)
        assert not is_valid
        assert error == f"Input file '{path}' does not exist"

    def test_directory(self, tmp_path):
        is_valid, error = validate_input_path(str(tmp_path))
        assert not is_valid
        assert "is not a file" in error

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("x")
        is_valid, error = validate_input_path(str(path))
        assert not is_valid
        assert error.startswith("Invalid file type: .txt")

    def test_extension_is_case_insensitive(self, tmp_path):
        path = tmp_path / "DATA.CSV"
        path.write_text("a\n1\n")
        assert validate_input_path(str(path)) == (True, None)

    def test_no_path(self):
        assert validate_input_path("") == (False, "No input file provided")


class TestValidateDataframe:
    def test_valid(self, mixed_df):
        assert validate_dataframe(mixed_df) == (True, None)

    def test_zero_rows_allowed(self):
        assert validate_dataframe(pd.DataFrame({"a": []})) == (True, None)

    def test_none(self):
        assert validate_dataframe(None) == (False, "No data provided")

    def test_not_a_dataframe(self):
        is_valid, _ = validate_dataframe([1, 2, 3])
        assert not is_valid

    def test_no_columns(self):
        assert validate_dataframe(pd.DataFrame()) == (False, "Table has no columns")


class TestParameterValidation:
    @pytest.mark.parametrize("value", [0, 1, 10, 500])
    def test_threshold_valid(self, value):
        assert validate_threshold(value) == (True, None)

    @pytest.mark.parametrize("value", [-1, 2.5, "10", None, True])
    def test_threshold_invalid(self, value):
        is_valid, error = validate_threshold(value)
        assert not is_valid
        assert "Categorical threshold" in error

    def test_display_cap_valid(self):
        assert validate_display_cap(10) == (True, None)

    @pytest.mark.parametrize("value", [0, -3, 1.0, False])
    def test_display_cap_invalid(self, value):
        is_valid, _ = validate_display_cap(value)
        assert not is_valid
