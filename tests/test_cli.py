# ==============================================
# Tests for the Command-Line Entry Point
# ==============================================

import pandas as pd
import pytest

from summarize import build_parser, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, restore_root_logger):
    for name in ("CATEGORICAL_THRESHOLD", "DISPLAY_CAP", "LOW_MEMORY", "LOG_LEVEL"):
        monkeypatch.delenv(f"TABLE_SUMMARY_{name}", raising=False)


class TestParser:
    def test_defaults_are_unset(self):
        args = build_parser().parse_args(["data.parquet"])
        assert args.input_file == "data.parquet"
        assert args.output is None
        assert args.categorical_threshold is None
        assert args.low_memory is None
        assert args.log_level is None

    def test_flags(self):
        args = build_parser().parse_args([
            "data.csv", "-o", "out.txt", "--categorical-threshold", "25",
            "--low-memory", "--log-level", "debug",
        ])
        assert args.output == "out.txt"
        assert args.categorical_threshold == 25
        assert args.low_memory is True
        assert args.log_level == "DEBUG"

    def test_threshold_help_mentions_display_cap(self):
        help_text = " ".join(build_parser().format_help().split())
        assert "Frequency tables still list at most 10 entries" in help_text

    def test_missing_input_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2


class TestMain:
    def test_report_to_stdout(self, parquet_file, capsys):
        assert main([str(parquet_file)]) == 0
        out = capsys.readouterr().out
        assert out.index("📊 File Analysis") < out.index("📋 Column Analysis")
        assert "📏 Shape: 5 rows × 3 columns" in out
        assert out.rstrip().endswith("✅ Analysis complete!")

    def test_report_to_file(self, parquet_file, tmp_path, capsys):
        output = tmp_path / "report.txt"
        assert main([str(parquet_file), "-o", str(output)]) == 0

        out = capsys.readouterr().out
        assert "📏 Shape: 5 rows × 3 columns" in out
        assert f"Summary written to: {output}" in out
        assert "📋 Column Analysis" not in out

        written = output.read_text(encoding="utf-8")
        assert written.startswith("📋 Column Analysis")
        assert "1. Column: 'amount' (int64)" in written

    def test_threshold_flag(self, tmp_path, many_categories, capsys):
        path = tmp_path / "labels.parquet"
        pd.DataFrame({"label": many_categories}).to_parquet(path, engine="pyarrow")

        assert main([str(path), "--categorical-threshold", "20"]) == 0
        out = capsys.readouterr().out
        assert "15 total unique values (showing top 10):" in out

    def test_missing_file(self, tmp_path, capsys):
        path = str(tmp_path / "missing.parquet")
        assert main([path]) == 1
        captured = capsys.readouterr()
        assert f"Error: Input file '{path}' does not exist" in captured.err
        assert "Column Analysis" not in captured.out

    def test_invalid_environment(self, parquet_file, monkeypatch, capsys):
        monkeypatch.setenv("TABLE_SUMMARY_DISPLAY_CAP", "none")
        assert main([str(parquet_file)]) == 1
        assert "Error: TABLE_SUMMARY_DISPLAY_CAP" in capsys.readouterr().err

    def test_negative_threshold_flag(self, parquet_file, capsys):
        assert main([str(parquet_file), "--categorical-threshold", "-1"]) == 1
        assert "Categorical threshold must be >= 0" in capsys.readouterr().err

    def test_unwritable_output(self, parquet_file, tmp_path, capsys):
        output = tmp_path / "no_such_dir" / "report.txt"
        assert main([str(parquet_file), "-o", str(output)]) == 1
        assert "Failed to write to output file" in capsys.readouterr().err
