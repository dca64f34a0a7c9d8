"""
Tests for the command line interface.

These tests verify:
1. Command output for the illustrative data
2. Exit codes for success, empty results and input errors
3. File exports from the CLI
"""

import pytest

from cli import create_parser, format_contradictions, main
from core.contradictions import filter_contradictions
from core.truth_table import RowClass

DATASET_CSV = """case,A,Y
a,0.8,0.3
b,0.7,0.9
c,0.1,0.2
"""

TRUTH_TABLE_CSV = """A,OUT,cases
1,1,"a,b"
0,0,c
"""


@pytest.fixture
def files(tmp_path):
    data = tmp_path / "data.csv"
    data.write_text(DATASET_CSV, encoding="utf-8")
    tt = tmp_path / "tt.csv"
    tt.write_text(TRUTH_TABLE_CSV, encoding="utf-8")
    return str(data), str(tt)


class TestParser:

    def test_filter_defaults(self):
        args = create_parser().parse_args(["filter", "d.csv", "t.csv"])

        assert args.rows == "consistent"
        assert args.outcome == "Y"
        assert args.export is None

    def test_bad_row_class_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            create_parser().parse_args(["filter", "d.csv", "t.csv", "--rows", "sometimes"])

        assert exc.value.code == 2

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "qca-contra" in capsys.readouterr().out


class TestDemo:

    def test_demo_lists_both_row_kinds(self, capsys):
        assert main(["demo"]) == 0

        out = capsys.readouterr().out
        assert "Contradictory cases (consistent rows)" in out
        assert "Contradictory cases (inconsistent rows)" in out
        assert "Total: 1" in out
        assert "Total: 6" in out

    def test_demo_single_row_class(self, capsys):
        assert main(["demo", "--rows", "inconsistent"]) == 0

        out = capsys.readouterr().out
        assert "(consistent rows)" not in out
        assert "inconsistent row" in out

    def test_demo_export(self, capsys, tmp_path):
        assert main(["demo", "--rows", "both", "--export", str(tmp_path), "--format", "json"]) == 0

        assert len(list(tmp_path.glob("contradictions_both_*.json"))) == 1

    def test_demo_export_error_exits_one(self, capsys, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory", encoding="utf-8")

        assert main(["demo", "--export", str(blocker / "sub")]) == 1
        assert "ERROR:" in capsys.readouterr().err


class TestFilter:

    def test_filter_both(self, files, capsys):
        data, tt = files

        assert main(["filter", data, tt, "--rows", "both", "--tt-sep", ","]) == 0

        out = capsys.readouterr().out
        assert "consistent row" in out
        assert "inconsistent row" in out
        assert "Total: 2" in out

    def test_empty_result_exits_zero(self, files, capsys):
        data, tt = files

        assert main(["filter", data, tt, "--rows", "consistent", "--outcome", "A", "--tt-sep", ","]) == 0

        assert "No contradictions found." in capsys.readouterr().out

    def test_missing_outcome_exits_one(self, files, capsys):
        data, tt = files

        assert main(["filter", data, tt, "--outcome", "Z", "--tt-sep", ","]) == 1

        assert "ERROR: Column 'Z' not found in dataset." in capsys.readouterr().err

    def test_unknown_case_exits_one(self, files, tmp_path, capsys):
        data, _ = files
        tt = tmp_path / "bad_tt.csv"
        tt.write_text('OUT,cases\n1,"a,zz"\n', encoding="utf-8")

        assert main(["filter", data, str(tt), "--tt-sep", ","]) == 1

        assert "zz" in capsys.readouterr().err

    def test_missing_file_exits_one(self, tmp_path, capsys):
        assert main(["filter", str(tmp_path / "nope.csv"), str(tmp_path / "tt.csv")]) == 1

        assert "ERROR:" in capsys.readouterr().err

    def test_export_csv(self, files, tmp_path, capsys):
        data, tt = files
        out_dir = tmp_path / "out"

        assert main(["filter", data, tt, "--tt-sep", ",", "--export", str(out_dir)]) == 0

        assert len(list(out_dir.glob("contradictions_consistent_*.csv"))) == 1
        assert "Exported to:" in capsys.readouterr().out


class TestDcc:

    def test_dcc_table(self, files, capsys):
        data, tt = files

        assert main(["dcc", data, tt, "--tt-sep", ","]) == 0

        out = capsys.readouterr().out
        assert "dcc" in out
        assert "a,b" in out


def test_format_empty_result(dataset, truth_table):
    data = dataset.assign(Y=0.9)
    contra = filter_contradictions(data, truth_table, RowClass.BOTH, outcome="Y")

    text = format_contradictions(contra, RowClass.BOTH)

    assert text.endswith("No contradictions found.")
