"""Tests for dataset and truth table loaders."""

import io
import json

import pandas as pd
import pytest

from core.contradictions import filter_contradictions
from core.errors import MissingColumn
from core.loaders import load_dataset, load_truth_table, read_table, set_case_labels
from core.truth_table import RowClass

DATASET_CSV = """case,A,B,Y
a,0.8,0.1,0.3
b,0.7,0.2,0.9
c,0.1,0.9,0.2
"""

TRUTH_TABLE_CSV = """A,B,OUT,n,incl,cases
1,0,1,2,0.85,"a,b"
0,1,0,1,0.20,c
"""


@pytest.fixture
def dataset_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text(DATASET_CSV, encoding="utf-8")
    return str(path)


@pytest.fixture
def truth_table_file(tmp_path):
    path = tmp_path / "tt.csv"
    path.write_text(TRUTH_TABLE_CSV, encoding="utf-8")
    return str(path)


class TestDataset:

    def test_first_text_column_becomes_index(self, dataset_file):
        df = load_dataset(dataset_file)

        assert list(df.index) == ["a", "b", "c"]
        assert df.index.name == "case"
        assert list(df.columns) == ["A", "B", "Y"]

    def test_explicit_case_column(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("Y,id\n0.3,x\n0.6,y\n", encoding="utf-8")

        df = load_dataset(str(path), case_column="id", sep=",")

        assert list(df.index) == ["x", "y"]

    def test_missing_case_column(self, dataset_file):
        with pytest.raises(MissingColumn):
            load_dataset(dataset_file, case_column="nope")

    def test_numeric_first_column_keeps_index(self):
        df = set_case_labels(pd.DataFrame({"A": [0.1, 0.2], "Y": [0.3, 0.4]}))

        assert list(df.index) == ["0", "1"]

    def test_semicolon_delimiter(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("case;A;Y\na;0.8;0.3\n", encoding="utf-8")

        df = load_dataset(str(path), sep=";")

        assert df.loc["a", "Y"] == 0.3

    def test_buffer_source(self):
        buf = io.BytesIO(DATASET_CSV.encode("utf-8"))

        df = load_dataset(buf, name="upload.csv", sep=",")

        assert len(df) == 3


class TestTruthTable:

    def test_csv_cases_become_sets(self, truth_table_file):
        tt = load_truth_table(truth_table_file, sep=",")

        assert tt["cases"].iloc[0] == frozenset({"a", "b"})
        assert tt["cases"].iloc[1] == frozenset({"c"})
        assert list(tt["OUT"]) == [1, 0]

    def test_json_records(self, tmp_path):
        path = tmp_path / "tt.json"
        path.write_text(json.dumps([
            {"A": 1, "OUT": 1, "cases": ["a", "b"]},
            {"A": 0, "OUT": "?", "cases": []},
        ]), encoding="utf-8")

        tt = load_truth_table(str(path))

        assert tt["cases"].iloc[0] == frozenset({"a", "b"})
        assert tt["OUT"].isna().iloc[1]

    def test_r_export_row_ids(self, tmp_path):
        path = tmp_path / "tt.csv"
        path.write_text(',A,OUT,cases\n2,1,1,"a,b"\n1,0,0,c\n', encoding="utf-8")

        tt = load_truth_table(str(path), sep=",")

        assert list(tt.index) == [2, 1]
        assert "Unnamed: 0" not in tt.columns

    def test_files_feed_the_filter(self, dataset_file, truth_table_file):
        dataset = load_dataset(dataset_file)
        tt = load_truth_table(truth_table_file, sep=",")

        contra = filter_contradictions(dataset, tt, RowClass.BOTH, outcome="Y")

        assert list(contra.index) == ["a", "c"]
        assert list(contra["type"]) == ["consistent row", "inconsistent row"]


def test_read_table_json_by_extension(tmp_path):
    path = tmp_path / "rows.json"
    path.write_text(json.dumps([{"x": 1}, {"x": 2}]), encoding="utf-8")

    df = read_table(str(path))

    assert list(df["x"]) == [1, 2]


def test_legacy_xls_is_rejected(tmp_path):
    path = tmp_path / "data.xls"
    path.write_bytes(b"\xd0\xcf\x11\xe0")

    with pytest.raises(ValueError, match="xls"):
        read_table(str(path))
