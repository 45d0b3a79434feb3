"""Tests for dataset assembly."""

import pytest

from level1_ingestion.decoders import decode_csv, decode_json
from level1_ingestion.errors import FormatError
from level2_inference.type_inferencer import ColumnType
from level3_dataset.assembler import assemble_dataset, normalize_headers
from level3_dataset.schema import Column, Dataset


def _assert_consistent(dataset):
    for column in dataset.columns:
        assert len(column.values) == dataset.row_count
    names = set(dataset.column_names)
    for row in dataset.rows:
        assert set(row) == names


class TestNormalizeHeaders:
    def test_blank_header_gets_positional_name(self):
        assert normalize_headers(["a", "", "c"]) == ["a", "Column 2", "c"]
        assert normalize_headers(["a", None, "  "]) == ["a", "Column 2", "Column 3"]

    def test_whitespace_is_trimmed(self):
        assert normalize_headers(["  name ", "age\t"]) == ["name", "age"]

    def test_non_text_headers(self):
        assert normalize_headers([2024, 1.0, 2.5, True]) == ["2024", "1", "2.5", "true"]

    def test_duplicates_are_kept(self):
        assert normalize_headers(["a", "a"]) == ["a", "a"]


class TestAssembleDataset:
    def test_csv_scenario(self):
        table, _ = decode_csv("a,b\n1,x\n2,y\n3,z\n")

        dataset = assemble_dataset(table, "letters.csv")

        assert dataset.name == "letters"
        a, b = dataset.columns
        assert (a.name, a.type, a.values) == ("a", ColumnType.NUMBER, [1, 2, 3])
        assert (b.name, b.type, b.values) == ("b", ColumnType.STRING, ["x", "y", "z"])
        assert a.original_type is ColumnType.NUMBER
        assert dataset.rows == [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}, {"a": 3, "b": "z"}]
        _assert_consistent(dataset)

    def test_json_scenario(self):
        dataset = assemble_dataset(decode_json('[{"x":1},{"x":2}]'), "points.json")

        assert dataset.column_names == ["x"]
        assert dataset.rows == [{"x": 1}, {"x": 2}]

    def test_blank_header_in_middle(self):
        dataset = assemble_dataset([["a", "", "c"], [1, 2, 3]], "t.csv")
        assert dataset.column_names == ["a", "Column 2", "c"]
        _assert_consistent(dataset)

    def test_only_final_extension_is_removed(self):
        dataset = assemble_dataset([["a"], [1]], "sales.2024.csv")
        assert dataset.name == "sales.2024"

    def test_ragged_rows_are_aligned_to_header(self):
        dataset = assemble_dataset([["a", "b"], [1], [2, 3, 4]], "t.csv")

        assert dataset.get_column("a").values == [1, 2]
        assert dataset.get_column("b").values == [None, 3]
        _assert_consistent(dataset)

    def test_header_only_table(self):
        dataset = assemble_dataset([["a", "b"]], "empty.csv")

        assert dataset.row_count == 0
        assert all(column.type is ColumnType.STRING for column in dataset.columns)

    def test_empty_table_is_rejected(self):
        with pytest.raises(FormatError, match="No data found"):
            assemble_dataset([], "empty.csv")

    def test_duplicate_names_are_not_renamed(self):
        dataset = assemble_dataset([["a", "a"], [1, 2]], "dup.csv")

        assert dataset.column_names == ["a", "a"]
        assert dataset.columns[0].values == [1]
        assert dataset.columns[1].values == [2]


class TestDataset:
    def test_from_columns_rejects_uneven_lengths(self):
        columns = [
            Column("a", ColumnType.NUMBER, ColumnType.NUMBER, [1, 2]),
            Column("b", ColumnType.NUMBER, ColumnType.NUMBER, [1]),
        ]
        with pytest.raises(ValueError, match="different lengths"):
            Dataset.from_columns("bad", columns)

    def test_get_column_unknown(self, small_dataset):
        with pytest.raises(KeyError):
            small_dataset.get_column("missing")

    def test_columns_of_type(self, small_dataset):
        assert [column.name for column in small_dataset.columns_of_type(ColumnType.NUMBER)] == ["units"]
