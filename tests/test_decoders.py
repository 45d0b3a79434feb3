"""Tests for the CSV, JSON and spreadsheet decoders."""

import io

import pandas as pd
import pytest

from level1_ingestion.decoders import decode_csv, decode_json, decode_spreadsheet
from level1_ingestion.errors import FormatError


class TestDecodeCsv:
    def test_header_and_dynamic_typing(self):
        table, warnings = decode_csv("a,b\n1,x\n2,y\n3,z\n")

        assert table == [["a", "b"], [1, "x"], [2, "y"], [3, "z"]]
        assert warnings == []

    def test_blank_lines_are_skipped(self):
        table, _ = decode_csv("a\n\n1\n\n2\n")
        assert table == [["a"], [1], [2]]

    def test_quoted_fields_keep_commas(self):
        table, _ = decode_csv('name,notes\nAda,"x, y"\n')
        assert table == [["name", "notes"], ["Ada", "x, y"]]

    def test_empty_fields_become_none(self):
        table, _ = decode_csv("a,b,c\n1,,3\n")
        assert table[1] == [1, None, 3]

    def test_booleans_and_floats(self):
        table, _ = decode_csv("flag,ratio\ntrue,0.25\nFALSE,1e-2\n")
        assert table[1] == [True, 0.25]
        assert table[2] == [False, 0.01]

    def test_empty_content(self):
        assert decode_csv("") == ([], [])
        assert decode_csv("\n\n") == ([], [])

    def test_short_rows_are_padded_with_warning(self):
        table, warnings = decode_csv("a,b,c\n1,2\n4,5,6\n")

        assert table[1] == [1, 2, None]
        assert table[2] == [4, 5, 6]
        assert len(warnings) == 1
        assert warnings[0].row == 1
        assert "Too few fields" in warnings[0].message

    def test_long_rows_are_truncated_with_warning(self):
        table, warnings = decode_csv("a,b\n4,5\n1,2,3\n")

        assert table[1] == [4, 5]
        assert table[2] == [1, 2]
        assert len(warnings) == 1
        assert "Too many fields" in warnings[0].message


    def test_unterminated_quote_keeps_rest_of_file_with_warning(self):
        table, warnings = decode_csv('a,b\n1,2\n3,"x\n4,y\n')

        assert len(table) == 3
        assert table[1] == [1, 2]
        assert table[2][0] == 3
        assert table[2][1].startswith("x\n4,y")
        assert len(warnings) == 1
        assert warnings[0].row == 2
        assert "unterminated" in warnings[0].message

    def test_escaped_quotes_are_not_unterminated(self):
        table, warnings = decode_csv('name,quote\nAda,"say ""hi"""\nBob,5"\n')

        assert table[1] == ["Ada", 'say "hi"']
        assert table[2] == ["Bob", '5"']
        assert warnings == []


class TestDecodeJson:
    def test_array_of_objects(self):
        assert decode_json('[{"x":1},{"x":2}]') == [["x"], [1], [2]]

    def test_objects_are_projected_onto_first_keys(self):
        table = decode_json('[{"a":1,"b":2},{"b":3,"c":4}]')
        assert table == [["a", "b"], [1, 2], [None, 3]]

    def test_array_of_arrays_used_as_is(self):
        assert decode_json('[["a","b"],[1,2]]') == [["a", "b"], [1, 2]]

    def test_array_of_primitives_becomes_value_column(self):
        assert decode_json("[1, 2, 3]") == [["value"], [1], [2], [3]]

    def test_empty_array(self):
        assert decode_json("[]") == []

    def test_nested_values_kept_as_json_text(self):
        table = decode_json('[{"a": {"b": 1}}]')
        assert table == [["a"], ['{"b": 1}']]

    def test_non_array_root_is_rejected(self):
        with pytest.raises(FormatError, match="JSON must contain an array of data"):
            decode_json('{"a": 1}')

    def test_invalid_json_is_rejected(self):
        with pytest.raises(FormatError, match="Invalid JSON"):
            decode_json("[1, 2")

    def test_deep_nesting_is_rejected(self):
        with pytest.raises(FormatError, match="nesting too deep"):
            decode_json("[" * 100_000 + "]" * 100_000)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_are_rejected(self, literal):
        with pytest.raises(FormatError, match=literal):
            decode_json(f'[{{"x": {literal}}}]')


def _workbook_bytes(rows):
    buffer = io.BytesIO()
    pd.DataFrame(rows).to_excel(buffer, header=False, index=False, engine="openpyxl")
    return buffer.getvalue()


class TestDecodeSpreadsheet:
    def test_first_sheet_is_decoded(self):
        content = _workbook_bytes([["name", "score"], ["a", 1], ["b", 2]])

        table = decode_spreadsheet(content, "xlsx")

        assert table == [["name", "score"], ["a", 1], ["b", 2]]

    def test_empty_rows_are_dropped(self):
        content = _workbook_bytes([["name", "score"], ["a", 1], [None, None], ["b", 2]])

        table = decode_spreadsheet(content, "xlsx")

        assert table == [["name", "score"], ["a", 1], ["b", 2]]

    def test_garbage_bytes_are_rejected(self):
        with pytest.raises(FormatError):
            decode_spreadsheet(b"definitely not a workbook", "xlsx")
