"""Tests for cell coercion rules."""

import math
from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from level1_ingestion.cells import MAX_SAFE_INTEGER, coerce_text_cell, is_missing, normalize_cell


class TestCoerceTextCell:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1", 1),
            ("-42", -42),
            ("007", 7),
            ("2.5", 2.5),
            (".5", 0.5),
            ("1e3", 1000.0),
            (" 12 ", 12),
        ],
    )
    def test_number_literals(self, text, expected):
        result = coerce_text_cell(text)
        assert result == expected
        assert not isinstance(result, str)

    def test_integral_literal_stays_int(self):
        assert isinstance(coerce_text_cell("3"), int)
        assert isinstance(coerce_text_cell("3.0"), float)

    @pytest.mark.parametrize("text", ["true", "TRUE", "True"])
    def test_true_literals(self, text):
        assert coerce_text_cell(text) is True

    @pytest.mark.parametrize("text", ["false", "FALSE", "False"])
    def test_false_literals(self, text):
        assert coerce_text_cell(text) is False

    def test_empty_is_none(self):
        assert coerce_text_cell("") is None

    @pytest.mark.parametrize("text", ["abc", "1,000", "1_000", "+5", "12abc", "NaN", "Infinity", " "])
    def test_other_text_is_unchanged(self, text):
        assert coerce_text_cell(text) == text

    def test_non_ascii_digits_stay_text(self):
        assert coerce_text_cell("\u0661\u0662") == "\u0661\u0662"
        assert coerce_text_cell("\uff13") == "\uff13"

    def test_integers_beyond_double_precision_stay_text(self):
        text = str(MAX_SAFE_INTEGER + 2)
        assert coerce_text_cell(text) == text


class TestNormalizeCell:
    def test_nan_becomes_none(self):
        assert normalize_cell(float("nan")) is None
        assert normalize_cell(np.nan) is None
        assert normalize_cell(pd.NaT) is None

    def test_numpy_scalars_become_python(self):
        assert type(normalize_cell(np.int64(3))) is int
        assert type(normalize_cell(np.float64(2.5))) is float
        assert normalize_cell(np.bool_(True)) is True

    def test_timestamps_become_iso_text(self):
        assert normalize_cell(pd.Timestamp("2024-01-05")) == "2024-01-05"
        assert normalize_cell(datetime(2024, 1, 5, 13, 30)) == "2024-01-05T13:30:00"
        assert normalize_cell(date(2024, 1, 5)) == "2024-01-05"

    def test_plain_values_pass_through(self):
        assert normalize_cell("x") == "x"
        assert normalize_cell(None) is None
        assert normalize_cell(False) is False
        assert not math.isnan(normalize_cell(1.5))


def test_is_missing():
    assert is_missing(None)
    assert is_missing("")
    assert not is_missing(0)
    assert not is_missing(False)
    assert not is_missing(" ")
