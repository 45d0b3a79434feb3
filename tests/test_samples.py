"""Tests for the built-in sample datasets."""

import pytest

from level2_inference.type_inferencer import ColumnType
from level3_dataset.samples import list_sample_datasets, load_sample_dataset


def test_listing():
    assert list_sample_datasets() == {
        "sales": "Sales Performance",
        "website": "Website Analytics",
        "survey": "Customer Survey",
        "stock": "Stock Prices",
        "ecommerce": "E-commerce Metrics",
    }


@pytest.mark.parametrize("key", ["sales", "website", "survey", "stock", "ecommerce"])
def test_samples_are_rectangular(key):
    dataset = load_sample_dataset(key)

    assert dataset.row_count > 0
    assert all(len(column.values) == dataset.row_count for column in dataset.columns)
    assert all(column.type is column.original_type for column in dataset.columns)


def test_stock_sample():
    dataset = load_sample_dataset("stock")

    assert dataset.column_names == ["Date", "AAPL", "GOOGL", "MSFT", "Volume"]
    assert dataset.get_column("Date").type is ColumnType.DATE
    assert dataset.rows[0]["AAPL"] == 185.64


def test_copies_are_independent():
    first = load_sample_dataset("sales")
    first.rows[0]["Revenue"] = 0
    assert load_sample_dataset("sales").rows[0]["Revenue"] == 45000


def test_unknown_sample():
    with pytest.raises(KeyError):
        load_sample_dataset("weather")
