"""Tests for row filters, aggregation, sorting and column statistics."""

import pytest

from level3_dataset.transforms import (
    AggregateOperation,
    Aggregation,
    ColumnStats,
    FilterCondition,
    FilterOperator,
    aggregate_rows,
    column_stats,
    filter_rows,
    sort_rows,
    unique_values,
)


class TestFilterRows:
    def test_no_filters_returns_rows(self, small_dataset):
        assert filter_rows(small_dataset.rows, []) == small_dataset.rows

    def test_equals(self, small_dataset):
        rows = filter_rows(small_dataset.rows, [FilterCondition("region", FilterOperator.EQUALS, "North")])
        assert [row["units"] for row in rows] == [10, 7]

    def test_contains_is_case_insensitive(self, small_dataset):
        rows = filter_rows(small_dataset.rows, [FilterCondition("region", "contains", "OUT")])
        assert [row["region"] for row in rows] == ["South"]

    def test_greater_and_less(self, small_dataset):
        greater = filter_rows(small_dataset.rows, [FilterCondition("units", "greater", 6)])
        less = filter_rows(small_dataset.rows, [FilterCondition("units", "less", "6")])

        assert [row["units"] for row in greater] == [10, 7]
        assert [row["units"] for row in less] == [5]

    def test_between_is_inclusive(self, small_dataset):
        rows = filter_rows(small_dataset.rows, [FilterCondition("units", "between", 5, 7)])
        assert [row["units"] for row in rows] == [5, 7]

    def test_all_filters_must_match(self, small_dataset):
        rows = filter_rows(
            small_dataset.rows,
            [
                FilterCondition("region", "equals", "North"),
                FilterCondition("units", "greater", 8),
            ],
        )
        assert [row["label"] for row in rows] == ["a"]


class TestAggregateRows:
    def test_group_and_aggregate(self, small_dataset):
        result = aggregate_rows(
            small_dataset.rows,
            ["region"],
            [
                Aggregation("units", AggregateOperation.SUM),
                Aggregation("units", "avg", alias="mean_units"),
                Aggregation("units", "count"),
                Aggregation("units", "min"),
                Aggregation("units", "max"),
            ],
        )

        assert result[0] == {
            "region": "North",
            "sum_units": 17.0,
            "mean_units": 8.5,
            "count_units": 2,
            "min_units": 7.0,
            "max_units": 10.0,
        }
        assert [row["region"] for row in result] == ["North", "South", "East"]

    def test_group_without_numbers_yields_zero(self, small_dataset):
        result = aggregate_rows(small_dataset.rows, ["region"], [Aggregation("units", "avg")])
        assert result[-1] == {"region": "East", "avg_units": 0}

    def test_no_group_by_returns_rows(self, small_dataset):
        assert aggregate_rows(small_dataset.rows, [], [Aggregation("units", "sum")]) == small_dataset.rows


class TestSortRows:
    def test_numeric_sort(self):
        rows = [{"v": 10}, {"v": 2}, {"v": 33}]
        assert [row["v"] for row in sort_rows(rows, "v")] == [2, 10, 33]
        assert [row["v"] for row in sort_rows(rows, "v", "desc")] == [33, 10, 2]

    def test_text_sort_is_case_insensitive(self):
        rows = [{"v": "banana"}, {"v": "Apple"}, {"v": "cherry"}]
        assert [row["v"] for row in sort_rows(rows, "v")] == ["Apple", "banana", "cherry"]

    def test_input_is_not_modified(self):
        rows = [{"v": 2}, {"v": 1}]
        sort_rows(rows, "v")
        assert rows == [{"v": 2}, {"v": 1}]


def test_unique_values(small_dataset):
    assert unique_values(small_dataset, "region") == ["North", "South", "East"]
    assert unique_values(small_dataset, "units") == [10, 5, 7]


class TestColumnStats:
    def test_numeric_column(self, small_dataset):
        stats = column_stats(small_dataset, "units")

        assert stats.count == 3
        assert stats.min == 5
        assert stats.max == 10
        assert stats.mean == pytest.approx(7.33)
        assert stats.median == 7
        assert stats.std == pytest.approx(2.05)

    def test_non_numeric_column(self, small_dataset):
        assert column_stats(small_dataset, "label") == ColumnStats(0, 0.0, 0.0, 0.0, 0.0, 0.0)
