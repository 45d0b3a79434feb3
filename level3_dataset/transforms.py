"""Row-level transforms over a Dataset.

Filtering, grouping with aggregation, sorting and per-column statistics
used by the transform step before charting. Inputs are never modified.
"""

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

import numpy as np

from level1_ingestion.cells import CellValue
from level2_inference.type_inferencer import is_numeric_value

from .schema import Dataset, Row

logger = logging.getLogger(__name__)


class FilterOperator(str, Enum):
    EQUALS = "equals"
    CONTAINS = "contains"
    GREATER = "greater"
    LESS = "less"
    BETWEEN = "between"


class AggregateOperation(str, Enum):
    SUM = "sum"
    AVG = "avg"
    COUNT = "count"
    MIN = "min"
    MAX = "max"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class FilterCondition:
    """A single row filter; ``value2`` is the upper bound for ``between``."""

    column: str
    operator: FilterOperator
    value: Any
    value2: Any = None


@dataclass(frozen=True)
class Aggregation:
    """An aggregate computed per group, stored under ``alias``."""

    column: str
    operation: AggregateOperation
    alias: Optional[str] = None

    @property
    def output_name(self) -> str:
        return self.alias or f"{AggregateOperation(self.operation).value}_{self.column}"


@dataclass(frozen=True)
class ColumnStats:
    """Summary statistics over the numeric values of a column."""

    count: int
    min: float
    max: float
    mean: float
    median: float
    std: float


def to_number(value: CellValue) -> Optional[float]:
    """Numeric value of a cell, or None when it is not a number."""
    if is_numeric_value(value):
        return float(value)
    return None


def _numbers(values: Sequence[CellValue]) -> list[float]:
    return [number for number in map(to_number, values) if number is not None]


def _matches(row: Row, condition: FilterCondition) -> bool:
    value = row.get(condition.column)
    operator = FilterOperator(condition.operator)

    if operator is FilterOperator.EQUALS:
        return value == condition.value
    if operator is FilterOperator.CONTAINS:
        return str(condition.value).lower() in str(value).lower()

    number = to_number(value)
    bound = to_number(condition.value)
    if number is None or bound is None:
        return False
    if operator is FilterOperator.GREATER:
        return number > bound
    if operator is FilterOperator.LESS:
        return number < bound

    upper = to_number(condition.value2)
    return upper is not None and bound <= number <= upper


def filter_rows(rows: list[Row], filters: Sequence[FilterCondition]) -> list[Row]:
    """Keep the rows that satisfy every filter.

    Numeric operators compare numeric values only; rows whose cell is not
    a number never match them.
    """
    if not filters:
        return rows
    return [row for row in rows if all(_matches(row, condition) for condition in filters)]


def _aggregate(rows: list[Row], aggregation: Aggregation) -> float:
    operation = AggregateOperation(aggregation.operation)
    if operation is AggregateOperation.COUNT:
        return len(rows)

    values = _numbers([row.get(aggregation.column) for row in rows])
    if not values:
        return 0
    if operation is AggregateOperation.SUM:
        return float(np.sum(values))
    if operation is AggregateOperation.AVG:
        return float(np.mean(values))
    if operation is AggregateOperation.MIN:
        return float(np.min(values))
    return float(np.max(values))


def aggregate_rows(
    rows: list[Row], group_by: Sequence[str], aggregations: Sequence[Aggregation]
) -> list[Row]:
    """Group rows by ``group_by`` and compute aggregates per group.

    Groups appear in first-seen order. Aggregates over a group without
    numeric values are 0. Without ``group_by`` the rows are returned as-is.
    """
    if not group_by:
        return rows

    groups: dict[tuple, list[Row]] = {}
    for row in rows:
        key = tuple((isinstance(row.get(column), bool), row.get(column)) for column in group_by)
        groups.setdefault(key, []).append(row)

    result = []
    for key, group_rows in groups.items():
        output: Row = {column: value for column, (_, value) in zip(group_by, key)}
        for aggregation in aggregations:
            output[aggregation.output_name] = _aggregate(group_rows, aggregation)
        result.append(output)

    logger.debug(f"Aggregated {len(rows)} rows into {len(result)} groups by {list(group_by)}")
    return result


def _is_number(value: CellValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _compare(a: CellValue, b: CellValue) -> int:
    if _is_number(a) and _is_number(b):
        return (a > b) - (a < b)
    text_a, text_b = str(a).lower(), str(b).lower()
    return (text_a > text_b) - (text_a < text_b)


def sort_rows(
    rows: list[Row], column: str, direction: SortDirection | str = SortDirection.ASC
) -> list[Row]:
    """Return rows sorted by ``column``.

    Two numbers compare numerically; anything else compares as
    lowercased text. The sort is stable.
    """
    descending = SortDirection(direction) is SortDirection.DESC
    key = functools.cmp_to_key(lambda a, b: _compare(a.get(column), b.get(column)))
    return sorted(rows, key=key, reverse=descending)


def unique_values(dataset: Dataset, column: str) -> list[CellValue]:
    """Distinct non-null values of a column in first-seen order."""
    seen = set()
    values = []
    for row in dataset.rows:
        value = row.get(column)
        marker = (isinstance(value, bool), value)
        if value is None or marker in seen:
            continue
        seen.add(marker)
        values.append(value)
    return values


def column_stats(dataset: Dataset, column: str) -> ColumnStats:
    """Compute statistics over the numeric values of a column.

    Mean, median and (population) standard deviation are rounded to two
    decimals. A column without numeric values yields all zeros.
    """
    values = _numbers([row.get(column) for row in dataset.rows])
    if not values:
        return ColumnStats(count=0, min=0.0, max=0.0, mean=0.0, median=0.0, std=0.0)

    array = np.asarray(values, dtype=float)
    return ColumnStats(
        count=len(values),
        min=float(array.min()),
        max=float(array.max()),
        mean=round(float(array.mean()), 2),
        median=round(float(np.median(array)), 2),
        std=round(float(array.std()), 2),
    )
