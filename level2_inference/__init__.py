"""Level 2: Column type inference.

Heuristic classification of column values into number, date, category
or string.
"""

from .type_inferencer import (
    DATE_PATTERNS,
    ColumnType,
    ValueBucket,
    classify_value,
    infer_column_type,
    infer_column_types,
    is_date_value,
    is_numeric_value,
    match_date_pattern,
)

__all__ = [
    "DATE_PATTERNS",
    "ColumnType",
    "ValueBucket",
    "classify_value",
    "infer_column_type",
    "infer_column_types",
    "is_date_value",
    "is_numeric_value",
    "match_date_pattern",
]
