"""Level 3: Dataset assembly and editing.

This module assembles decoded tables into typed Datasets and provides the
schema editing, transform and export operations applied to them.
"""

from .assembler import assemble_dataset, normalize_headers
from .exporter import dataset_to_csv, dataset_to_frame
from .samples import list_sample_datasets, load_sample_dataset
from .schema import Column, Dataset, Row, rows_from_columns
from .schema_editor import (
    SchemaValidationResult,
    apply_schema,
    rename_column,
    reset_schema,
    set_column_type,
    validate_schema,
)
from .transforms import (
    AggregateOperation,
    Aggregation,
    ColumnStats,
    FilterCondition,
    FilterOperator,
    SortDirection,
    aggregate_rows,
    column_stats,
    filter_rows,
    sort_rows,
    unique_values,
)

__all__ = [
    "AggregateOperation",
    "Aggregation",
    "Column",
    "ColumnStats",
    "Dataset",
    "FilterCondition",
    "FilterOperator",
    "Row",
    "SchemaValidationResult",
    "SortDirection",
    "aggregate_rows",
    "apply_schema",
    "assemble_dataset",
    "column_stats",
    "dataset_to_csv",
    "dataset_to_frame",
    "filter_rows",
    "list_sample_datasets",
    "load_sample_dataset",
    "normalize_headers",
    "rename_column",
    "reset_schema",
    "rows_from_columns",
    "set_column_type",
    "sort_rows",
    "unique_values",
    "validate_schema",
]
