"""Console output for the DataVision CLI."""

import json
import sys

from level1_ingestion.decoders import ParseWarning
from level3_dataset.schema import Dataset
from level3_dataset.schema_editor import SchemaValidationResult
from level4_charts.recommender import ChartRecommendation


def display_dataset(dataset: Dataset) -> None:
    """Print the dataset's columns with their inferred types as a numbered list."""
    print(f"\nDataset: {dataset.name}")
    print(f"✓ {dataset.row_count:,} rows, {len(dataset.columns)} columns")
    print("\nColumns:")
    width = max((len(column.name) for column in dataset.columns), default=0)
    for i, column in enumerate(dataset.columns, 1):
        print(f"  {i}. {column.name.ljust(width)}  {column.type.value}")


def display_warnings(warnings: list[ParseWarning]) -> None:
    if not warnings:
        return
    print(f"\n⚠ {len(warnings)} parse warnings:", file=sys.stderr)
    for warning in warnings:
        where = f"row {warning.row}: " if warning.row is not None else ""
        print(f"  - {where}{warning.message}", file=sys.stderr)


def display_validation(result: SchemaValidationResult) -> None:
    if result.is_valid:
        return
    print("\n✗ Schema validation errors:", file=sys.stderr)
    for error in result.errors:
        print(f"  - {error}", file=sys.stderr)


def display_recommendations(recommendations: list[ChartRecommendation]) -> None:
    if not recommendations:
        return
    print("\nRecommended charts:")
    for recommendation in recommendations:
        print(
            f"  - {recommendation.type.value} ({round(recommendation.confidence * 100)}%): "
            f"{recommendation.reason}"
        )


def dataset_summary(dataset: Dataset) -> dict:
    """JSON-ready summary of a dataset."""
    return {
        "name": dataset.name,
        "row_count": dataset.row_count,
        "columns": [
            {
                "name": column.name,
                "type": column.type.value,
                "original_type": column.original_type.value,
            }
            for column in dataset.columns
        ],
    }


def print_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2, default=str))
