"""Schema editing and validation for Level 3.

Users may rename columns and override inferred types before charting.
Edits produce new column lists; the dataset only changes once an edited
schema validates. Validation reports problems as messages and never fixes
them.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field, replace

from level2_inference.type_inferencer import ColumnType

from .schema import Column, Dataset

logger = logging.getLogger(__name__)


@dataclass
class SchemaValidationResult:
    """Outcome of schema validation; invalid schemas block charting."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _check_index(columns: list[Column], index: int) -> None:
    if not 0 <= index < len(columns):
        raise IndexError(f"Column index {index} out of range for {len(columns)} columns")


def rename_column(columns: list[Column], index: int, name: str) -> list[Column]:
    """Return a copy of ``columns`` with column ``index`` renamed.

    The name is stored as typed; trimming happens during validation.
    """
    _check_index(columns, index)
    updated = list(columns)
    updated[index] = replace(columns[index], name=name)
    return updated


def set_column_type(columns: list[Column], index: int, column_type: ColumnType | str) -> list[Column]:
    """Return a copy of ``columns`` with the type of column ``index`` overridden.

    ``original_type`` is left untouched.
    """
    _check_index(columns, index)
    updated = list(columns)
    updated[index] = replace(columns[index], type=ColumnType(column_type))
    return updated


def validate_schema(columns: list[Column]) -> SchemaValidationResult:
    """Check column names.

    A schema is invalid when a name is empty after trimming or when two
    names are equal ignoring case and surrounding whitespace.
    """
    result = SchemaValidationResult()

    empty_count = sum(1 for column in columns if not column.name.strip())
    if empty_count:
        noun = "column has an empty name" if empty_count == 1 else "columns have empty names"
        result.errors.append(f"{empty_count} {noun}")

    names = [column.name.strip().lower() for column in columns if column.name.strip()]
    duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
    if duplicates:
        result.errors.append(f"Duplicate column names detected: {', '.join(duplicates)}")

    if result.errors:
        logger.debug(f"Schema validation failed: {result.errors}")
    return result


def apply_schema(dataset: Dataset, columns: list[Column]) -> tuple[Dataset, SchemaValidationResult]:
    """Apply an edited schema to a dataset.

    When the edited columns validate, a new Dataset is returned with names
    trimmed and rows rebuilt under the new names. Otherwise the original
    dataset is returned unchanged together with the validation errors.
    """
    result = validate_schema(columns)
    if not result.is_valid:
        return dataset, result

    trimmed = [replace(column, name=column.name.strip()) for column in columns]
    logger.info(f"Applied schema edits to dataset '{dataset.name}'")
    return Dataset.from_columns(dataset.name, trimmed), result


def reset_schema(dataset: Dataset) -> Dataset:
    """Return a dataset whose column types are back to the inferred ones."""
    columns = [replace(column, type=column.original_type) for column in dataset.columns]
    return Dataset(name=dataset.name, columns=columns, rows=dataset.rows)
