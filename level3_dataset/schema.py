"""Dataset structures for Level 3.

A Dataset holds the same cells twice: column-wise (``columns[*].values``)
for type handling and row-wise (``rows``) for charting and export. Rows are
always derived from the columns.
"""

from dataclasses import dataclass, field
from typing import Optional

from level1_ingestion.cells import CellValue
from level2_inference.type_inferencer import ColumnType

Row = dict[str, CellValue]


@dataclass
class Column:
    """A named, typed sequence of cell values.

    ``original_type`` keeps the inferred type when ``type`` is edited.
    """

    name: str
    type: ColumnType
    original_type: ColumnType
    values: list[CellValue] = field(default_factory=list)


def rows_from_columns(columns: list[Column]) -> list[Row]:
    """Transpose column values into row dictionaries keyed by column name."""
    row_count = len(columns[0].values) if columns else 0
    return [
        {column.name: column.values[index] for column in columns}
        for index in range(row_count)
    ]


@dataclass
class Dataset:
    """Normalized in-memory table produced by the ingestion pipeline."""

    name: str
    columns: list[Column]
    rows: list[Row]

    @classmethod
    def from_columns(cls, name: str, columns: list[Column]) -> "Dataset":
        """Build a dataset whose rows are derived from ``columns``.

        Raises:
            ValueError: If the columns have different lengths
        """
        lengths = {len(column.values) for column in columns}
        if len(lengths) > 1:
            raise ValueError(f"Columns have different lengths: {sorted(lengths)}")
        return cls(name=name, columns=columns, rows=rows_from_columns(columns))

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    def get_column(self, name: str) -> Column:
        """Return the first column called ``name``.

        Raises:
            KeyError: If no column has that name
        """
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"Column '{name}' not found. Available columns: {self.column_names}")

    def find_column(self, name: Optional[str]) -> Optional[Column]:
        if name is None:
            return None
        return next((column for column in self.columns if column.name == name), None)

    def columns_of_type(self, column_type: ColumnType) -> list[Column]:
        return [column for column in self.columns if column.type == column_type]
