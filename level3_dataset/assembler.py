"""Dataset assembler for Level 3.

Joins the header row, the inferred column types and the data rows of a
RawTable into a Dataset.
"""

import logging
from typing import Optional

from level1_ingestion.cells import CellValue, is_missing
from level1_ingestion.decoders import RawTable
from level1_ingestion.errors import FormatError
from level2_inference.type_inferencer import infer_column_type
from settings.schema import InferenceThresholds
from utils import strip_extension

from .schema import Column, Dataset

logger = logging.getLogger(__name__)


def _header_text(cell: CellValue) -> str:
    if isinstance(cell, bool):
        return "true" if cell else "false"
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell).strip()


def normalize_headers(header_row: list[CellValue]) -> list[str]:
    """Trim header cells and name blank ones ``Column N`` (1-indexed).

    Duplicate names are kept as they are; schema validation reports them.
    """
    headers = []
    for index, cell in enumerate(header_row):
        text = "" if is_missing(cell) else _header_text(cell)
        headers.append(text if text else f"Column {index + 1}")
    return headers


def assemble_dataset(
    raw_table: RawTable,
    file_name: str,
    thresholds: Optional[InferenceThresholds] = None,
) -> Dataset:
    """Build a Dataset from a decoded table.

    The first row provides the column names. Data rows shorter than the
    header are padded with None; cells beyond the header are ignored.

    Args:
        raw_table: Decoded rows, header first
        file_name: Source file name; its final extension is dropped for the dataset name
        thresholds: Inference thresholds (defaults used when omitted)

    Returns:
        Dataset with inferred column types

    Raises:
        FormatError: If the table is empty
    """
    if not raw_table:
        raise FormatError("No data found in file")

    headers = normalize_headers(raw_table[0])
    data_rows = raw_table[1:]

    columns = []
    for index, name in enumerate(headers):
        values = [row[index] if index < len(row) else None for row in data_rows]
        column_type = infer_column_type(values, thresholds)
        columns.append(Column(name=name, type=column_type, original_type=column_type, values=values))
        logger.debug(f"Column '{name}': type={column_type.value}, values={len(values)}")

    dataset = Dataset.from_columns(strip_extension(file_name), columns)
    logger.info(
        f"Assembled dataset '{dataset.name}': {dataset.row_count} rows, {len(columns)} columns"
    )
    return dataset
