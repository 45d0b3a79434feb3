"""Format decoders for Level 1 ingestion.

Each decoder turns file content into a RawTable: a list of rows of plain
cell values whose first row is the header candidate. Decoders are pure and
keep no state between calls.
"""

import io
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import pandas as pd

from .cells import CellValue, coerce_text_cell, is_missing, normalize_cell
from .errors import FormatError

logger = logging.getLogger(__name__)

RawTable = list[list[CellValue]]

PRIMITIVE_COLUMN_NAME = "value"


@dataclass
class ParseWarning:
    """A non-fatal irregularity found while decoding delimited text.

    ``row`` is the 0-based position in the decoded table (header included)
    when it is known.
    """

    message: str
    row: Optional[int] = None


@dataclass
class DecodeResult:
    """Decoded table plus any warnings collected on the way."""

    table: RawTable
    warnings: list[ParseWarning] = field(default_factory=list)


def decode_csv(content: str) -> tuple[RawTable, list[ParseWarning]]:
    """Decode comma-delimited text.

    Blank lines are skipped and every field goes through dynamic typing.
    Ragged rows are aligned on a best-effort basis: missing trailing fields
    become None and extra fields are dropped. A quote left open runs to
    the end of the input. Each such irregularity is reported as a
    ParseWarning.

    Args:
        content: CSV text

    Returns:
        Tuple of (RawTable, list of ParseWarning)

    Raises:
        FormatError: If the text cannot be tokenized at all
    """
    warnings: list[ParseWarning] = []
    if not content.strip():
        return [], warnings

    unterminated_quote = _has_unterminated_quote(content)
    if unterminated_quote:
        # close it at end of input so the partial row survives
        content += '"'

    reader_options = dict(
        header=None,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
    )

    try:
        first_line = pd.read_csv(io.StringIO(content), nrows=1, **reader_options)
        width = first_line.shape[1]

        def align_long_row(fields: list[str]) -> list[str]:
            warnings.append(
                ParseWarning(
                    message=f"Too many fields: expected {width}, found {len(fields)}; extra fields dropped"
                )
            )
            return fields[:width]

        frame = pd.read_csv(io.StringIO(content), on_bad_lines=align_long_row, **reader_options)
    except pd.errors.EmptyDataError:
        return [], warnings
    except pd.errors.ParserError as e:
        raise FormatError(f"Failed to parse CSV content: {e}") from e

    table: RawTable = []
    for row_index, raw_row in enumerate(frame.itertuples(index=False, name=None)):
        row: list[CellValue] = []
        missing_fields = 0
        for cell in raw_row:
            if isinstance(cell, str):
                row.append(coerce_text_cell(cell))
            else:
                missing_fields += 1
                row.append(None)
        if missing_fields:
            warnings.append(
                ParseWarning(
                    message=f"Too few fields: expected {width}, found {width - missing_fields}",
                    row=row_index,
                )
            )
        table.append(row)

    if unterminated_quote:
        warnings.append(
            ParseWarning(
                message="Quoted field unterminated; it runs to the end of the file",
                row=len(table) - 1,
            )
        )

    for warning in warnings:
        logger.warning(f"CSV parsing warning (row {warning.row}): {warning.message}")

    logger.debug(f"Decoded CSV: {len(table)} rows, {width} columns")
    return table, warnings


def _has_unterminated_quote(content: str) -> bool:
    """True when a quoted field is still open at the end of ``content``.

    A quote opens a field only at the start of it; inside a quoted field
    a doubled quote is an escaped quote character.
    """
    if '"' not in content:
        return False

    in_quotes = False
    at_field_start = True
    index = 0
    while index < len(content):
        char = content[index]
        if in_quotes:
            if char == '"':
                if content.startswith('""', index):
                    index += 2
                    continue
                in_quotes = False
                at_field_start = False
        elif char == '"' and at_field_start:
            in_quotes = True
        else:
            at_field_start = char in ",\r\n"
        index += 1
    return in_quotes


def decode_json(content: str) -> RawTable:
    """Decode a JSON array into a RawTable.

    - An array of objects uses the first object's keys as the header and
      projects every element onto them (missing keys become None).
    - An array of arrays is used as-is.
    - An array of primitives becomes a single ``value`` column.

    Raises:
        FormatError: If the content is not valid JSON or the root is not an array
    """
    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON content: {e}") from e
    except RecursionError as e:
        raise FormatError("Invalid JSON content: nesting too deep") from e

    if not isinstance(data, list):
        raise FormatError("JSON must contain an array of data")

    if not data:
        return []

    first = data[0]
    if isinstance(first, dict):
        keys = list(first.keys())
        table: RawTable = [list(keys)]
        for element in data:
            if isinstance(element, dict):
                table.append([_json_cell(element.get(key)) for key in keys])
            else:
                table.append([None] * len(keys))
        return table

    if isinstance(first, list):
        return [
            [_json_cell(cell) for cell in element] if isinstance(element, list) else [_json_cell(element)]
            for element in data
        ]

    return [[PRIMITIVE_COLUMN_NAME]] + [[_json_cell(element)] for element in data]


def _reject_constant(name: str) -> None:
    raise FormatError(f"Invalid JSON content: {name} is not a valid JSON value")


def _json_cell(value: Any) -> CellValue:
    # Nested structures are kept as their JSON text.
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return value


def decode_spreadsheet(content: bytes, extension: str = "xlsx") -> RawTable:
    """Decode the first sheet of an Excel workbook.

    Rows whose cells are all empty are dropped.

    Args:
        content: Workbook bytes
        extension: ``"xlsx"`` (read with openpyxl) or ``"xls"`` (read with xlrd)

    Raises:
        FormatError: If the workbook has no sheets or cannot be read
    """
    engine = "xlrd" if extension == "xls" else "openpyxl"
    try:
        with pd.ExcelFile(io.BytesIO(content), engine=engine) as workbook:
            if not workbook.sheet_names:
                raise FormatError("No sheets found in Excel file")
            sheet_name = workbook.sheet_names[0]
            frame = workbook.parse(sheet_name, header=None)
    except FormatError:
        raise
    except ImportError as e:
        raise FormatError(f"Missing required library for .{extension} files: {e}") from e
    except Exception as e:
        raise FormatError(f"Failed to read Excel file: {e}") from e

    logger.debug(f"Reading sheet '{sheet_name}' with {engine}")

    table: RawTable = []
    for raw_row in frame.astype(object).itertuples(index=False, name=None):
        row = [normalize_cell(cell) for cell in raw_row]
        if all(is_missing(cell) for cell in row):
            continue
        table.append(row)
    return table
