"""Level 1: File decoding.

This module turns uploaded CSV, JSON and Excel files into RawTables:
untyped two-dimensional arrays of cell values whose first row is the
header candidate.
"""

from .cells import CellValue, coerce_text_cell, is_missing, normalize_cell
from .decoders import (
    DecodeResult,
    ParseWarning,
    RawTable,
    decode_csv,
    decode_json,
    decode_spreadsheet,
)
from .errors import DatasetLoadError, FileReadError, FileTooLargeError, FormatError
from .loader import (
    check_extension,
    check_file_size,
    decode_content,
    load_raw_table,
    read_file,
)

__all__ = [
    "CellValue",
    "DatasetLoadError",
    "DecodeResult",
    "FileReadError",
    "FileTooLargeError",
    "FormatError",
    "ParseWarning",
    "RawTable",
    "check_extension",
    "check_file_size",
    "coerce_text_cell",
    "decode_content",
    "decode_csv",
    "decode_json",
    "decode_spreadsheet",
    "is_missing",
    "load_raw_table",
    "normalize_cell",
    "read_file",
]
