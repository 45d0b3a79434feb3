"""File loader for Level 1 ingestion.

Reads an uploaded file, enforces the client-side size limit and dispatches
to the decoder matching the file extension.
"""

from pathlib import Path
from typing import Callable, Optional

from settings.schema import UploadLimits
from utils import (
    SPREADSHEET_FORMATS,
    SUPPORTED_DATASET_FORMATS,
    PathValidationError,
    get_file_extension,
    get_logger,
    validate_path_safe,
)

from .decoders import DecodeResult, decode_csv, decode_json, decode_spreadsheet
from .errors import FileReadError, FileTooLargeError, FormatError

logger = get_logger(__name__)

ProgressCallback = Callable[[int], None]


def check_file_size(size: int, limits: Optional[UploadLimits] = None) -> None:
    """Reject files above the configured upload limit.

    Raises:
        FileTooLargeError: If ``size`` exceeds ``limits.max_file_size_bytes``
    """
    limits = limits or UploadLimits()
    if size > limits.max_file_size_bytes:
        limit_mb = limits.max_file_size_bytes / 1024 / 1024
        raise FileTooLargeError(
            f"File is {size / 1024 / 1024:.1f}MB, above the {limit_mb:.0f}MB limit for "
            "client-side processing. Larger files need server-side processing, "
            "which is not available yet."
        )


def check_extension(file_name: str) -> str:
    """Return the lowercased extension of a supported file.

    Raises:
        FormatError: If the extension is not csv, json, xlsx or xls
    """
    extension = get_file_extension(file_name)
    if extension not in SUPPORTED_DATASET_FORMATS:
        shown = f".{extension}" if extension else "(none)"
        raise FormatError(f"Unsupported file type: {shown}")
    return extension


def decode_content(content: bytes | str, extension: str) -> DecodeResult:
    """Decode file content according to its extension.

    Text formats accept either ``str`` or UTF-8 encoded ``bytes``;
    spreadsheets require ``bytes``.

    Raises:
        FormatError: If the extension is unsupported or the content cannot be decoded
    """
    extension = extension.lstrip(".").lower()

    if extension in SPREADSHEET_FORMATS:
        if isinstance(content, str):
            raise FormatError(f"Binary content required for .{extension} files")
        return DecodeResult(table=decode_spreadsheet(content, extension))

    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise FormatError(f"File is not valid UTF-8 text: {e}") from e

    if extension == "csv":
        table, warnings = decode_csv(content)
        return DecodeResult(table=table, warnings=warnings)
    if extension == "json":
        return DecodeResult(table=decode_json(content))

    raise FormatError(f"Unsupported file type: .{extension}")


def read_file(file_path: str | Path, limits: Optional[UploadLimits] = None) -> bytes:
    """Read a file from disk after path and size checks.

    Raises:
        FileReadError: If the path is unsafe, missing or unreadable
        FileTooLargeError: If the file exceeds the size limit
    """
    try:
        file_path = validate_path_safe(file_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise FileReadError(f"Invalid dataset path: {e}") from e
    except FileNotFoundError as e:
        raise FileReadError(f"Dataset file not found: {file_path}") from e

    try:
        check_file_size(file_path.stat().st_size, limits)
        return file_path.read_bytes()
    except OSError as e:
        raise FileReadError(f"Failed to read dataset file {file_path}: I/O error: {e}") from e


def load_raw_table(
    file_path: str | Path,
    limits: Optional[UploadLimits] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> DecodeResult:
    """Read and decode a dataset file.

    Progress is reported as 50 once the file is read and 80 once it is
    decoded. The callback is advisory.

    Args:
        file_path: Path to a .csv, .json, .xlsx or .xls file
        limits: Upload limits (defaults to the 8MB client-side limit)
        on_progress: Optional callback receiving a percentage

    Returns:
        DecodeResult with the RawTable and any parse warnings

    Raises:
        DatasetLoadError: If the file is rejected, unreadable or undecodable
    """
    extension = check_extension(str(file_path))

    logger.info(f"Loading dataset from: {file_path}")
    logger.debug(f"File format: .{extension}")

    content = read_file(file_path, limits)
    if on_progress is not None:
        on_progress(50)

    result = decode_content(content, extension)
    if on_progress is not None:
        on_progress(80)

    logger.info(f"Decoded {len(result.table)} rows (header included)")
    if result.warnings:
        logger.warning(f"{len(result.warnings)} parse warnings while decoding {file_path}")
    return result
