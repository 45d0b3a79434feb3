"""Shared utilities for DataVision.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_CONFIG,
    EXIT_REJECTED_UPLOAD,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    MAX_FILE_SIZE_BYTES,
    MAX_FILE_SIZE_MB,
    SAMPLE_ROW_COUNT,
    SPREADSHEET_FORMATS,
    SUPPORTED_CONFIG_FORMATS,
    SUPPORTED_DATASET_FORMATS,
)
from .file_helpers import (
    PathValidationError,
    get_file_extension,
    is_supported_config_format,
    strip_extension,
    validate_path_safe,
)
from .logging import get_logger, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "EXIT_INVALID_CONFIG",
    "EXIT_REJECTED_UPLOAD",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "MAX_FILE_SIZE_BYTES",
    "MAX_FILE_SIZE_MB",
    "SAMPLE_ROW_COUNT",
    "SPREADSHEET_FORMATS",
    "SUPPORTED_CONFIG_FORMATS",
    "SUPPORTED_DATASET_FORMATS",
    "PathValidationError",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "setup_logging",
    "strip_extension",
    "validate_path_safe",
]
