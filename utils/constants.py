"""Constants for DataVision.

Shared constants used across the pipeline and the CLI.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_REJECTED_UPLOAD = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "DataVision"
APP_VERSION = "0.1.0"

# Supported file formats
SUPPORTED_DATASET_FORMATS = ["csv", "json", "xlsx", "xls"]
SPREADSHEET_FORMATS = ["xlsx", "xls"]
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

# Upload limits
MAX_FILE_SIZE_MB = 8
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024

# Persistence
SAMPLE_ROW_COUNT = 10
