"""File helper utilities for DataVision.

Path checks and file-name handling shared by the loader and the config layer.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from .constants import SUPPORTED_CONFIG_FORMATS

logger = logging.getLogger(__name__)

_FINAL_EXTENSION = re.compile(r"\.[^/.]+$")


class PathValidationError(Exception):
    """Raised when path validation fails due to security concerns."""

    pass


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path.

    Args:
        file_path: File path

    Returns:
        File extension (without dot, lowercased), empty string if no extension
    """
    path = Path(file_path)
    return path.suffix.lstrip(".").lower()


def strip_extension(file_name: str) -> str:
    """Remove the final extension from a file name.

    Only the last extension is removed, so ``"sales.2024.csv"`` becomes
    ``"sales.2024"``. Names without an extension are returned unchanged.
    """
    return _FINAL_EXTENSION.sub("", file_name)


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported config format."""
    return get_file_extension(file_path) in SUPPORTED_CONFIG_FORMATS


def validate_path_safe(
    file_path: str | Path,
    must_exist: bool = False,
    must_be_file: bool = False,
    base_dir: Optional[Path] = None,
) -> Path:
    """Validate path to prevent directory traversal.

    This function:
    - Rejects paths containing ``..`` components
    - Resolves symlinks
    - Optionally restricts the path to a base directory
    - Optionally checks that the path exists and is a file

    Args:
        file_path: Path to validate
        must_exist: If True, path must exist
        must_be_file: If True, path must be a regular file
        base_dir: Optional base directory to restrict paths within

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If path contains traversal or violates constraints
        FileNotFoundError: If the path is required to exist and does not
    """
    path = Path(file_path).expanduser()

    if ".." in path.parts:
        raise PathValidationError(
            f"Path contains directory traversal sequence: {file_path}"
        )

    try:
        resolved = path.resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if base_dir is not None:
        base_resolved = Path(base_dir).expanduser().resolve()
        if base_resolved != resolved and base_resolved not in resolved.parents:
            raise PathValidationError(
                f"Path {file_path} is outside allowed base directory {base_dir}"
            )

    if (must_exist or must_be_file) and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        raise PathValidationError(f"Path is not a file: {file_path}")

    logger.debug(f"Validated path: {resolved}")
    return resolved
