"""Configuration loader for the ingestion pipeline.

Loads YAML/JSON configuration files and validates them against
PipelineConfig, turning Pydantic errors into readable messages.
"""

import json
import pathlib
from typing import Union

import yaml
from pydantic import ValidationError

from settings.schema import PersistenceSettings, PipelineConfig
from utils import PathValidationError, get_logger, is_supported_config_format, validate_path_safe

logger = get_logger(__name__)


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load configuration from a YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing configuration

    Raises:
        ConfigError: If the file cannot be found, read or parsed
    """
    try:
        config_path = validate_path_safe(config_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise ConfigError(f"Invalid configuration path: {e}") from e
    except FileNotFoundError as e:
        raise ConfigError(f"Configuration file not found: {config_path}") from e

    suffix = config_path.suffix.lower()
    if not is_supported_config_format(config_path):
        raise ConfigError(
            f"Unsupported file format: {suffix}. Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Failed to decode configuration file {config_path}: {e}") from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ConfigError(
            f"Configuration must be a dictionary, got {type(config).__name__}"
        )

    return config


def validate_config(config: dict) -> PipelineConfig:
    """Validate a configuration dictionary.

    Raises:
        ConfigError: If validation fails, with one line per offending field
    """
    try:
        return PipelineConfig(**config)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed:\n{_format_validation_error(e)}") from e


def _format_validation_error(error: ValidationError) -> str:
    errors = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
        error_msg = err.get("msg", "Validation error")
        error_type = err.get("type", "unknown")
        errors.append(f"  {field_path}: {error_msg} ({error_type})")
    return "\n".join(errors)


def load_config(config_path: Union[str, pathlib.Path, None] = None) -> PipelineConfig:
    """Load and validate pipeline configuration.

    Without a path, defaults are used and persistence settings are read
    from the environment.
    """
    if config_path is None:
        logger.debug("No configuration file given, using defaults")
        return PipelineConfig(persistence=PersistenceSettings.from_env())

    config = validate_config(load_config_file(config_path))
    logger.info(f"Loaded configuration from {config_path}")
    return config
