"""Pipeline configuration.

Pydantic models for inference thresholds, upload limits and persistence
settings, plus a YAML/JSON loader.
"""

from .loader import ConfigError, load_config, load_config_file, validate_config
from .schema import (
    InferenceThresholds,
    PersistenceSettings,
    PipelineConfig,
    UploadLimits,
)

__all__ = [
    "ConfigError",
    "InferenceThresholds",
    "PersistenceSettings",
    "PipelineConfig",
    "UploadLimits",
    "load_config",
    "load_config_file",
    "validate_config",
]
