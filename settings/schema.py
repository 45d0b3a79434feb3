"""Pipeline configuration schema using Pydantic.

Named, validated configuration values for the ingestion pipeline. The
inference thresholds live here so callers can tune or probe them without
touching the inferencer.
"""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.constants import MAX_FILE_SIZE_BYTES

FUNCTIONS_URL_ENV = "DATAVISION_FUNCTIONS_URL"
API_KEY_ENV = "DATAVISION_API_KEY"


class InferenceThresholds(BaseModel):
    """Heuristic thresholds used by column type inference.

    Ratios are compared inclusively (``>=``) against the share of non-null
    values that fell into the number or date bucket.
    """

    number_ratio: float = Field(
        default=0.8, ge=0.0, le=1.0, description="Share of numeric values for a number column"
    )
    date_ratio: float = Field(
        default=0.6, ge=0.0, le=1.0, description="Share of date values for a date column"
    )
    category_max_distinct: int = Field(
        default=50, ge=1, description="Absolute cap on distinct values for a category column"
    )
    category_distinct_ratio: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Distinct values must stay below this share of non-null values",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def category_limit(self, total: int) -> float:
        """Distinct-value count a column must stay strictly below to be a category."""
        return min(self.category_max_distinct, total * self.category_distinct_ratio)


class UploadLimits(BaseModel):
    """Client-side upload limits."""

    max_file_size_bytes: int = Field(
        default=MAX_FILE_SIZE_BYTES, ge=1, description="Largest accepted upload in bytes"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class PersistenceSettings(BaseModel):
    """Connection settings for the save-dataset function."""

    function_url: Optional[str] = Field(default=None, description="URL of the save-dataset function")
    api_key: Optional[str] = Field(default=None, description="Bearer token sent with each call")
    timeout_seconds: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("function_url")
    @classmethod
    def validate_function_url(cls, v: Optional[str]) -> Optional[str]:
        """Reject non-HTTP URLs."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("function_url must start with http:// or https://")
        return v

    @classmethod
    def from_env(cls) -> "PersistenceSettings":
        """Build settings from DATAVISION_FUNCTIONS_URL / DATAVISION_API_KEY."""
        return cls(
            function_url=os.getenv(FUNCTIONS_URL_ENV),
            api_key=os.getenv(API_KEY_ENV),
        )


class PipelineConfig(BaseModel):
    """Complete pipeline configuration.

    Immutable once validated; unknown keys are rejected.
    """

    inference: InferenceThresholds = Field(default_factory=InferenceThresholds)
    upload: UploadLimits = Field(default_factory=UploadLimits)
    persistence: PersistenceSettings = Field(default_factory=PersistenceSettings)

    model_config = ConfigDict(frozen=True, extra="forbid")
