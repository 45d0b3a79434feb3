"""Chart configuration schema using Pydantic.

ChartConfig is the user's visualization choice for a dataset. Field names
are snake_case in Python and camelCase on the wire (``xAxis``, ``yAxis``,
``groupBy``, ``colorPalette``).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from level3_dataset.schema import Dataset


class ChartType(str, Enum):
    """Supported chart types."""

    LINE = "line"
    BAR = "bar"
    SCATTER = "scatter"
    HISTOGRAM = "histogram"
    PIE = "pie"
    AREA = "area"


# Chart types that plot one column against another.
XY_CHART_TYPES = (ChartType.LINE, ChartType.BAR, ChartType.AREA, ChartType.SCATTER)


class ChartOptions(BaseModel):
    """Rendering options passed through to the chart renderer."""

    stacking: Optional[bool] = None
    smoothing: Optional[bool] = None
    legend: Optional[bool] = None
    tooltips: Optional[bool] = None
    color_palette: Optional[list[str]] = Field(default=None, alias="colorPalette")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class ChartConfig(BaseModel):
    """User-selected visualization parameters."""

    type: ChartType = Field(..., description="Chart type")
    x_axis: Optional[str] = Field(default=None, alias="xAxis")
    y_axis: Optional[str] = Field(default=None, alias="yAxis")
    group_by: Optional[str] = Field(default=None, alias="groupBy")
    title: Optional[str] = None
    options: ChartOptions = Field(default_factory=ChartOptions)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @field_validator("x_axis", "y_axis", "group_by", "title")
    @classmethod
    def empty_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat blank selections as unset."""
        if v is None or not v.strip():
            return None
        return v

    @property
    def display_title(self) -> str:
        """Title to show, defaulting to e.g. ``"Bar Chart"``."""
        return self.title or f"{self.type.value.capitalize()} Chart"

    def to_payload(self) -> dict:
        """Wire representation with camelCase keys and unset fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def validate_chart_config(config: ChartConfig, dataset: Dataset) -> list[str]:
    """Check a chart configuration against a dataset.

    Returns a list of problems; an empty list means the chart can be built.
    """
    errors = []
    for label, name in (("x axis", config.x_axis), ("y axis", config.y_axis), ("group by", config.group_by)):
        if name is not None and dataset.find_column(name) is None:
            errors.append(f"Unknown column for {label}: '{name}'")

    if config.type in XY_CHART_TYPES:
        if config.x_axis is None:
            errors.append(f"A {config.type.value} chart needs an x axis column")
        if config.y_axis is None:
            errors.append(f"A {config.type.value} chart needs a y axis column")
    elif config.type is ChartType.PIE and config.x_axis is None:
        errors.append("A pie chart needs an x axis column")

    return errors
