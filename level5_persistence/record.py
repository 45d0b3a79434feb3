"""Persistence payload for a dataset.

Only a summary of the dataset is persisted: column names and types, the
row count, the first rows as a sample and the chart configuration.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from level2_inference.type_inferencer import ColumnType
from level3_dataset.schema import Dataset
from level4_charts.chart_config import ChartConfig
from utils import SAMPLE_ROW_COUNT


class ColumnRecord(BaseModel):
    name: str
    type: ColumnType

    model_config = ConfigDict(frozen=True)


class DatasetRecord(BaseModel):
    """Body sent to the save-dataset function."""

    name: str = Field(..., min_length=1, description="Dataset name")
    columns: list[ColumnRecord]
    row_count: int = Field(..., ge=0)
    sample_rows: list[dict[str, Any]] = Field(default_factory=list, max_length=SAMPLE_ROW_COUNT)
    chart_config: Optional[ChartConfig] = None
    file_url: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready body; the chart config uses its camelCase wire keys."""
        payload = self.model_dump(mode="json", exclude={"chart_config"})
        payload["chart_config"] = self.chart_config.to_payload() if self.chart_config else None
        return payload


def build_dataset_record(
    dataset: Dataset,
    chart_config: Optional[ChartConfig] = None,
    file_url: Optional[str] = None,
) -> DatasetRecord:
    """Summarize a dataset for persistence."""
    return DatasetRecord(
        name=dataset.name,
        columns=[ColumnRecord(name=column.name, type=column.type) for column in dataset.columns],
        row_count=dataset.row_count,
        sample_rows=[dict(row) for row in dataset.rows[:SAMPLE_ROW_COUNT]],
        chart_config=chart_config,
        file_url=file_url,
    )
