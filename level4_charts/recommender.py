"""Chart recommendations derived from a dataset's column types."""

import logging
from dataclasses import dataclass

from level2_inference.type_inferencer import ColumnType
from level3_dataset.schema import Dataset

from .chart_config import ChartType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartRecommendation:
    type: ChartType
    reason: str
    confidence: float


def recommend_charts(dataset: Dataset) -> list[ChartRecommendation]:
    """Suggest chart types for a dataset, most confident first.

    - date and number columns: line (0.9) and area (0.7)
    - category and number columns: bar (0.8)
    - two or more number columns: scatter (0.7)
    - any number column: histogram (0.6)
    - any category column: pie (0.5)
    """
    numeric = dataset.columns_of_type(ColumnType.NUMBER)
    categorical = dataset.columns_of_type(ColumnType.CATEGORY)
    dates = dataset.columns_of_type(ColumnType.DATE)

    recommendations = []
    if dates and numeric:
        recommendations.append(ChartRecommendation(ChartType.LINE, "Time series data detected", 0.9))
        recommendations.append(ChartRecommendation(ChartType.AREA, "Good for cumulative time trends", 0.7))
    if categorical and numeric:
        recommendations.append(ChartRecommendation(ChartType.BAR, "Categories with numeric values", 0.8))
    if len(numeric) >= 2:
        recommendations.append(
            ChartRecommendation(ChartType.SCATTER, "Multiple numeric variables for correlation", 0.7)
        )
    if numeric:
        recommendations.append(ChartRecommendation(ChartType.HISTOGRAM, "Analyze numeric distribution", 0.6))
    if categorical:
        recommendations.append(ChartRecommendation(ChartType.PIE, "Show category proportions", 0.5))

    recommendations.sort(key=lambda recommendation: recommendation.confidence, reverse=True)
    logger.debug(f"Recommended charts: {[r.type.value for r in recommendations]}")
    return recommendations
