"""Level 4: Chart configuration.

Chart configuration schema, recommendations based on column types and the
series a renderer needs to draw a chart.
"""

from .chart_config import (
    XY_CHART_TYPES,
    ChartConfig,
    ChartOptions,
    ChartType,
    validate_chart_config,
)
from .recommender import ChartRecommendation, recommend_charts
from .series import DEFAULT_COLORS, build_chart_series

__all__ = [
    "DEFAULT_COLORS",
    "XY_CHART_TYPES",
    "ChartConfig",
    "ChartOptions",
    "ChartRecommendation",
    "ChartType",
    "build_chart_series",
    "recommend_charts",
    "validate_chart_config",
]
