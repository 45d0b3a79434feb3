"""Chart series derived from a dataset and a chart configuration.

Series are renderer-neutral dictionaries (``x``, ``y``, ``name``, ...)
that a plotting front end can consume directly.
"""

import logging
from typing import Any

from level2_inference.type_inferencer import ColumnType
from level3_dataset.schema import Dataset

from .chart_config import ChartConfig, ChartType

logger = logging.getLogger(__name__)

DEFAULT_COLORS = (
    "hsl(var(--chart-1))",
    "hsl(var(--chart-2))",
    "hsl(var(--chart-3))",
    "hsl(var(--chart-4))",
    "hsl(var(--chart-5))",
)

Series = dict[str, Any]


def _palette(config: ChartConfig) -> tuple[str, ...]:
    return tuple(config.options.color_palette or DEFAULT_COLORS)


def _xy_series(dataset: Dataset, config: ChartConfig) -> list[Series]:
    x_axis, y_axis = config.x_axis, config.y_axis

    if config.group_by:
        groups: dict[str, Series] = {}
        for row in dataset.rows:
            name = str(row.get(config.group_by))
            series = groups.setdefault(name, {"name": name, "x": [], "y": []})
            series["x"].append(row.get(x_axis))
            series["y"].append(row.get(y_axis))
        series_list = list(groups.values())
    else:
        series_list = [
            {
                "name": y_axis,
                "x": [row.get(x_axis) for row in dataset.rows],
                "y": [row.get(y_axis) for row in dataset.rows],
            }
        ]

    colors = _palette(config)
    for index, series in enumerate(series_list):
        series["type"] = config.type.value
        series["color"] = colors[index % len(colors)]
        if config.type is ChartType.LINE:
            series["mode"] = "lines+markers"
        if config.type is ChartType.AREA:
            series["fill"] = "tonexty"
        if config.options.smoothing:
            series["line_shape"] = "spline"
    return series_list


def _histogram_series(dataset: Dataset, config: ChartConfig) -> list[Series]:
    column = config.y_axis
    if column is None:
        numeric = dataset.columns_of_type(ColumnType.NUMBER)
        column = numeric[0].name if numeric else None
    if column is None:
        return []
    return [
        {
            "type": ChartType.HISTOGRAM.value,
            "name": column,
            "x": [row.get(column) for row in dataset.rows],
            "color": _palette(config)[0],
        }
    ]


def _pie_series(dataset: Dataset, config: ChartConfig) -> list[Series]:
    counts: dict[str, int] = {}
    for row in dataset.rows:
        label = str(row.get(config.x_axis))
        counts[label] = counts.get(label, 0) + 1
    return [
        {
            "type": ChartType.PIE.value,
            "labels": list(counts.keys()),
            "values": list(counts.values()),
            "colors": list(_palette(config)),
        }
    ]


def build_chart_series(dataset: Dataset, config: ChartConfig) -> list[Series]:
    """Build the series for a chart.

    - line, bar, area: one series per ``group_by`` value, or a single
      series named after the y axis
    - scatter: x against y
    - histogram: the y axis column, or the first number column
    - pie: occurrence counts of the x axis values

    Returns an empty list when a required axis is missing.
    """
    if config.type is ChartType.HISTOGRAM:
        return _histogram_series(dataset, config)

    if config.x_axis is None:
        return []

    if config.type is ChartType.PIE:
        return _pie_series(dataset, config)

    if config.y_axis is None:
        return []

    if config.type is ChartType.SCATTER:
        return [
            {
                "type": ChartType.SCATTER.value,
                "mode": "markers",
                "name": f"{config.x_axis} vs {config.y_axis}",
                "x": [row.get(config.x_axis) for row in dataset.rows],
                "y": [row.get(config.y_axis) for row in dataset.rows],
                "color": _palette(config)[0],
            }
        ]

    series = _xy_series(dataset, config)
    logger.debug(f"Built {len(series)} {config.type.value} series")
    return series
