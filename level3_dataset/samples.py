"""Built-in sample datasets.

Small ready-made datasets users can chart without uploading a file. Column
types are fixed rather than inferred.
"""

from level2_inference.type_inferencer import ColumnType

from .schema import Column, Dataset

NUMBER = ColumnType.NUMBER
DATE = ColumnType.DATE
CATEGORY = ColumnType.CATEGORY

_SAMPLES = {
    "sales": (
        "Sales Performance",
        [
            ("Month", CATEGORY, ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]),
            ("Revenue", NUMBER, [45000, 52000, 48000, 61000, 55000, 67000]),
            ("Units Sold", NUMBER, [450, 520, 480, 610, 550, 670]),
            ("Region", CATEGORY, ["North", "South", "North", "West", "East", "South"]),
        ],
    ),
    "website": (
        "Website Analytics",
        [
            ("Date", DATE, ["2024-01-01", "2024-01-02", "2024-01-03", "2024-01-04", "2024-01-05"]),
            ("Page Views", NUMBER, [1250, 1420, 1180, 1650, 1890]),
            ("Unique Visitors", NUMBER, [890, 1020, 840, 1150, 1340]),
            ("Bounce Rate", NUMBER, [0.35, 0.42, 0.38, 0.29, 0.31]),
        ],
    ),
    "survey": (
        "Customer Survey",
        [
            ("Age Group", CATEGORY, ["18-25", "26-35", "36-45", "46-55", "56+"]),
            ("Satisfaction", NUMBER, [4.2, 4.5, 4.1, 4.7, 4.3]),
            ("Response Count", NUMBER, [120, 180, 145, 95, 67]),
            ("Category", CATEGORY, ["Product", "Service", "Support", "Pricing", "Overall"]),
        ],
    ),
    "stock": (
        "Stock Prices",
        [
            ("Date", DATE, ["2024-01-01", "2024-01-08", "2024-01-15", "2024-01-22", "2024-01-29"]),
            ("AAPL", NUMBER, [185.64, 182.31, 188.63, 191.25, 187.45]),
            ("GOOGL", NUMBER, [140.93, 138.21, 142.56, 145.82, 144.15]),
            ("MSFT", NUMBER, [376.04, 372.75, 380.12, 385.64, 382.89]),
            ("Volume", NUMBER, [4500000, 3200000, 5100000, 4800000, 3900000]),
        ],
    ),
    "ecommerce": (
        "E-commerce Metrics",
        [
            ("Product Category", CATEGORY, ["Electronics", "Clothing", "Books", "Home", "Sports"]),
            ("Units Sold", NUMBER, [234, 456, 123, 345, 178]),
            ("Revenue", NUMBER, [15600, 22800, 2460, 13800, 8900]),
            ("Avg Price", NUMBER, [66.67, 50.00, 20.00, 40.00, 50.00]),
            ("Return Rate", NUMBER, [0.08, 0.15, 0.02, 0.05, 0.12]),
        ],
    ),
}


def list_sample_datasets() -> dict[str, str]:
    """Map of sample key to display name."""
    return {key: name for key, (name, _) in _SAMPLES.items()}


def load_sample_dataset(key: str) -> Dataset:
    """Build a fresh copy of a sample dataset.

    Raises:
        KeyError: If ``key`` is not a known sample
    """
    if key not in _SAMPLES:
        raise KeyError(f"Unknown sample dataset '{key}'. Available: {sorted(_SAMPLES)}")
    name, layout = _SAMPLES[key]
    columns = [
        Column(name=column_name, type=column_type, original_type=column_type, values=list(values))
        for column_name, column_type, values in layout
    ]
    return Dataset.from_columns(name, columns)
