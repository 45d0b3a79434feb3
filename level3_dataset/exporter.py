"""CSV export for datasets.

Serializes a dataset back to comma-delimited text with pandas so quoting
of embedded commas, quotes and newlines is handled correctly.
"""

import io
import logging

import pandas as pd

from .schema import Dataset

logger = logging.getLogger(__name__)


def dataset_to_frame(dataset: Dataset) -> pd.DataFrame:
    """Build a DataFrame from the dataset's columns.

    Cells keep their Python types (object dtype), so integers are not
    widened to floats when a column has gaps. Duplicate column names are
    preserved.
    """
    records = list(zip(*(column.values for column in dataset.columns)))
    return pd.DataFrame(records, columns=dataset.column_names, dtype=object)


def dataset_to_csv(dataset: Dataset) -> str:
    """Serialize a dataset to CSV text, header first; None is written empty."""
    buffer = io.StringIO()
    dataset_to_frame(dataset).to_csv(buffer, index=False, lineterminator="\n")
    logger.debug(f"Exported dataset '{dataset.name}' to CSV: {dataset.row_count} rows")
    return buffer.getvalue()
