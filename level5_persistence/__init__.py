"""Level 5: Persistence boundary.

Builds the dataset summary record and hands it to the external
save-dataset function.
"""

from .client import PersistenceConfigError, SaveDatasetClient, SaveResult
from .record import ColumnRecord, DatasetRecord, build_dataset_record

__all__ = [
    "ColumnRecord",
    "DatasetRecord",
    "PersistenceConfigError",
    "SaveDatasetClient",
    "SaveResult",
    "build_dataset_record",
]
