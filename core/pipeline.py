"""Pipeline orchestrator for one upload.

PipelineOrchestrator drives decoding, type inference and dataset assembly
for a single file. Stage failures are converted to one readable message at
this boundary so no partially built dataset reaches charting.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from level1_ingestion.decoders import ParseWarning
from level1_ingestion.errors import DatasetLoadError
from level1_ingestion.loader import check_extension, check_file_size, decode_content, load_raw_table
from level3_dataset.assembler import assemble_dataset
from level3_dataset.schema import Dataset
from settings.schema import PipelineConfig
from utils import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[int], None]


@dataclass
class PipelineResult:
    """Outcome of one pipeline run.

    Exactly one of ``dataset`` and ``error`` is set.
    """

    dataset: Optional[Dataset] = None
    error: Optional[str] = None
    warnings: list[ParseWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.dataset is not None


class PipelineOrchestrator:
    """Runs the ingestion pipeline for uploaded files.

    The orchestrator keeps no state between runs; each call produces an
    independent Dataset.

    Args:
        config: Validated PipelineConfig (defaults used when omitted)
        on_progress: Optional callback receiving 50, 80 and 100 as the
            file is read, decoded and assembled
    """

    def __init__(
        self,
        config: Optional[PipelineConfig] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.config = config or PipelineConfig()
        self.on_progress = on_progress

        logger.debug("PipelineOrchestrator initialized")
        logger.debug(f"Inference thresholds: {self.config.inference.model_dump()}")

    def _report(self, progress: int) -> None:
        if self.on_progress is not None:
            self.on_progress(progress)

    def run(self, file_path: str | Path) -> PipelineResult:
        """Read, decode and assemble a file from disk."""
        logger.info(f"Processing upload: {file_path}")
        try:
            decoded = load_raw_table(file_path, self.config.upload, self.on_progress)
            dataset = assemble_dataset(
                decoded.table, Path(file_path).name, self.config.inference
            )
        except DatasetLoadError as e:
            logger.error(f"✗ Upload rejected: {e}")
            return PipelineResult(error=str(e))

        self._report(100)
        logger.info(f"✓ Dataset ready: {dataset.row_count} rows, {len(dataset.columns)} columns")
        return PipelineResult(dataset=dataset, warnings=decoded.warnings)

    def run_content(self, content: bytes | str, file_name: str) -> PipelineResult:
        """Decode and assemble content that is already in memory.

        Used when the caller has the upload's bytes (e.g. from a web form)
        rather than a path on disk.
        """
        logger.info(f"Processing upload: {file_name}")
        try:
            extension = check_extension(file_name)
            size = len(content.encode("utf-8")) if isinstance(content, str) else len(content)
            check_file_size(size, self.config.upload)
            self._report(50)

            decoded = decode_content(content, extension)
            self._report(80)

            dataset = assemble_dataset(decoded.table, file_name, self.config.inference)
        except DatasetLoadError as e:
            logger.error(f"✗ Upload rejected: {e}")
            return PipelineResult(error=str(e))

        self._report(100)
        logger.info(f"✓ Dataset ready: {dataset.row_count} rows, {len(dataset.columns)} columns")
        return PipelineResult(dataset=dataset, warnings=decoded.warnings)
