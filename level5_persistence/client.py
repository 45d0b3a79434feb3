"""Client for the save-dataset serverless function.

Posts a DatasetRecord as JSON with a bearer token and reports the outcome
as a SaveResult. Failures are returned, not raised, and are never retried.
"""

from dataclasses import dataclass
from typing import Optional

import requests

from settings.schema import PersistenceSettings
from utils import get_logger

from .record import DatasetRecord

logger = get_logger(__name__)


class PersistenceConfigError(Exception):
    """Raised when the client is used without a function URL."""

    pass


@dataclass(frozen=True)
class SaveResult:
    success: bool
    dataset_id: Optional[str] = None
    message: str = ""


class SaveDatasetClient:
    """Saves dataset records through the save-dataset function.

    Args:
        settings: Function URL, API key and timeout
        session: Optional requests session (a new one is created otherwise)
    """

    def __init__(self, settings: PersistenceSettings, session: Optional[requests.Session] = None):
        if not settings.function_url:
            raise PersistenceConfigError(
                "No save-dataset function URL configured. "
                "Set DATAVISION_FUNCTIONS_URL or persistence.function_url."
            )
        self.settings = settings
        self.session = session or requests.Session()
        logger.debug(f"SaveDatasetClient initialized for {settings.function_url}")

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"
        return headers

    def save(self, record: DatasetRecord) -> SaveResult:
        """Send a record and return the function's verdict."""
        logger.info(f"Saving dataset '{record.name}' ({record.row_count} rows)")
        try:
            response = self.session.post(
                self.settings.function_url,
                json=record.to_payload(),
                headers=self._headers(),
                timeout=self.settings.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.error(f"Save request failed: {e}")
            return SaveResult(success=False, message=f"Could not reach save-dataset function: {e}")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not response.ok:
            message = body.get("error") or f"Save failed with HTTP {response.status_code}"
            logger.error(f"Save rejected: {message}")
            return SaveResult(success=False, message=message)

        dataset_id = body.get("datasetId")
        logger.info(f"Dataset saved: {dataset_id}")
        return SaveResult(
            success=bool(body.get("success", True)),
            dataset_id=str(dataset_id) if dataset_id is not None else None,
            message=body.get("message", "Dataset saved successfully"),
        )
