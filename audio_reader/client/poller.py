import time
from collections.abc import Callable
from typing import Any

import httpx

from audio_reader.client.exceptions import (
    PollTimeoutError,
    ProcessingFailedError,
    StatusQueryError,
)
from audio_reader.config.settings import Settings
from audio_reader.logging.logger import Log
from audio_reader.store.models import DocumentStatus

DEFAULT_FAILURE_MESSAGE = "Processing failed"


def poll_progress(attempts: int, max_attempts: int) -> float:
    """Progress shown while a document is still being processed, in ``[30, 90]``."""
    return min(30 + attempts / max_attempts * 60, 90)


class StatusPoller:
    """Queries a document's status until it reaches a terminal state.

    The HTTP client is expected to carry the session cookie and base URL.
    ``sleep`` and ``on_progress`` are injectable so callers can drive the loop
    without real delays and render progress as they like.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        interval_seconds: float = 5.0,
        max_attempts: int = 60,
        sleep: Callable[[float], None] = time.sleep,
        on_progress: Callable[[float], None] | None = None,
    ) -> None:
        if max_attempts <= 0:
            raise ValueError("max_attempts must be positive")
        self._http_client = http_client
        self._interval_seconds = interval_seconds
        self._max_attempts = max_attempts
        self._sleep = sleep
        self._on_progress = on_progress

    @classmethod
    def from_settings(
        cls,
        http_client: httpx.Client,
        settings: Settings,
        **kwargs: Any,
    ) -> "StatusPoller":
        """Poller with the configured interval and attempt budget."""
        return cls(
            http_client,
            interval_seconds=settings.poll_interval_seconds,
            max_attempts=settings.poll_max_attempts,
            **kwargs,
        )

    def wait_until_ready(self, document_id: str) -> dict[str, Any]:
        """Block until the document is ready and return its final status view.

        Raises:
            ProcessingFailedError: if the document ended in the error state.
            StatusQueryError: on a non-2xx status response.
            PollTimeoutError: after ``max_attempts`` queries without a terminal state.
        """
        for attempts in range(self._max_attempts):
            if attempts:
                self._sleep(self._interval_seconds)
            data = self._query(document_id)
            status = data.get("status")
            if status == DocumentStatus.READY:
                self._report(100)
                return data
            if status == DocumentStatus.ERROR:
                raise ProcessingFailedError(data.get("error") or DEFAULT_FAILURE_MESSAGE)
            self._report(poll_progress(attempts, self._max_attempts))

        Log.warning(f"Gave up polling document {document_id} after {self._max_attempts} queries")
        raise PollTimeoutError("Processing timeout")

    def _query(self, document_id: str) -> dict[str, Any]:
        response = self._http_client.get(f"/api/documents/{document_id}/status")
        try:
            data = response.json()
        except ValueError:
            data = None
        if not response.is_success:
            message = data.get("error") if isinstance(data, dict) else None
            raise StatusQueryError(message or f"Status query failed: {response.status_code}")
        if not isinstance(data, dict):
            raise StatusQueryError("Status response is not a JSON object")
        return data

    def _report(self, progress: float) -> None:
        if self._on_progress is not None:
            self._on_progress(progress)
