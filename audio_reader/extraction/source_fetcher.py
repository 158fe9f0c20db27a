import httpx

from audio_reader.extraction.exceptions import ExtractionError
from audio_reader.storage.base import BaseBlobStorage
from audio_reader.storage.exceptions import StorageError


class SourceFetcher:
    """Reads uploaded file bytes from blob storage or over HTTP."""

    def __init__(self, blob_storage: BaseBlobStorage, timeout_seconds: int) -> None:
        self._blob_storage = blob_storage
        self._timeout_seconds = timeout_seconds

    def fetch(self, file_url: str) -> bytes:
        """Return the file's bytes.

        Raises:
            ExtractionError: on a non-2xx response, a transport error, or an
                unreadable storage object.
        """
        if self._blob_storage.owns(file_url):
            try:
                return self._blob_storage.get(file_url)
            except StorageError as exc:
                raise ExtractionError(f"Failed to fetch document: {exc}") from exc

        try:
            response = httpx.get(file_url, timeout=self._timeout_seconds, follow_redirects=True)
        except httpx.HTTPError as exc:
            raise ExtractionError(f"Failed to fetch document: {exc}") from exc
        if not response.is_success:
            raise ExtractionError(
                f"Failed to fetch document: {response.status_code} {response.reason_phrase}"
            )
        return response.content
