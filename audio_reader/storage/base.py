from abc import ABC, abstractmethod


class BaseBlobStorage(ABC):
    """Contract for all blob storage adapters."""

    @abstractmethod
    def put(self, path: str, data: bytes, content_type: str) -> str:
        """Write bytes under a deterministic path, overwriting any previous object.

        Args:
            path: Storage key, e.g. ``audio/doc_1.mp3``.
            data: Object content.
            content_type: MIME type recorded with the object.

        Returns:
            The URL the object can be fetched from.

        Raises:
            StorageError: if the write fails.
        """

    @abstractmethod
    def get(self, url: str) -> bytes:
        """Read an object previously returned by ``put``.

        Raises:
            StorageError: if the URL is not served by this adapter or the read fails.
        """

    @abstractmethod
    def delete(self, url: str) -> None:
        """Remove an object. Deleting a missing object is not an error."""

    @abstractmethod
    def owns(self, url: str) -> bool:
        """Return True if ``url`` points into this storage."""
