from pathlib import Path

from audio_reader.storage.base import BaseBlobStorage
from audio_reader.storage.exceptions import StorageError

_SCHEME = "file://"


class LocalBlobStorage(BaseBlobStorage):
    """Stores blobs as files under a root directory and hands out file:// URLs."""

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    def put(self, path: str, data: bytes, content_type: str) -> str:
        _ = content_type
        target = self._resolve_key(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Failed to write {path}: {exc}") from exc
        return f"{_SCHEME}{target}"

    def get(self, url: str) -> bytes:
        target = self._resolve_url(url)
        try:
            return target.read_bytes()
        except OSError as exc:
            raise StorageError(f"Failed to read {url}: {exc}") from exc

    def delete(self, url: str) -> None:
        target = self._resolve_url(url)
        try:
            target.unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to delete {url}: {exc}") from exc

    def owns(self, url: str) -> bool:
        if not url.startswith(_SCHEME):
            return False
        return Path(url[len(_SCHEME):]).resolve().is_relative_to(self._root)

    def _resolve_key(self, path: str) -> Path:
        target = (self._root / path).resolve()
        if not target.is_relative_to(self._root):
            raise StorageError(f"Path escapes storage root: {path}")
        return target

    def _resolve_url(self, url: str) -> Path:
        if not self.owns(url):
            raise StorageError(f"URL is not served by local storage: {url}")
        return Path(url[len(_SCHEME):]).resolve()
