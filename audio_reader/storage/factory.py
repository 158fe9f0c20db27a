from pathlib import Path

from audio_reader.config.settings import Settings
from audio_reader.storage.base import BaseBlobStorage
from audio_reader.storage.local_adapter import LocalBlobStorage
from audio_reader.storage.s3_adapter import S3BlobStorage


class BlobStorageFactory:
    """Creates the configured blob storage adapter."""

    BACKENDS = ("local", "s3")

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobStorage:
        backend = settings.storage_backend.lower()
        if backend == "local":
            return LocalBlobStorage(Path(settings.local_storage_dir))
        if backend == "s3":
            return S3BlobStorage(
                bucket=settings.s3_bucket,
                endpoint_url=settings.s3_endpoint or None,
                region_name=settings.s3_region or None,
                access_key=settings.s3_access_key or None,
                secret_key=settings.s3_secret_key or None,
                public_base_url=settings.s3_public_base_url,
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
