import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from audio_reader.storage.base import BaseBlobStorage
from audio_reader.storage.exceptions import StorageError


class S3BlobStorage(BaseBlobStorage):
    """Stores blobs in an S3 bucket.

    URLs are ``{public_base_url}/{key}`` when a public base is configured,
    otherwise ``s3://{bucket}/{key}``.
    """

    def __init__(
        self,
        *,
        bucket: str,
        endpoint_url: str | None = None,
        region_name: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        public_base_url: str = "",
    ) -> None:
        if not bucket:
            raise ValueError("s3_bucket is required for storage_backend=s3")
        self._bucket = bucket
        self._public_base_url = public_base_url.rstrip("/")
        s3_kwargs: dict[str, str] = {}
        if endpoint_url:
            s3_kwargs["endpoint_url"] = endpoint_url
        if region_name:
            s3_kwargs["region_name"] = region_name
        self._client = boto3.client(
            "s3",
            aws_access_key_id=access_key or None,
            aws_secret_access_key=secret_key or None,
            config=Config(signature_version="s3v4", s3={"addressing_style": "virtual"}),
            **s3_kwargs,
        )

    def put(self, path: str, data: bytes, content_type: str) -> str:
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"S3 upload of {path} failed: {exc}") from exc
        return self._url_for(path)

    def get(self, url: str) -> bytes:
        key = self._key_for(url)
        try:
            obj = self._client.get_object(Bucket=self._bucket, Key=key)
            return obj["Body"].read()
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"S3 download of {key} failed: {exc}") from exc

    def delete(self, url: str) -> None:
        key = self._key_for(url)
        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"S3 delete of {key} failed: {exc}") from exc

    def owns(self, url: str) -> bool:
        if url.startswith(f"s3://{self._bucket}/"):
            return True
        return bool(self._public_base_url) and url.startswith(f"{self._public_base_url}/")

    def _url_for(self, key: str) -> str:
        if self._public_base_url:
            return f"{self._public_base_url}/{key}"
        return f"s3://{self._bucket}/{key}"

    def _key_for(self, url: str) -> str:
        s3_prefix = f"s3://{self._bucket}/"
        if url.startswith(s3_prefix):
            return url[len(s3_prefix):]
        if self._public_base_url and url.startswith(f"{self._public_base_url}/"):
            return url[len(self._public_base_url) + 1:]
        raise StorageError(f"URL is not served by bucket {self._bucket}: {url}")
