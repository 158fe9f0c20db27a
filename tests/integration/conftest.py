import os
import uuid
from collections.abc import Generator

import pytest
import redis

from audio_reader.config.settings import Settings
from audio_reader.store.connection import close_client, create_client


def _test_settings(storage_dir: str) -> Settings:
    return Settings(
        _env_file=None,
        redis_url=os.environ.get("TEST_REDIS_URL", "redis://localhost:6379/15"),
        job_queue_name=f"test-{uuid.uuid4().hex[:8]}",
        local_storage_dir=storage_dir,
        extraction_provider="example",
        cleanup_provider="none",
        openai_api_key="test-key",
    )


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return _test_settings(str(tmp_path / "blobs"))


@pytest.fixture
def live_redis(test_settings: Settings) -> Generator[redis.Redis, None, None]:
    client = create_client(test_settings)
    try:
        client.ping()
    except redis.RedisError as e:
        close_client(client)
        pytest.skip(f"Redis test server not available: {e}. Set TEST_REDIS_URL")
    try:
        yield client
    finally:
        close_client(client)


@pytest.fixture
def integration_cleanup(
    live_redis: redis.Redis, test_settings: Settings
) -> Generator[list[str], None, None]:
    """Keys registered here, plus the test queue, are deleted after the test."""
    cleanup: list[str] = []
    yield cleanup
    queue_keys = live_redis.keys(f"queue:{test_settings.job_queue_name}:*")
    keys = [*cleanup, *queue_keys]
    if keys:
        live_redis.delete(*keys)
