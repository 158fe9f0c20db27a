import redis

from audio_reader.config.settings import Settings


def create_client(settings: Settings) -> redis.Redis:
    """Build the store client from settings. Caller owns its lifecycle."""
    return redis.Redis.from_url(settings.redis_url, decode_responses=True)


def close_client(client: redis.Redis) -> None:
    """Release the client's connection pool."""
    client.close()
