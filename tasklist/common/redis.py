import logging
from fastapi import Request
from redis import Redis
from redis.backoff import NoBackoff
from redis.retry import Retry
from typing import TYPE_CHECKING


logger = logging.getLogger(__name__)

RedisClient = Redis
if TYPE_CHECKING:
    RedisClient = Redis[str]  # type: ignore


def create_redis_client(redis_url: str) -> RedisClient:
    try:
        # Store failures surface immediately as 503s, never retried.
        redis_client = Redis.from_url(
            redis_url, decode_responses=True, retry=Retry(NoBackoff(), 0)
        )
        return redis_client
    except Exception as e:
        raise RuntimeError("Failed to create Redis client") from e


def check_redis_connection(redis_client: RedisClient) -> bool:
    """Ping the store once. The app keeps running if this fails; requests
    touching the store answer 503 until it is reachable again."""
    try:
        redis_client.ping()
        logger.info("Connected to Redis")
        return True
    except Exception as e:
        logger.error(f"Failed to connect to Redis: {e}")
        return False


def get_redis_client(request: Request) -> RedisClient:
    return request.app.state.redis_client
