from fastapi import Depends

from tasklist.common.redis import get_redis_client, RedisClient
from tasklist.config import Settings, get_settings
from tasklist.tasks.store.base import TaskStore
from tasklist.tasks.store.redis.store import RedisTaskStore


def get_task_store(
    redis_client: RedisClient = Depends(get_redis_client),
    settings: Settings = Depends(get_settings),
) -> TaskStore:
    return RedisTaskStore(
        redis_client=redis_client,
        key_prefix=settings.TASK_STORE_NAMESPACE,
    )
