import logging
from datetime import datetime
from typing import Callable
from uuid import uuid4

from redis.client import Pipeline

from tasklist.common.current_datetime import get_current_datetime
from tasklist.common.exceptions import ResourceNotFoundException, ResourceType
from tasklist.common.redis import RedisClient
from tasklist.tasks.schemas import Task
from tasklist.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class RedisTaskStore(TaskStore):
    """Tasks live in one hash per task plus a sorted set of task ids scored by
    creation time, which gives the newest-first listing order."""

    def __init__(self, *, redis_client: RedisClient, key_prefix: str):
        self.client = redis_client
        self.key_prefix = key_prefix
        self.index_key = f"{key_prefix}:index"

    def _task_key(self, task_id: str) -> str:
        return f"{self.key_prefix}:task:{task_id}"

    def _get_task_key(self, task_id: str) -> str:
        task_key = self._task_key(task_id)

        if not self.client.exists(task_key):
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

        return task_key

    def _map_task(self, task: dict[str, str]) -> Task:
        return Task(
            id=task["id"],
            text=task["text"],
            completed=task["completed"] == "1",
            created_at=datetime.fromisoformat(task["created_at"]),
        )

    def task_exists(self, task_id: str) -> bool:
        try:
            self._get_task_key(task_id)
            return True
        except ResourceNotFoundException:
            return False

    def create_task(self, text: str) -> Task:
        task_id = str(uuid4())
        timestamp = get_current_datetime()

        pipeline = self.client.pipeline(transaction=True)
        pipeline.hset(
            self._task_key(task_id),
            mapping={
                "id": task_id,
                "text": text,
                "completed": 0,
                "created_at": timestamp.isoformat(),
            },
        )
        pipeline.zadd(self.index_key, {task_id: timestamp.timestamp()})
        pipeline.execute()

        logger.info(f"Created task '{task_id}'")

        return Task(id=task_id, text=text, completed=False, created_at=timestamp)

    def get_task(self, task_id: str) -> Task:
        task = self.client.hgetall(self._task_key(task_id))
        if not task:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        return self._map_task(task)

    def list_tasks(self) -> list[Task]:
        task_ids: list[str] = self.client.zrevrange(self.index_key, 0, -1)

        pipeline = self.client.pipeline(transaction=False)
        for task_id in task_ids:
            pipeline.hgetall(self._task_key(task_id))

        # A task deleted between the two reads comes back empty.
        return [self._map_task(task) for task in pipeline.execute() if task]

    def _write_existing_task(
        self, task_id: str, write: Callable[[Pipeline, str], object]
    ) -> Task:
        """Run `write` under WATCH/MULTI on the task hash so a concurrent delete
        aborts the transaction instead of leaving a partial hash behind."""
        task_key = self._task_key(task_id)

        def transaction(pipe: Pipeline) -> None:
            completed = pipe.hget(task_key, "completed")
            if completed is None:
                raise ResourceNotFoundException(ResourceType.TASK, task_id)
            pipe.multi()
            write(pipe, completed)
            pipe.hgetall(task_key)

        results = self.client.transaction(transaction, task_key)
        return self._map_task(results[-1])

    def update_task_text(self, task_id: str, text: str) -> Task:
        return self._write_existing_task(
            task_id, lambda pipe, _: pipe.hset(self._task_key(task_id), "text", text)
        )

    def toggle_task(self, task_id: str) -> Task:
        return self._write_existing_task(
            task_id,
            lambda pipe, completed: pipe.hset(
                self._task_key(task_id), "completed", 0 if completed == "1" else 1
            ),
        )

    def delete_task(self, task_id: str) -> None:
        pipeline = self.client.pipeline(transaction=True)
        pipeline.delete(self._task_key(task_id))
        pipeline.zrem(self.index_key, task_id)
        deleted, _ = pipeline.execute()

        if not deleted:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)

        logger.info(f"Deleted task '{task_id}'")
