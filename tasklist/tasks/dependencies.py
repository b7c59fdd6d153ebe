from fastapi import Depends

from tasklist.tasks.service import TaskService
from tasklist.tasks.store.base import TaskStore
from tasklist.tasks.store.dependencies import get_task_store


def get_task_service(
    task_store: TaskStore = Depends(get_task_store),
) -> TaskService:
    return TaskService(task_store=task_store)
