from tasklist.tasks.schemas import CreateTaskRequest, Task, UpdateTaskRequest
from tasklist.tasks.store.base import TaskStore


class TaskService:
    """The store raises `ResourceNotFoundException` for absent ids as part of
    the same atomic call that performs the write."""

    def __init__(self, task_store: TaskStore):
        self.task_store = task_store

    def list_tasks(self) -> list[Task]:
        return self.task_store.list_tasks()

    def create_task(self, task_input: CreateTaskRequest) -> Task:
        return self.task_store.create_task(task_input.text)

    def update_task(self, task_id: str, task_input: UpdateTaskRequest) -> Task:
        return self.task_store.update_task_text(task_id, task_input.text)

    def toggle_task(self, task_id: str) -> Task:
        return self.task_store.toggle_task(task_id)

    def delete_task(self, task_id: str) -> None:
        self.task_store.delete_task(task_id)
