from abc import ABC, abstractmethod

from tasklist.tasks.schemas import Task


class TaskStore(ABC):
    @abstractmethod
    def task_exists(self, task_id: str) -> bool:
        pass

    @abstractmethod
    def create_task(self, text: str) -> Task:
        """Persist a new task. The store assigns `id` and `created_at` and
        starts every task as not completed."""
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> Task:
        pass

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        """Return every task, newest `created_at` first."""
        pass

    @abstractmethod
    def update_task_text(self, task_id: str, text: str) -> Task:
        pass

    @abstractmethod
    def toggle_task(self, task_id: str) -> Task:
        pass

    @abstractmethod
    def delete_task(self, task_id: str) -> None:
        pass
