from abc import ABC, abstractmethod

from taskboard.tasks.schemas import Task


class TaskStoreBackend(ABC):
    name: str

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        pass

    @abstractmethod
    def get_task(self, task_id: str) -> Task:
        pass

    @abstractmethod
    def add_task(self, task: Task) -> Task:
        pass

    @abstractmethod
    def replace_task(self, task: Task) -> Task:
        pass

    @abstractmethod
    def remove_task(self, task_id: str) -> Task:
        pass

    @abstractmethod
    def ping(self) -> None:
        pass
