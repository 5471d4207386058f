from taskboard.common.exceptions import ResourceNotFoundException, ResourceType
from taskboard.tasks.schemas import Task
from taskboard.tasks.store.base import TaskStoreBackend


class InMemoryTaskStore(TaskStoreBackend):
    name = "memory"

    def __init__(self, tasks: list[Task] | None = None):
        self.tasks: list[Task] = list(tasks or [])

    def _find_index(self, task_id: str) -> int:
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return index
        raise ResourceNotFoundException(ResourceType.TASK, task_id)

    def list_tasks(self) -> list[Task]:
        return list(self.tasks)

    def get_task(self, task_id: str) -> Task:
        return self.tasks[self._find_index(task_id)]

    def add_task(self, task: Task) -> Task:
        self.tasks.append(task)
        return task

    def replace_task(self, task: Task) -> Task:
        self.tasks[self._find_index(task.id)] = task
        return task

    def remove_task(self, task_id: str) -> Task:
        return self.tasks.pop(self._find_index(task_id))

    def ping(self) -> None:
        return None
