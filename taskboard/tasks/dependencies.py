from fastapi import Depends

from taskboard.tasks.service import TaskService
from taskboard.tasks.store.backend import get_task_store
from taskboard.tasks.store.base import TaskStoreBackend


def get_task_service(
    task_store: TaskStoreBackend = Depends(get_task_store),
) -> TaskService:
    return TaskService(task_store=task_store)
