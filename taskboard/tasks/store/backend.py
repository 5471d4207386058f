from fastapi import Request

from taskboard.config import Settings
from taskboard.tasks.store.base import TaskStoreBackend
from taskboard.tasks.store.json_file import JsonFileTaskStore
from taskboard.tasks.store.memory import InMemoryTaskStore


def get_task_store_backend(settings: Settings) -> TaskStoreBackend:
    if settings.TASK_STORE_BACKEND == "json":
        return JsonFileTaskStore(file_path=settings.TASKS_FILE_PATH)
    elif settings.TASK_STORE_BACKEND == "memory":
        return InMemoryTaskStore()
    else:
        raise ValueError(
            f"Unsupported task store backend: {settings.TASK_STORE_BACKEND}"
        )


def get_task_store(request: Request) -> TaskStoreBackend:
    return request.app.state.task_store
