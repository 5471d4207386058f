import logging

from taskboard.tasks.schemas import (
    CreateTaskRequest,
    DeleteTaskResponse,
    Task,
    UpdateTaskRequest,
)
from taskboard.tasks.sorting import sort_board
from taskboard.tasks.store.base import TaskStoreBackend
from taskboard.tasks.transform import (
    apply_updates,
    prepare_new_task,
    prepare_task_update,
)

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, *, task_store: TaskStoreBackend) -> None:
        self.task_store = task_store

    def list_tasks(self) -> list[Task]:
        return sort_board(self.task_store.list_tasks())

    def create_task(self, task_input: CreateTaskRequest) -> Task:
        task = self.task_store.add_task(prepare_new_task(task_input))
        logger.info(f"Created task '{task.id}' in {task.status.value}")
        return task

    def get_task(self, task_id: str) -> Task:
        return self.task_store.get_task(task_id)

    def update_task(self, task_id: str, task_input: UpdateTaskRequest) -> Task:
        existing = self.task_store.get_task(task_id)

        updates = prepare_task_update(existing, task_input.changes())
        updated = apply_updates(
            existing,
            {**updates, "id": existing.id, "created_at": existing.created_at},
        )

        return self.task_store.replace_task(updated)

    def delete_task(self, task_id: str) -> DeleteTaskResponse:
        deleted = self.task_store.remove_task(task_id)
        logger.info(f"Deleted task '{task_id}'")
        return DeleteTaskResponse(success=True, deleted_task=deleted)
