"""Client-side task board store.

Wraps the task list in reactive stores and keeps it in sync with the API.
Updates and deletes are applied locally first and rolled back if the API
call fails; failures are also published on the ``error`` store as a plain
message.
"""
import logging
from typing import Any, Callable

from taskboard.client.api_client import TaskApiClient
from taskboard.client.reactive import Unsubscriber
from taskboard.client.store_factory import (
    create_column_store,
    create_count_store,
    create_error_store,
    create_loading_store,
    create_tasks_store,
)
from taskboard.common.exceptions import ResourceNotFoundException, ResourceType
from taskboard.tasks.schemas import (
    CreateTaskRequest,
    Task,
    TaskStatus,
    UpdateTaskRequest,
)
from taskboard.tasks.transform import apply_updates, prepare_task_update

logger = logging.getLogger(__name__)


class TaskBoardStore:
    def __init__(self, api_client: TaskApiClient):
        self.api_client = api_client

        self.tasks = create_tasks_store()
        self.is_loading = create_loading_store()
        self.error = create_error_store()

        self.todo_tasks = create_column_store(self.tasks, TaskStatus.TODO)
        self.doing_tasks = create_column_store(self.tasks, TaskStatus.DOING)
        self.done_tasks = create_column_store(self.tasks, TaskStatus.DONE)

        self.todo_count = create_count_store(self.tasks, TaskStatus.TODO)
        self.doing_count = create_count_store(self.tasks, TaskStatus.DOING)
        self.done_count = create_count_store(self.tasks, TaskStatus.DONE)

    def subscribe(self, callback: Callable[[list[Task]], None]) -> Unsubscriber:
        return self.tasks.subscribe(callback)

    def _find(self, task_id: str) -> Task:
        task = self.get_task_by_id(task_id)
        if task is None:
            raise ResourceNotFoundException(ResourceType.TASK, task_id)
        return task

    async def init(self) -> list[Task]:
        try:
            self.is_loading.set(True)
            self.error.set(None)

            tasks = await self.api_client.fetch_all_tasks()
            self.tasks.set(tasks)
            return tasks
        except Exception as e:
            logger.error(f"Error initializing task store: {e}")
            self.error.set(str(e))
            self.tasks.set([])
            return []
        finally:
            self.is_loading.set(False)

    async def add_task(self, new_task: CreateTaskRequest | dict[str, Any]) -> Task:
        try:
            self.is_loading.set(True)
            self.error.set(None)

            if not isinstance(new_task, CreateTaskRequest):
                new_task = CreateTaskRequest.model_validate(new_task)

            created = await self.api_client.create_task(new_task)
            self.tasks.update(lambda tasks: [*tasks, created])
            return created
        except Exception as e:
            logger.error(f"Error adding task: {e}")
            self.error.set(str(e))
            raise
        finally:
            self.is_loading.set(False)

    async def update_task(self, task_id: str, fields: dict[str, Any]) -> Task:
        try:
            self.error.set(None)

            previous = self._find(task_id)
            changes = UpdateTaskRequest.model_validate(fields).changes()
            prepared = prepare_task_update(previous, changes)

            self.tasks.update(
                lambda tasks: [
                    apply_updates(task, prepared) if task.id == task_id else task
                    for task in tasks
                ]
            )

            try:
                server_task = await self.api_client.update_task(task_id, prepared)
            except Exception:
                self.tasks.update(
                    lambda tasks: [
                        previous if task.id == task_id else task for task in tasks
                    ]
                )
                raise

            self.tasks.update(
                lambda tasks: [
                    server_task if task.id == task_id else task for task in tasks
                ]
            )
            return server_task
        except Exception as e:
            logger.error(f"Error updating task: {e}")
            self.error.set(str(e))
            raise

    async def delete_task(self, task_id: str) -> bool:
        try:
            self.error.set(None)

            deleted = self._find(task_id)
            position = next(
                index
                for index, task in enumerate(self.tasks.get())
                if task.id == task_id
            )
            self.tasks.update(lambda tasks: [task for task in tasks if task.id != task_id])

            try:
                await self.api_client.delete_task(task_id)
            except Exception:
                self.tasks.update(
                    lambda tasks: [*tasks[:position], deleted, *tasks[position:]]
                )
                raise

            return True
        except Exception as e:
            logger.error(f"Error deleting task: {e}")
            self.error.set(str(e))
            raise

    async def update_task_status(self, task_id: str, status: TaskStatus | str) -> Task:
        return await self.update_task(task_id, {"status": status})

    def get_task_by_id(self, task_id: str) -> Task | None:
        return next((task for task in self.tasks.get() if task.id == task_id), None)

    def clear_error(self) -> None:
        self.error.set(None)
