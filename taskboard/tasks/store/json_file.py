import json
import logging
from pathlib import Path
from pydantic import TypeAdapter, ValidationError

from taskboard.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    TaskStoreException,
)
from taskboard.tasks.schemas import Task
from taskboard.tasks.store.base import TaskStoreBackend

logger = logging.getLogger(__name__)

task_list_adapter = TypeAdapter(list[Task])


class JsonFileTaskStore(TaskStoreBackend):
    """Keeps every task in one JSON array file.

    Each mutation reads the whole file, changes the list in memory and
    rewrites the file. There is no locking, so two writers racing on the
    same file can lose updates.
    """

    name = "json"

    def __init__(self, *, file_path: str | Path):
        self.file_path = Path(file_path)

    def _read_tasks(self, create_if_missing: bool = False) -> list[Task]:
        if not self.file_path.exists():
            if create_if_missing:
                self._write_tasks([])
            return []

        try:
            raw = self.file_path.read_text(encoding="utf-8")
            return task_list_adapter.validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            raise TaskStoreException(
                f"Tasks file {self.file_path} is not a valid task list: {e}"
            ) from e
        except OSError as e:
            raise TaskStoreException(
                f"Failed to read tasks file {self.file_path}: {e}"
            ) from e

    def _write_tasks(self, tasks: list[Task]) -> None:
        data = [task.model_dump(mode="json", by_alias=True) for task in tasks]
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            raise TaskStoreException(
                f"Failed to write tasks file {self.file_path}: {e}"
            ) from e
        logger.debug(f"Wrote {len(tasks)} tasks to {self.file_path}")

    def _find_index(self, tasks: list[Task], task_id: str) -> int:
        for index, task in enumerate(tasks):
            if task.id == task_id:
                return index
        raise ResourceNotFoundException(ResourceType.TASK, task_id)

    def list_tasks(self) -> list[Task]:
        return self._read_tasks(create_if_missing=True)

    def get_task(self, task_id: str) -> Task:
        tasks = self._read_tasks()
        return tasks[self._find_index(tasks, task_id)]

    def add_task(self, task: Task) -> Task:
        tasks = self._read_tasks()
        tasks.append(task)
        self._write_tasks(tasks)
        return task

    def replace_task(self, task: Task) -> Task:
        tasks = self._read_tasks()
        tasks[self._find_index(tasks, task.id)] = task
        self._write_tasks(tasks)
        return task

    def remove_task(self, task_id: str) -> Task:
        tasks = self._read_tasks()
        removed = tasks.pop(self._find_index(tasks, task_id))
        self._write_tasks(tasks)
        return removed

    def ping(self) -> None:
        self._read_tasks()
