from datetime import datetime, timezone
from typing import Any, Callable
import pytest

from taskboard.tasks.schemas import Task, TaskStatus


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Build a task with sensible defaults; keyword arguments override fields."""

    def _make_task(task_id: str = "task-1", **overrides: Any) -> Task:
        created = datetime(2024, 1, 1, 9, 0, 0, tzinfo=timezone.utc)
        fields: dict[str, Any] = {
            "id": task_id,
            "title": f"Task {task_id}",
            "status": TaskStatus.TODO,
            "created_at": created,
            "updated_at": created,
        }
        fields.update(overrides)
        return Task(**fields)

    return _make_task
