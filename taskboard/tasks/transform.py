"""Timestamp bookkeeping shared by the API service and the client store."""
from typing import Any
from uuid import uuid4

from taskboard.common.current_datetime import get_current_datetime
from taskboard.tasks.schemas import CreateTaskRequest, Task, TaskStatus


def prepare_task_update(task: Task, fields: dict[str, Any]) -> dict[str, Any]:
    """Add completedAt/updatedAt bookkeeping to a set of changed fields.

    Moving a task into done stamps completedAt with the current time, moving
    it out of done clears completedAt, and updatedAt is always bumped.
    """
    prepared = dict(fields)
    now = get_current_datetime()

    if prepared.get("status") is not None:
        new_status = TaskStatus(prepared["status"])
        prepared["status"] = new_status
        if new_status == TaskStatus.DONE and task.status != TaskStatus.DONE:
            prepared["completed_at"] = now
        elif new_status != TaskStatus.DONE and task.status == TaskStatus.DONE:
            prepared["completed_at"] = None

    prepared["updated_at"] = now
    return prepared


def prepare_new_task(request: CreateTaskRequest) -> Task:
    now = get_current_datetime()
    return Task(
        id=str(uuid4()),
        title=request.title,
        description=request.description or "",
        status=request.status,
        labels=request.labels or [],
        assignee=request.assignee or "",
        estimated_completion=request.estimated_completion,
        completed_at=now if request.status == TaskStatus.DONE else None,
        created_at=now,
        updated_at=now,
    )


def apply_updates(task: Task, updates: dict[str, Any]) -> Task:
    return Task.model_validate({**task.model_dump(), **updates})
