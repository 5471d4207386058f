"""Board ordering for tasks.

Todo and doing columns are ordered by estimated completion, closest first,
with undated tasks at the end. The done column is ordered by completion
time, most recent first, with tasks missing a completion time at the end.
"""
from datetime import datetime
import math

from taskboard.tasks.schemas import Task, TaskStatus


def _timestamp(value: datetime | None, missing: float) -> float:
    return value.timestamp() if value is not None else missing


def estimated_completion_key(task: Task) -> float:
    return _timestamp(task.estimated_completion, math.inf)


def completed_at_key(task: Task) -> float:
    return _timestamp(task.completed_at, -math.inf)


def sort_column(tasks: list[Task], status: TaskStatus) -> list[Task]:
    """Return the tasks of one column in display order."""
    column = [task for task in tasks if task.status == status]
    if status == TaskStatus.DONE:
        return sorted(column, key=completed_at_key, reverse=True)
    return sorted(column, key=estimated_completion_key)


def sort_board(tasks: list[Task]) -> list[Task]:
    """Order a mixed list of tasks for the list endpoint.

    Done and open tasks are sorted independently and written back into the
    positions their group already occupied, so the interleaving of the two
    groups is left as it was.
    """
    done = sorted(
        (task for task in tasks if task.status == TaskStatus.DONE),
        key=completed_at_key,
        reverse=True,
    )
    open_tasks = sorted(
        (task for task in tasks if task.status != TaskStatus.DONE),
        key=estimated_completion_key,
    )

    done_iter = iter(done)
    open_iter = iter(open_tasks)
    return [
        next(done_iter) if task.status == TaskStatus.DONE else next(open_iter)
        for task in tasks
    ]
