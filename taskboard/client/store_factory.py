from taskboard.client.reactive import Derived, Readable, Writable
from taskboard.tasks.schemas import Task, TaskStatus
from taskboard.tasks.sorting import sort_column


def create_tasks_store() -> Writable[list[Task]]:
    return Writable([])


def create_loading_store() -> Writable[bool]:
    return Writable(False)


def create_error_store() -> Writable[str | None]:
    return Writable(None)


def create_column_store(
    tasks_store: Readable[list[Task]], status: TaskStatus
) -> Derived[list[Task], list[Task]]:
    return Derived(tasks_store, lambda tasks: sort_column(tasks, status))


def create_count_store(
    tasks_store: Readable[list[Task]], status: TaskStatus
) -> Derived[list[Task], int]:
    return Derived(
        tasks_store, lambda tasks: sum(1 for task in tasks if task.status == status)
    )
