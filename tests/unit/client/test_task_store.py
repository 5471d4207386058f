from datetime import datetime, timezone
from typing import Callable
from unittest.mock import Mock
import pytest
from pytest_mock import MockerFixture

from taskboard.client.api_client import TaskApiClient
from taskboard.client.exceptions import TaskApiException
from taskboard.client.task_store import TaskBoardStore
from taskboard.common.exceptions import ResourceNotFoundException
from taskboard.tasks.schemas import CreateTaskRequest, Task, TaskStatus


@pytest.fixture
def mock_api_client(mocker: MockerFixture) -> Mock:
    return mocker.Mock(spec=TaskApiClient)


@pytest.fixture
def board(mock_api_client: Mock) -> TaskBoardStore:
    return TaskBoardStore(mock_api_client)


@pytest.fixture(autouse=True)
def mock_current_datetime(mocker: MockerFixture, fixed_now: datetime) -> None:
    mocker.patch(
        "taskboard.tasks.transform.get_current_datetime", return_value=fixed_now
    )


@pytest.fixture
def seeded_tasks(make_task: Callable[..., Task]) -> list[Task]:
    return [
        make_task("a", estimated_completion=datetime(2024, 4, 1, tzinfo=timezone.utc)),
        make_task("b", status=TaskStatus.DOING),
        make_task(
            "c",
            status=TaskStatus.DONE,
            completed_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        ),
        make_task("d", estimated_completion=datetime(2024, 3, 1, tzinfo=timezone.utc)),
    ]


@pytest.fixture
async def seeded_board(
    board: TaskBoardStore, mock_api_client: Mock, seeded_tasks: list[Task]
) -> TaskBoardStore:
    mock_api_client.fetch_all_tasks.return_value = seeded_tasks
    await board.init()
    return board


async def test_init_populates_store_and_views(
    seeded_board: TaskBoardStore, seeded_tasks: list[Task]
) -> None:
    assert seeded_board.tasks.get() == seeded_tasks
    assert [task.id for task in seeded_board.todo_tasks.get()] == ["d", "a"]
    assert [task.id for task in seeded_board.doing_tasks.get()] == ["b"]
    assert [task.id for task in seeded_board.done_tasks.get()] == ["c"]
    assert seeded_board.todo_count.get() == 2
    assert seeded_board.doing_count.get() == 1
    assert seeded_board.done_count.get() == 1
    assert seeded_board.is_loading.get() is False
    assert seeded_board.error.get() is None


async def test_init_tracks_loading_state(
    board: TaskBoardStore, mock_api_client: Mock
) -> None:
    loading: list[bool] = []
    board.is_loading.subscribe(loading.append)
    mock_api_client.fetch_all_tasks.return_value = []

    await board.init()

    assert loading == [False, True, False]


async def test_init_failure_sets_error_and_empties_list(
    seeded_board: TaskBoardStore, mock_api_client: Mock
) -> None:
    mock_api_client.fetch_all_tasks.side_effect = TaskApiException(
        "Failed to fetch task: Internal Server Error"
    )

    result = await seeded_board.init()

    assert result == []
    assert seeded_board.tasks.get() == []
    assert seeded_board.error.get() == "Failed to fetch task: Internal Server Error"
    assert seeded_board.is_loading.get() is False


async def test_add_task_appends_created_task(
    seeded_board: TaskBoardStore,
    mock_api_client: Mock,
    make_task: Callable[..., Task],
) -> None:
    created = make_task("e")
    mock_api_client.create_task.return_value = created

    result = await seeded_board.add_task({"title": "Task e", "status": "todo"})

    mock_api_client.create_task.assert_called_once_with(
        CreateTaskRequest(title="Task e", status=TaskStatus.TODO)
    )
    assert result == created
    assert seeded_board.tasks.get()[-1] == created
    assert seeded_board.todo_count.get() == 3


async def test_add_task_failure_sets_error_and_raises(
    seeded_board: TaskBoardStore, mock_api_client: Mock, seeded_tasks: list[Task]
) -> None:
    mock_api_client.create_task.side_effect = TaskApiException(
        "Failed to create task: Bad Request"
    )

    with pytest.raises(TaskApiException):
        await seeded_board.add_task(CreateTaskRequest(title="x", status=TaskStatus.TODO))

    assert seeded_board.tasks.get() == seeded_tasks
    assert seeded_board.error.get() == "Failed to create task: Bad Request"
    assert seeded_board.is_loading.get() is False


async def test_update_task_applies_optimistically_then_server_response(
    seeded_board: TaskBoardStore,
    mock_api_client: Mock,
    make_task: Callable[..., Task],
    fixed_now: datetime,
) -> None:
    server_task = make_task(
        "a", status=TaskStatus.DONE, completed_at=fixed_now, updated_at=fixed_now
    )
    optimistic: list[Task | None] = []

    async def fake_update(task_id: str, updates: dict) -> Task:
        optimistic.append(seeded_board.get_task_by_id(task_id))
        return server_task

    mock_api_client.update_task.side_effect = fake_update

    result = await seeded_board.update_task_status("a", TaskStatus.DONE)

    (sent_id, sent_updates), _ = mock_api_client.update_task.call_args
    assert sent_id == "a"
    assert sent_updates["status"] == TaskStatus.DONE
    assert sent_updates["completed_at"] == fixed_now
    assert optimistic[0] is not None
    assert optimistic[0].status == TaskStatus.DONE
    assert optimistic[0].completed_at == fixed_now
    assert result == server_task
    assert seeded_board.get_task_by_id("a") == server_task
    assert [task.id for task in seeded_board.done_tasks.get()] == ["a", "c"]


async def test_update_task_failure_rolls_back(
    seeded_board: TaskBoardStore, mock_api_client: Mock, seeded_tasks: list[Task]
) -> None:
    mock_api_client.update_task.side_effect = TaskApiException(
        "Failed to update task: Internal Server Error"
    )

    with pytest.raises(TaskApiException):
        await seeded_board.update_task("c", {"status": "todo", "title": "Reopened"})

    assert seeded_board.tasks.get() == seeded_tasks
    assert seeded_board.error.get() == "Failed to update task: Internal Server Error"


async def test_update_task_not_found(
    seeded_board: TaskBoardStore, mock_api_client: Mock, seeded_tasks: list[Task]
) -> None:
    with pytest.raises(ResourceNotFoundException):
        await seeded_board.update_task("missing", {"title": "x"})

    mock_api_client.update_task.assert_not_called()
    assert seeded_board.tasks.get() == seeded_tasks
    assert seeded_board.error.get() == "Task 'missing' not found"


async def test_delete_task(
    seeded_board: TaskBoardStore, mock_api_client: Mock
) -> None:
    mock_api_client.delete_task.return_value = True

    assert await seeded_board.delete_task("b") is True

    mock_api_client.delete_task.assert_called_once_with("b")
    assert seeded_board.get_task_by_id("b") is None
    assert seeded_board.doing_count.get() == 0


async def test_delete_task_failure_restores_position(
    seeded_board: TaskBoardStore, mock_api_client: Mock, seeded_tasks: list[Task]
) -> None:
    mock_api_client.delete_task.side_effect = TaskApiException(
        "Failed to delete task: Not Found"
    )

    with pytest.raises(TaskApiException):
        await seeded_board.delete_task("b")

    assert seeded_board.tasks.get() == seeded_tasks
    assert seeded_board.error.get() == "Failed to delete task: Not Found"


async def test_delete_task_not_found(
    seeded_board: TaskBoardStore, mock_api_client: Mock
) -> None:
    with pytest.raises(ResourceNotFoundException):
        await seeded_board.delete_task("missing")

    mock_api_client.delete_task.assert_not_called()


def test_get_task_by_id_and_clear_error(board: TaskBoardStore) -> None:
    assert board.get_task_by_id("anything") is None

    board.error.set("Something broke")
    board.clear_error()

    assert board.error.get() is None


async def test_subscribe_receives_changes(
    board: TaskBoardStore, mock_api_client: Mock, seeded_tasks: list[Task]
) -> None:
    seen: list[list[Task]] = []
    unsubscribe = board.subscribe(seen.append)
    mock_api_client.fetch_all_tasks.return_value = seeded_tasks

    await board.init()
    unsubscribe()

    assert seen == [[], seeded_tasks]
