import logging
from types import TracebackType
from typing import Any, Type
from aiohttp import ClientError, ClientSession
from pydantic import TypeAdapter
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

from taskboard.client.exceptions import TaskApiException
from taskboard.tasks.schemas import CreateTaskRequest, Task


logger = logging.getLogger(__name__)

task_list_adapter = TypeAdapter(list[Task])


class TaskApiClient:
    """HTTP client for the task board API."""

    def __init__(self, *, base_url: str, session: ClientSession | None = None):
        self.base_url = base_url.rstrip("/")
        self.session: ClientSession = session or ClientSession(
            headers={"Accept": "application/json"}
        )

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        if self.session:
            await self.session.close()

    def _url(self, task_id: str | None = None) -> str:
        if task_id is None:
            return f"{self.base_url}/api/tasks"
        return f"{self.base_url}/api/tasks/{task_id}"

    async def request(
        self,
        method: str,
        url: str,
        action: str,
        body: dict[str, Any] | None = None,
    ) -> Any:
        try:
            async with self.session.request(method, url, json=body) as response:
                if response.status >= 400:
                    raise TaskApiException(
                        f"Failed to {action} task: {response.reason}",
                        status=response.status,
                    )
                return await response.json()
        except ClientError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TaskApiException(f"Failed to {action} task: {e}") from e

    async def fetch_all_tasks(self) -> list[Task]:
        data = await self.request("GET", self._url(), "fetch")
        return task_list_adapter.validate_python(data)

    async def create_task(self, new_task: CreateTaskRequest) -> Task:
        data = await self.request(
            "POST",
            self._url(),
            "create",
            body=new_task.model_dump(mode="json", by_alias=True, exclude_none=True),
        )
        return Task.model_validate(data)

    async def update_task(self, task_id: str, updates: dict[str, Any]) -> Task:
        body = {to_camel(key): value for key, value in updates.items()}
        data = await self.request(
            "PUT", self._url(task_id), "update", body=to_jsonable_python(body)
        )
        return Task.model_validate(data)

    async def delete_task(self, task_id: str) -> bool:
        await self.request("DELETE", self._url(task_id), "delete")
        return True
