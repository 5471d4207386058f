from datetime import datetime
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TaskStatus(str, Enum):
    TODO = "todo"
    DOING = "doing"
    DONE = "done"


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )


class Task(CamelModel):
    id: str
    title: str
    description: str = ""
    status: TaskStatus
    labels: list[str] = []
    assignee: str = ""
    estimated_completion: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("description", "assignee", mode="before")
    def empty_string_for_null(cls, value: Any):
        return "" if value is None else value

    @field_validator("labels", mode="before")
    def empty_list_for_null(cls, value: Any):
        return [] if value is None else value


def _blank_date_to_none(value: Any):
    # an empty date input is sent as ""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class CreateTaskRequest(CamelModel):
    title: str = Field(..., min_length=1)
    status: TaskStatus
    description: str | None = None
    labels: list[str] | None = None
    assignee: str | None = None
    estimated_completion: datetime | None = None

    @field_validator("estimated_completion", mode="before")
    def blank_estimated_completion(cls, value: Any):
        return _blank_date_to_none(value)


class UpdateTaskRequest(CamelModel):
    title: str | None = Field(None, min_length=1)
    description: str | None = None
    status: TaskStatus | None = None
    labels: list[str] | None = None
    assignee: str | None = None
    estimated_completion: datetime | None = None

    @field_validator("estimated_completion", mode="before")
    def blank_estimated_completion(cls, value: Any):
        return _blank_date_to_none(value)

    @field_validator("title", "status")
    def reject_explicit_null(cls, value: Any):
        if value is None:
            raise ValueError("value may not be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class DeleteTaskResponse(CamelModel):
    success: bool
    deleted_task: Task
