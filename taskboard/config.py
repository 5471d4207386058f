from functools import lru_cache
from typing import Annotated, Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    TASKBOARD_VERSION: str = "v0.1.x"
    API_NAME: str = "Taskboard"
    API_SUMMARY: str = "A small Kanban task board backed by a JSON file"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    CORS_ENABLED: bool = False
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    # Storage Configuration
    TASK_STORE_BACKEND: Literal["json", "memory"] = "json"
    TASKS_FILE_PATH: str = "static/data/tasks.json"

    # Client Settings
    API_BASE_URL: str = "http://localhost:8000"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("TASK_STORE_BACKEND", mode="before")
    def normalize_store_backend(cls, v: Any):
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
