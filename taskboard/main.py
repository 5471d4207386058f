import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from taskboard.common.exceptions import (
    ResourceNotFoundException,
    TaskStoreException,
    resource_not_found_handler,
    task_store_exception_handler,
    unexpected_exception_handler,
    validation_exception_handler,
    internal_error_response,
    validation_error_response,
)
from taskboard.config import get_settings
from taskboard.healthcheck.router import router as health_router
from taskboard.tasks.router import router as tasks_router
from taskboard.tasks.store.backend import get_task_store_backend

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.task_store = get_task_store_backend(settings)
    logger.info(f"Using '{settings.TASK_STORE_BACKEND}' task store")
    yield


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **internal_error_response,
        **validation_error_response,
    },
    version=settings.TASKBOARD_VERSION,
)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(TaskStoreException)(task_store_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)
