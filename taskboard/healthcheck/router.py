from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from taskboard.tasks.store.backend import get_task_store
from taskboard.tasks.store.base import TaskStoreBackend

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "store": {"status": "ok", "backend": "json"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "store": {
                            "status": "error",
                            "backend": "json",
                            "message": "Failed to read tasks file",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(
    task_store: TaskStoreBackend = Depends(get_task_store),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "store": {"status": "ok", "backend": task_store.name},
    }

    try:
        task_store.ping()
    except Exception as e:
        health_status["store"].update({"status": "error", "message": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
