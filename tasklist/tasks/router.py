from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from tasklist.common.exceptions import ResourceType, resource_not_found_response
from tasklist.tasks.dependencies import get_task_service
from tasklist.tasks.schemas import CreateTaskRequest, Task, UpdateTaskRequest
from tasklist.tasks.service import TaskService


router = APIRouter(
    prefix="/api/tasks",
    tags=["Tasks"],
)


@router.get("")
def list_tasks(task_service: TaskService = Depends(get_task_service)) -> list[Task]:
    return task_service.list_tasks()


@router.post("", status_code=status.HTTP_201_CREATED)
def create_task(
    task_input: CreateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(task_input)


@router.put(
    "/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)}
)
def update_task(
    task_id: str,
    task_input: UpdateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.update_task(task_id, task_input)


@router.patch(
    "/{task_id}/toggle", responses={**resource_not_found_response(ResourceType.TASK)}
)
def toggle_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.toggle_task(task_id)


@router.delete(
    "/{task_id}",
    responses={
        200: {
            "description": "Task deleted",
            "content": {
                "application/json": {"example": {"message": "Task deleted"}}
            },
        },
        **resource_not_found_response(ResourceType.TASK),
    },
)
def delete_task(
    task_id: str, task_service: TaskService = Depends(get_task_service)
) -> JSONResponse:
    task_service.delete_task(task_id)

    return JSONResponse(
        content={"message": "Task deleted"},
        status_code=status.HTTP_200_OK,
    )
