from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from ..database import get_db
from ..schemas.task import CreateTaskRequest, ErrorResponse, TaskResponse, UpdateTaskRequest
from ..services.tasks import Clock, TasksService, utcnow
from ..services.validation import validate_create_request, validate_update_request
from ..store import SqlTaskStore

router = APIRouter()

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def get_clock() -> Clock:
    """Dependency returning the time source; overridden in tests."""
    return utcnow


def get_tasks_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> TasksService:
    return TasksService(SqlTaskStore(db), clock=clock)


@router.get("/tasks", response_model=List[TaskResponse], response_model_exclude_none=True)
def list_tasks(service: TasksService = Depends(get_tasks_service)):
    """Get all tasks: active first (oldest first), then completed (latest completion first)."""
    return service.list_tasks()


@router.get(
    "/tasks/{task_id}",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
)
def get_task(task_id: int, service: TasksService = Depends(get_tasks_service)):
    """Get a specific task by ID."""
    return service.get_task(task_id)


@router.post(
    "/tasks",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
def create_task(
    request: CreateTaskRequest,
    response: Response,
    service: TasksService = Depends(get_tasks_service),
):
    """Create a new task."""
    validate_create_request(request)
    task = service.create_task(request.title)
    response.headers["Location"] = f"/api/tasks/{task.id}"
    return task


@router.patch(
    "/tasks",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def update_task(
    request: UpdateTaskRequest,
    service: TasksService = Depends(get_tasks_service),
):
    """Update the title and/or completion state of an existing task."""
    validate_update_request(request)
    return service.update_task(request.id, title=request.title, is_completed=request.is_completed)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: int, service: TasksService = Depends(get_tasks_service)):
    """Delete a task. Succeeds whether or not the task existed."""
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
