"""Routes handling task CRUD operations."""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from ...deps import SubmissionDependency, TaskServiceDependency
from ...models import Task
from ...schemas import TaskRead, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _map_task(task: Task) -> TaskRead:
    return TaskRead.from_entity(task)


@router.get(
    "",
    response_model=list[TaskRead],
    summary="List tasks, newest first",
)
async def list_tasks(service: TaskServiceDependency) -> list[TaskRead]:
    return [_map_task(task) for task in await service.list_tasks()]


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    summary="Retrieve a task by id",
)
async def get_task(task_id: int, service: TaskServiceDependency) -> TaskRead:
    return _map_task(await service.get_task(task_id))


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    description=(
        "Accepts multipart form data (`title`, `description`, optional `image` file) "
        "or a JSON object with `title` and `description`."
    ),
)
async def create_task(
    request: Request,
    response: Response,
    submission: SubmissionDependency,
    service: TaskServiceDependency,
) -> TaskRead:
    task = await service.create_task(
        title=submission.get("title"),
        description=submission.get("description"),
        attachment=submission.file("image"),
    )
    response.headers["Location"] = request.app.url_path_for("get_task", task_id=str(task.id))
    return _map_task(task)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update an existing task",
)
async def update_task(
    task_id: int,
    payload: TaskUpdate,
    service: TaskServiceDependency,
) -> TaskRead:
    task = await service.update_task(
        task_id,
        title=payload.title,
        description=payload.description,
        is_completed=payload.is_completed,
    )
    return _map_task(task)


@router.patch(
    "/{task_id}/toggle",
    response_model=TaskRead,
    summary="Flip the completion flag of a task",
)
async def toggle_task(task_id: int, service: TaskServiceDependency) -> TaskRead:
    return _map_task(await service.toggle_task(task_id))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task and its image",
)
async def delete_task(task_id: int, service: TaskServiceDependency) -> Response:
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
