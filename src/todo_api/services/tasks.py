"""Service layer encapsulating task-related operations."""

from __future__ import annotations

import logging

from ..errors import NotFoundError, StorageError, ValidationError
from ..models import Task
from ..repositories import TaskRepository
from ..storage import IncomingFile, UploadStorage

logger = logging.getLogger(__name__)


class TaskService:
    """High-level business orchestration for ``Task`` entities."""

    def __init__(self, repository: TaskRepository, storage: UploadStorage) -> None:
        self._repository = repository
        self._storage = storage

    def _require(self, task: Task | None, task_id: int) -> Task:
        if task is None:
            raise NotFoundError(f"Task {task_id} not found.", details={"task_id": task_id})
        return task

    async def create_task(
        self,
        *,
        title: str | None,
        description: str | None = None,
        attachment: IncomingFile | None = None,
    ) -> Task:
        """Create a task, storing its attachment when one is supplied.

        A failed upload does not abort the task; it is created without an image.
        """
        cleaned_title = (title or "").strip()
        if not cleaned_title:
            raise ValidationError("Title is required.", details={"field": "title"})

        image_url: str | None = None
        if attachment is not None and not attachment.is_empty:
            try:
                image_url = await self._storage.store(attachment)
            except StorageError:
                logger.warning("Creating task without its attachment after upload failure")

        task = self._repository.add(
            Task(
                title=cleaned_title,
                description=description or "",
                image_url=image_url,
            )
        )
        logger.info("Task created", extra={"task_id": task.id, "has_image": image_url is not None})
        return task

    async def get_task(self, task_id: int) -> Task:
        """Retrieve a task by id."""
        return self._require(self._repository.get(task_id), task_id)

    async def list_tasks(self) -> list[Task]:
        """Return all tasks, newest first."""
        return self._repository.list()

    async def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        is_completed: bool | None = None,
    ) -> Task:
        """Overwrite the supplied fields. The attachment is always preserved."""
        if title is not None and not title.strip():
            raise ValidationError("Title cannot be blank.", details={"field": "title"})

        def _apply(task: Task) -> None:
            if title is not None:
                task.title = title.strip()
            if description is not None:
                task.description = description
            if is_completed is not None:
                task.is_completed = is_completed

        return self._require(self._repository.update(task_id, _apply), task_id)

    async def toggle_task(self, task_id: int) -> Task:
        """Flip the completion flag of a task."""

        def _flip(task: Task) -> None:
            task.is_completed = not task.is_completed

        return self._require(self._repository.update(task_id, _flip), task_id)

    async def delete_task(self, task_id: int) -> None:
        """Delete a task and, best effort, its attachment file."""
        task = self._require(self._repository.delete(task_id), task_id)
        if task.image_url:
            await self._storage.delete(task.image_url)
        logger.info("Task deleted", extra={"task_id": task_id})
