from __future__ import annotations

import logging
from typing import Any

from app.application.tasks.task_validation import validate_create_payload
from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task

logger = logging.getLogger(__name__)


async def create_task_usecase(repo: TaskRepository, payload: Any) -> Task:
    """
    Проверяет тело запроса и создаёт задачу.
    При невалидном теле бросает TaskValidationError, хранилище не трогается.
    """
    title, completed = validate_create_payload(payload)

    task = await repo.create(title=title, completed=completed)
    logger.info("Task %s created", task.id)
    return task
