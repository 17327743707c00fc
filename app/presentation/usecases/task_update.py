from __future__ import annotations

import logging
from typing import Any, Optional

from app.application.tasks.task_validation import (
    parse_task_id,
    validate_update_payload,
)
from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task

logger = logging.getLogger(__name__)


async def update_task_usecase(
    repo: TaskRepository,
    raw_id: Any,
    payload: Any,
) -> Optional[Task]:
    """
    Частичное обновление задачи.

    1. Проверяет id, затем тело запроса (TaskValidationError при ошибке).
    2. Применяет только переданные поля; updated_at обновляется всегда,
       даже если тело пустое.
    3. Возвращает None, если задачи с таким id нет.
    """
    task_id = parse_task_id(raw_id)
    changes = validate_update_payload(payload)

    task = await repo.update(task_id, changes)
    if task is None:
        logger.info("Update skipped: task %s not found", task_id)
        return None

    if changes.is_empty:
        logger.info("Task %s touched: empty update, only updatedAt refreshed", task.id)
    else:
        logger.info("Task %s updated", task.id)
    return task
