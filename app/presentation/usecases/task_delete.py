from __future__ import annotations

import logging
from typing import Any

from app.application.tasks.task_validation import parse_task_id
from app.domain.repositories.task_repository import TaskRepository

logger = logging.getLogger(__name__)


async def delete_task_usecase(repo: TaskRepository, raw_id: Any) -> bool:
    """
    Удаляет задачу. False — если такой задачи не было.
    """
    task_id = parse_task_id(raw_id)

    deleted = await repo.delete(task_id)
    if deleted:
        logger.info("Task %s deleted", task_id)
    return deleted
