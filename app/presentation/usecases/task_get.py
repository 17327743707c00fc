from __future__ import annotations

from typing import Any, Optional

from app.application.tasks.task_validation import parse_task_id
from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task


async def get_task_usecase(repo: TaskRepository, raw_id: Any) -> Optional[Task]:
    """
    Возвращает одну задачу по id или None.
    """
    task_id = parse_task_id(raw_id)
    return await repo.find_by_id(task_id)
