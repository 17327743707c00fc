from __future__ import annotations

from typing import List

from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task


async def list_tasks_usecase(repo: TaskRepository) -> List[Task]:
    """
    Возвращает все задачи в порядке создания.
    """
    return await repo.find_all()
