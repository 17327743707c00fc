from __future__ import annotations

from app.application.tasks.task_stats import compute_task_stats
from app.domain.repositories.task_repository import TaskRepository
from app.domain.task_stats import TaskStats


async def get_task_stats_usecase(repo: TaskRepository) -> TaskStats:
    """
    Статистика по текущему содержимому хранилища (total/completed/pending/rate).
    """
    tasks = await repo.find_all()
    return compute_task_stats(tasks)
