from __future__ import annotations

from typing import Iterable

from app.domain.task import Task
from app.domain.task_stats import TaskStats


def completion_rate(completed: int, total: int) -> int:
    """
    Процент выполненных задач, округлённый до целого (половина — вверх).
    Для пустого списка — 0.
    """
    if total <= 0:
        return 0
    # половина вверх: floor(c / t * 100 + 0.5) в целых числах
    return (completed * 200 + total) // (total * 2)


def compute_task_stats(tasks: Iterable[Task]) -> TaskStats:
    """
    Считает статистику заново на каждом вызове, ничего не кэширует.
    """
    total = 0
    completed = 0
    for task in tasks:
        total += 1
        if task.completed:
            completed += 1

    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        completion_rate=completion_rate(completed, total),
    )
