from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Union

from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task, TaskChanges
from app.domain.value_objects import TaskId

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_FIRST_ID = 1
_MIN_TICK = timedelta(milliseconds=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskMemoryRepository(TaskRepository):
    """
    In-memory implementation of TaskRepository.

    Живёт столько же, сколько процесс (или экземпляр приложения в тестах).
    Все мутации идут под одним lock'ом, поэтому id уникальны и монотонны,
    даже если хост исполняет обработчики в нескольких потоках.
    """

    def __init__(self, clock: Clock = _utcnow) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._tasks: List[Task] = []
        self._next_id = _FIRST_ID

    async def create(self, title: str, completed: bool = False) -> Task:
        with self._lock:
            now = self._clock()
            task = Task(
                id=TaskId(self._next_id),
                title=title,
                completed=completed,
                created_at=now,
                updated_at=now,
            )
            self._next_id += 1
            self._tasks.append(task)

        logger.debug("Task created: id=%s", task.id)
        return task

    async def find_all(self) -> List[Task]:
        return list(self._tasks)

    async def find_by_id(self, task_id: Union[TaskId, int, str]) -> Optional[Task]:
        index = self._index_of(task_id)
        if index is None:
            return None
        return self._tasks[index]

    async def update(
        self,
        task_id: Union[TaskId, int, str],
        changes: TaskChanges,
    ) -> Optional[Task]:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return None

            current = self._tasks[index]
            updated = replace(
                current,
                title=current.title if changes.title is None else changes.title,
                completed=(
                    current.completed if changes.completed is None else changes.completed
                ),
                updated_at=self._next_updated_at(current.updated_at),
            )
            self._tasks[index] = updated

        logger.debug("Task updated: id=%s", updated.id)
        return updated

    async def delete(self, task_id: Union[TaskId, int, str]) -> bool:
        with self._lock:
            index = self._index_of(task_id)
            if index is None:
                return False
            removed = self._tasks.pop(index)

        logger.debug("Task deleted: id=%s", removed.id)
        return True

    async def count(self) -> int:
        return len(self._tasks)

    async def clear(self) -> None:
        with self._lock:
            self._tasks = []
            self._next_id = _FIRST_ID

        logger.debug("Task store cleared")

    def _next_updated_at(self, previous: datetime) -> datetime:
        """
        updated_at строго растёт, даже если часы не сдвинулись
        с предыдущего изменения.
        """
        now = self._clock()
        if now <= previous:
            return previous + _MIN_TICK
        return now

    def _index_of(self, task_id: Union[TaskId, int, str]) -> Optional[int]:
        key = self._normalize_id(task_id)
        if key is None:
            return None

        for index, task in enumerate(self._tasks):
            if task.id == key:
                return index
        return None

    @staticmethod
    def _normalize_id(task_id: Union[TaskId, int, str]) -> Optional[int]:
        if isinstance(task_id, bool):
            return None
        if isinstance(task_id, int):
            return task_id
        try:
            return int(str(task_id).strip())
        except ValueError:
            return None
