from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from app.domain.task import Task, TaskChanges
from app.domain.value_objects import TaskId


class TaskRepository(ABC):
    """
    Абстракция над хранилищем задач.

    Хранилище не валидирует входные данные — это делает слой usecase'ов.
    Отсутствие задачи сообщается возвращаемым значением, а не исключением.
    """

    @abstractmethod
    async def create(self, title: str, completed: bool = False) -> Task:
        """
        Assign the next id, stamp timestamps, persist and return the task.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_all(self) -> List[Task]:
        """
        Return all tasks in insertion order.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, task_id: Union[TaskId, int, str]) -> Optional[Task]:
        """
        Return task entity by id or None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(
        self,
        task_id: Union[TaskId, int, str],
        changes: TaskChanges,
    ) -> Optional[Task]:
        """
        Apply supplied fields, refresh updated_at. None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, task_id: Union[TaskId, int, str]) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    async def clear(self) -> None:
        """
        Empty the store and reset the id counter. For tests only.
        """
        raise NotImplementedError
