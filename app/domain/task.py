from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .value_objects import TaskId

TITLE_MAX_LENGTH = 255


@dataclass(frozen=True)
class Task:
    """
    Сущность задачи из списка дел.

    title      — заголовок задачи, уже обрезанный по краям (1..255 символов)
    completed  — выполнена ли задача
    created_at — момент создания (UTC), не меняется
    updated_at — момент последнего изменения (UTC), >= created_at
    """
    id: TaskId
    title: str
    completed: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TaskChanges:
    """
    Частичное обновление задачи. None означает «поле не передано».
    """
    title: Optional[str] = None
    completed: Optional[bool] = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.completed is None
