from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskStats:
    total: int
    completed: int
    pending: int
    completion_rate: int
