from .task import Task, TaskChanges, TITLE_MAX_LENGTH
from .task_stats import TaskStats
from .value_objects import TaskId

__all__ = [
    "TaskId",
    "Task",
    "TaskChanges",
    "TaskStats",
    "TITLE_MAX_LENGTH",
]
