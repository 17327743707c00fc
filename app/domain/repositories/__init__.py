from .task_repository import TaskRepository

__all__ = [
    "TaskRepository",
]
