from __future__ import annotations

from fastapi import Request

from app.config import AppConfig
from app.domain.repositories.task_repository import TaskRepository


def get_task_repository(request: Request) -> TaskRepository:
    """
    Хранилище создаётся один раз в create_app и живёт на app.state.
    """
    return request.app.state.task_repository


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config
