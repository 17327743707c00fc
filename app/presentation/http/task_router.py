from __future__ import annotations

from datetime import datetime
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel, Field

from app.application.tasks.task_validation import TaskValidationError
from app.domain.repositories.task_repository import TaskRepository
from app.domain.task import Task
from app.domain.task_stats import TaskStats
from app.presentation.http.dependencies import get_task_repository
from app.presentation.usecases.task_create import create_task_usecase
from app.presentation.usecases.task_delete import delete_task_usecase
from app.presentation.usecases.task_get import get_task_usecase
from app.presentation.usecases.task_list import list_tasks_usecase
from app.presentation.usecases.task_stats import get_task_stats_usecase
from app.presentation.usecases.task_update import update_task_usecase

TASK_NOT_FOUND = "Task not found"
TASK_DELETED = "Task deleted successfully"

router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)


# ---------- Схемы (Swagger-модели) ----------


class TaskResponse(BaseModel):
    id: int = Field(
        ...,
        description="Уникальный идентификатор задачи",
        examples=[1],
    )
    title: str = Field(
        ...,
        description="Заголовок задачи",
        examples=["Learn FastAPI"],
    )
    completed: bool = Field(
        ...,
        description="Выполнена ли задача",
        examples=[False],
    )
    createdAt: datetime = Field(
        ...,
        description="Момент создания (ISO 8601)",
    )
    updatedAt: datetime = Field(
        ...,
        description="Момент последнего изменения (ISO 8601)",
    )


class TaskStatsResponse(BaseModel):
    total: int = Field(..., description="Всего задач", examples=[10])
    completed: int = Field(..., description="Выполненных задач", examples=[7])
    pending: int = Field(..., description="Невыполненных задач", examples=[3])
    completionRate: int = Field(
        ...,
        description="Процент выполненных задач, округлённый до целого",
        examples=[70],
    )


class TaskDeletedResponse(BaseModel):
    message: str = Field(..., examples=[TASK_DELETED])


class ErrorResponse(BaseModel):
    success: bool = Field(False, examples=[False])
    message: str = Field(..., examples=["Task not found"])
    statusCode: int = Field(..., examples=[404])


_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Невалидный id или тело запроса"},
    404: {"model": ErrorResponse, "description": "Задача не найдена"},
}

_TASK_BODY_EXAMPLES = [{"title": "Learn FastAPI", "completed": False}]


def to_task_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        completed=task.completed,
        createdAt=task.created_at,
        updatedAt=task.updated_at,
    )


def to_stats_response(stats: TaskStats) -> TaskStatsResponse:
    return TaskStatsResponse(
        total=stats.total,
        completed=stats.completed,
        pending=stats.pending,
        completionRate=stats.completion_rate,
    )


# ---------- Эндпоинты ----------


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    summary="Создать задачу",
    responses={400: _ERROR_RESPONSES[400]},
)
async def create_task(
    payload: Any = Body(None, examples=_TASK_BODY_EXAMPLES),
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    try:
        task = await create_task_usecase(repo, payload)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return to_task_response(task)


@router.get(
    "",
    response_model=List[TaskResponse],
    summary="Список задач",
    description="Возвращает все задачи в порядке создания.",
)
async def list_tasks(
    repo: TaskRepository = Depends(get_task_repository),
) -> List[TaskResponse]:
    tasks = await list_tasks_usecase(repo)
    return [to_task_response(t) for t in tasks]


# /stats объявлен раньше /{task_id}, иначе "stats" уйдёт в task_id
@router.get(
    "/stats",
    response_model=TaskStatsResponse,
    summary="Статистика задач",
    description="Считается заново на каждый запрос по текущему содержимому хранилища.",
)
async def get_task_stats(
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskStatsResponse:
    stats = await get_task_stats_usecase(repo)
    return to_stats_response(stats)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Получить задачу по id",
    responses=_ERROR_RESPONSES,
)
async def get_task(
    task_id: str,
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    try:
        task = await get_task_usecase(repo, task_id)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return to_task_response(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Обновить задачу",
    description="Меняет только переданные поля; updatedAt обновляется всегда.",
    responses=_ERROR_RESPONSES,
)
async def update_task(
    task_id: str,
    payload: Any = Body(None, examples=_TASK_BODY_EXAMPLES),
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskResponse:
    try:
        task = await update_task_usecase(repo, task_id, payload)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if task is None:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return to_task_response(task)


@router.delete(
    "/{task_id}",
    response_model=TaskDeletedResponse,
    summary="Удалить задачу",
    responses=_ERROR_RESPONSES,
)
async def delete_task(
    task_id: str,
    repo: TaskRepository = Depends(get_task_repository),
) -> TaskDeletedResponse:
    try:
        deleted = await delete_task_usecase(repo, task_id)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    if not deleted:
        raise HTTPException(status_code=404, detail=TASK_NOT_FOUND)

    return TaskDeletedResponse(message=TASK_DELETED)
