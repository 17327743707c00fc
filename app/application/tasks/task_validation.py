from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictStr,
    ValidationError,
    field_validator,
)

from app.domain.task import TITLE_MAX_LENGTH, TaskChanges
from app.domain.value_objects import TaskId

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")

_INVALID_ID_MESSAGE = "Invalid ID: must be a positive integer"
_TITLE_REQUIRED_MESSAGE = "title is required and must be a non-empty string"
_FIELD_MESSAGES: Dict[str, str] = {
    "title": (
        f"title must be a non-empty string of at most {TITLE_MAX_LENGTH} characters"
    ),
    "completed": "completed must be a boolean",
}


class TaskValidationError(Exception):
    """
    Входные данные запроса не прошли проверку.
    Сообщение уходит клиенту как есть, поэтому в нём всегда есть имя поля.
    """


def _normalize_title(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value

    title = value.strip()
    if not title:
        raise ValueError("title is blank")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValueError("title is too long")
    return title


class TaskCreateInput(BaseModel):
    """
    Тело POST /tasks: title обязателен, completed по умолчанию False.
    """
    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    completed: StrictBool = False

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: str) -> str:
        return _normalize_title(value)


class TaskUpdateInput(BaseModel):
    """
    Тело PUT /tasks/{id}: все поля необязательны, но null не допускается.
    """
    model_config = ConfigDict(extra="ignore")

    title: Optional[StrictStr] = None
    completed: Optional[StrictBool] = None

    @field_validator("title", "completed", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("null is not allowed")
        return value

    @field_validator("title")
    @classmethod
    def _check_title(cls, value: Optional[str]) -> Optional[str]:
        return _normalize_title(value)


def describe_validation_error(exc: ValidationError) -> str:
    """
    Превращает ошибки pydantic в одно человекочитаемое сообщение,
    по одной фразе на поле.
    """
    messages = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else ""
        if field == "title" and error["type"] == "missing":
            message = _TITLE_REQUIRED_MESSAGE
        else:
            message = _FIELD_MESSAGES.get(field, f"{field}: {error['msg']}")
        if message not in messages:
            messages.append(message)
    return ", ".join(messages)


def _as_object(payload: Any) -> Dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise TaskValidationError("Request body must be a JSON object")
    return payload


def validate_create_payload(payload: Any) -> Tuple[str, bool]:
    """
    Проверяет тело запроса на создание и возвращает (title, completed).
    """
    try:
        data = TaskCreateInput.model_validate(_as_object(payload))
    except ValidationError as exc:
        raise TaskValidationError(describe_validation_error(exc)) from exc

    return data.title, data.completed


def validate_update_payload(payload: Any) -> TaskChanges:
    """
    Проверяет тело запроса на обновление. Пустое тело допустимо:
    это обновление без изменений полей.
    """
    try:
        data = TaskUpdateInput.model_validate(_as_object(payload))
    except ValidationError as exc:
        raise TaskValidationError(describe_validation_error(exc)) from exc

    return TaskChanges(title=data.title, completed=data.completed)


def parse_task_id(raw: Any) -> TaskId:
    """
    Path-параметр id: только десятичные цифры (с необязательным знаком), >= 1.
    """
    if isinstance(raw, bool):
        raise TaskValidationError(_INVALID_ID_MESSAGE)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw) if raw is not None else ""
        if not _TASK_ID_RE.fullmatch(text):
            raise TaskValidationError(_INVALID_ID_MESSAGE)
        try:
            value = int(text)
        except ValueError:
            # длиннее sys.get_int_max_str_digits()
            raise TaskValidationError(_INVALID_ID_MESSAGE) from None

    if value < 1:
        raise TaskValidationError(_INVALID_ID_MESSAGE)
    return TaskId(value)
