from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends, FastAPI, Request
from pydantic import BaseModel, Field

from app.config import APP_DESCRIPTION, APP_NAME, APP_VERSION, AppConfig
from app.presentation.http.dependencies import get_app_config

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str = Field(..., examples=["OK"])
    timestamp: datetime = Field(..., description="Текущее время сервера (ISO 8601)")
    uptime: float = Field(..., description="Секунд с момента старта приложения")
    version: str = Field(..., examples=[APP_VERSION])
    environment: str = Field(..., examples=["production"])


class ApiInfoResponse(BaseModel):
    name: str
    version: str
    description: str
    endpoints: Dict[str, str]
    documentation: Dict[str, str]


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Состояние сервиса",
)
async def health(
    request: Request,
    config: AppConfig = Depends(get_app_config),
) -> HealthResponse:
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        uptime=round(time.monotonic() - request.app.state.started_at, 3),
        version=APP_VERSION,
        environment=config.environment,
    )


def build_api_info(api_prefix: str, docs_url: str, openapi_url: str) -> ApiInfoResponse:
    tasks = f"{api_prefix}/tasks"
    return ApiInfoResponse(
        name=APP_NAME,
        version=APP_VERSION,
        description=APP_DESCRIPTION,
        endpoints={
            "create": f"POST {tasks}",
            "list": f"GET {tasks}",
            "stats": f"GET {tasks}/stats",
            "get": f"GET {tasks}/{{id}}",
            "update": f"PUT {tasks}/{{id}}",
            "delete": f"DELETE {tasks}/{{id}}",
            "health": "GET /health",
        },
        documentation={
            "swagger": docs_url,
            "openapi": openapi_url,
        },
    )


def add_api_info_route(app: FastAPI, api_prefix: str) -> None:
    """
    GET {api_prefix} — краткое описание API. Путь зависит от конфига,
    поэтому маршрут добавляется в create_app, а не через router.
    """
    info = build_api_info(api_prefix, app.docs_url or "", app.openapi_url or "")

    async def api_info() -> ApiInfoResponse:
        return info

    app.add_api_route(
        api_prefix or "/",
        api_info,
        methods=["GET"],
        response_model=ApiInfoResponse,
        summary="Информация об API",
        tags=["Health"],
    )
