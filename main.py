from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.config import APP_DESCRIPTION, APP_NAME, APP_VERSION, AppConfig, load_config_from_env
from app.domain.repositories.task_repository import TaskRepository
from app.infrastructure.repositories.task_memory_repository import TaskMemoryRepository
from app.logging_config import setup_logging
from app.presentation.http.error_handlers import register_error_handlers
from app.presentation.http.middleware import register_middleware
from app.presentation.http.service_router import add_api_info_route
from app.presentation.http.service_router import router as service_router
from app.presentation.http.task_router import router as task_router

logger = logging.getLogger("app.main")


def create_app(
    config: Optional[AppConfig] = None,
    repository: Optional[TaskRepository] = None,
) -> FastAPI:
    """
    Собирает приложение. Хранилище задач — один экземпляр на приложение,
    живёт до завершения процесса; тесты передают свой или создают новое app.
    """
    config = config or load_config_from_env()
    setup_logging(config.log_level)

    app = FastAPI(
        title=APP_NAME,
        version=APP_VERSION,
        description=APP_DESCRIPTION,
        docs_url="/api-docs",
        openapi_url="/api-docs.json",
        redoc_url=None,
    )

    app.state.config = config
    app.state.task_repository = repository or TaskMemoryRepository()
    app.state.started_at = time.monotonic()

    register_middleware(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(service_router)
    add_api_info_route(app, config.api_prefix)
    app.include_router(task_router, prefix=config.api_prefix)

    logger.info(
        "%s %s ready (env=%s, prefix=%r)",
        APP_NAME,
        APP_VERSION,
        config.environment,
        config.api_prefix,
    )
    return app


app = create_app()


if __name__ == "__main__":
    settings = load_config_from_env()
    # Для reload нужно указывать строку "main:app",
    # иначе uvicorn не сможет отслеживать изменения в файлах
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
