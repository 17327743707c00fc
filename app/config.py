from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()

APP_NAME = "Todo API"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = "REST API for managing a to-do list (CRUD operations and statistics)"

DEVELOPMENT = "development"


@dataclass(frozen=True)
class AppConfig:
    host: str
    port: int
    environment: str
    api_prefix: str
    log_level: str
    max_body_bytes: int
    cors_origins: Tuple[str, ...]

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def _normalize_prefix(raw: str) -> str:
    prefix = raw.strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix
    return prefix


def load_config_from_env() -> AppConfig:
    """
    Загружает конфиг приложения из переменных окружения (и .env, если он есть).
    Верхние слои получают уже готовый AppConfig.
    """
    return AppConfig(
        host=os.getenv("APP_HOST", "0.0.0.0"),
        port=int(os.getenv("APP_PORT", "3000")),
        environment=os.getenv("APP_ENV", "production").strip().lower(),
        api_prefix=_normalize_prefix(os.getenv("API_PREFIX", "/api")),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        max_body_bytes=int(os.getenv("MAX_BODY_BYTES", str(1024 * 1024))),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
    )
