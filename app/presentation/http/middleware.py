from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from app.presentation.http.error_handlers import SECURITY_HEADERS, error_body

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


async def log_requests(request: Request, call_next: CallNext) -> Response:
    started = time.perf_counter()
    logger.info("-> %s %s", request.method, request.url.path)

    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("<- %s %s - 500 - %.0fms", request.method, request.url.path, elapsed_ms)
        raise

    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "<- %s %s - %s - %.0fms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


async def add_security_headers(request: Request, call_next: CallNext) -> Response:
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value
    return response


async def limit_body_size(request: Request, call_next: CallNext) -> Response:
    """
    Отбивает запрос по заголовку Content-Length, не читая тело.
    """
    max_bytes = request.app.state.config.max_body_bytes
    raw = request.headers.get("content-length")

    if raw is not None and raw.isdigit() and int(raw) > max_bytes:
        message = f"Request body too large. Maximum allowed: {max_bytes} bytes"
        logger.warning("%s %s -> 413: %s bytes", request.method, request.url.path, raw)
        return JSONResponse(status_code=413, content=error_body(413, message))

    return await call_next(request)


def register_middleware(app: FastAPI) -> None:
    # Последний добавленный — самый внешний: логирование видит всё
    app.middleware("http")(limit_body_size)
    app.middleware("http")(add_security_headers)
    app.middleware("http")(log_requests)
