from __future__ import annotations

import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
INVALID_JSON = "Invalid JSON in request body"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}

# detail, который Starlette ставит для несуществующего маршрута
_ROUTE_NOT_FOUND_DETAIL = "Not Found"


def error_body(status_code: int, message: str) -> Dict[str, Any]:
    return {
        "success": False,
        "message": message,
        "statusCode": status_code,
    }


def _error_response(
    status_code: int,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, message),
        headers=headers,
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    if exc.status_code == 404 and message == _ROUTE_NOT_FOUND_DETAIL:
        message = f"Route not found - {request.url.path}"

    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, message)

    return _error_response(exc.status_code, message, getattr(exc, "headers", None))


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    До этого обработчика доходит только тело, которое не парсится как JSON:
    все маршруты принимают произвольный JSON и проверяют его сами.
    """
    errors = exc.errors()
    if any(e.get("type") == "json_invalid" for e in errors):
        message = INVALID_JSON
    else:
        message = "Invalid request: " + ", ".join(
            str(e.get("msg", "")) for e in errors
        )

    logger.info("%s %s -> 400: %s", request.method, request.url.path, message)
    return _error_response(400, message)


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """
    Всё непредвиденное: полная причина — в лог, клиенту — общее сообщение.
    В development к ответу добавляются stack и детали запроса.
    """
    logger.exception(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )

    body = error_body(500, INTERNAL_ERROR)

    config = getattr(request.app.state, "config", None)
    if config is not None and config.is_development:
        body["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        body["details"] = {
            "url": str(request.url),
            "method": request.method,
            "params": dict(request.path_params),
            "query": dict(request.query_params),
        }

    # этот ответ отдаёт ServerErrorMiddleware, http-middleware его не видят
    return JSONResponse(status_code=500, content=body, headers=dict(SECURITY_HEADERS))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
