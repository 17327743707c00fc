# app/presentation/__init__.py

"""
Слой presentation — граница между HTTP и хранилищем задач.
http — FastAPI-роутеры, обработчики ошибок и middleware;
usecases — проверка входных данных и вызовы репозитория.
"""

__all__ = [
    "http",
    "usecases",
]
