"""Shared test fixtures: a fresh app and a fresh in-memory store per test."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.config import AppConfig
from app.infrastructure.repositories.task_memory_repository import TaskMemoryRepository
from main import create_app

START = datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc)


class ManualClock:
    """Clock that only moves when the test says so."""

    def __init__(self, start: datetime = START) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


def make_config(**overrides) -> AppConfig:
    values = dict(
        host="127.0.0.1",
        port=3000,
        environment="test",
        api_prefix="/api",
        log_level="DEBUG",
        max_body_bytes=1024 * 1024,
        cors_origins=("*",),
    )
    values.update(overrides)
    return AppConfig(**values)


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def repo(clock) -> TaskMemoryRepository:
    return TaskMemoryRepository(clock=clock)


@pytest.fixture()
def config() -> AppConfig:
    return make_config()


@pytest.fixture()
def client(config, repo):
    app = create_app(config=config, repository=repo)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_client(repo):
    """Build a TestClient for an app with config overrides / another repository."""
    clients = []

    def _make(repository=None, raise_server_exceptions=True, **overrides):
        app = create_app(config=make_config(**overrides), repository=repository or repo)
        test_client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        test_client.__enter__()
        clients.append(test_client)
        return test_client

    yield _make

    for test_client in clients:
        test_client.__exit__(None, None, None)
