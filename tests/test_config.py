"""Tests for environment-driven configuration and logging setup."""

from __future__ import annotations

import logging

from app.config import load_config_from_env
from app.logging_config import setup_logging


def test_defaults(monkeypatch):
    for name in (
        "APP_HOST",
        "APP_PORT",
        "APP_ENV",
        "API_PREFIX",
        "LOG_LEVEL",
        "MAX_BODY_BYTES",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)

    config = load_config_from_env()

    assert config.host == "0.0.0.0"
    assert config.port == 3000
    assert config.environment == "production"
    assert config.is_development is False
    assert config.api_prefix == "/api"
    assert config.log_level == "INFO"
    assert config.max_body_bytes == 1024 * 1024
    assert config.cors_origins == ("*",)


def test_overrides(monkeypatch):
    monkeypatch.setenv("APP_PORT", "8080")
    monkeypatch.setenv("APP_ENV", "Development")
    monkeypatch.setenv("API_PREFIX", "v1/")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")

    config = load_config_from_env()

    assert config.port == 8080
    assert config.is_development is True
    assert config.api_prefix == "/v1"
    assert config.log_level == "DEBUG"
    assert config.cors_origins == ("http://a.test", "http://b.test")


def test_setup_logging_is_idempotent():
    logger = setup_logging("DEBUG")
    handlers = list(logger.handlers)

    again = setup_logging("warning")

    assert again is logger
    assert again.handlers == handlers
    assert again.level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO
