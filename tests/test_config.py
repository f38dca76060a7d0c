from __future__ import annotations

import logging

import pytest

from insight_sentiment.config import (
    get_env_float,
    get_env_int,
    get_env_variable,
    get_optional_env_variable,
    load_env_variables,
)
from insight_sentiment.config.logging_config import setup_logging


def test_get_env_variable_default_and_missing(monkeypatch):
    monkeypatch.delenv("INSIGHT_TEST_VAR", raising=False)
    assert get_env_variable("INSIGHT_TEST_VAR", "fallback") == "fallback"
    with pytest.raises(ValueError):
        get_env_variable("INSIGHT_TEST_VAR")


def test_get_optional_env_variable_treats_blank_as_missing(monkeypatch):
    monkeypatch.setenv("INSIGHT_TEST_VAR", "  ")
    assert get_optional_env_variable("INSIGHT_TEST_VAR") is None
    monkeypatch.setenv("INSIGHT_TEST_VAR", " value ")
    assert get_optional_env_variable("INSIGHT_TEST_VAR") == "value"


def test_numeric_accessors(monkeypatch):
    monkeypatch.setenv("INSIGHT_TEST_INT", "8081")
    monkeypatch.setenv("INSIGHT_TEST_FLOAT", "2.5")
    assert get_env_int("INSIGHT_TEST_INT", 1) == 8081
    assert get_env_float("INSIGHT_TEST_FLOAT", 1.0) == 2.5
    monkeypatch.setenv("INSIGHT_TEST_FLOAT", "soon")
    with pytest.raises(ValueError):
        get_env_float("INSIGHT_TEST_FLOAT", 1.0)


def test_load_env_variables_reads_file(tmp_path, monkeypatch):
    monkeypatch.delenv("INSIGHT_FROM_DOTENV", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("INSIGHT_FROM_DOTENV=yes\n", encoding="utf-8")
    load_env_variables(env_file)
    assert get_env_variable("INSIGHT_FROM_DOTENV") == "yes"
    monkeypatch.delenv("INSIGHT_FROM_DOTENV")


def test_setup_logging_writes_log_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        logger = setup_logging(log_dir=tmp_path / "logs", log_level="DEBUG")
        assert logger.name == "insight_sentiment"
        assert list((tmp_path / "logs").glob("insight_sentiment_*.log"))
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
            logging.getLogger(name).handlers.clear()
