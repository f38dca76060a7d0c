from __future__ import annotations

import pytest

from fakes import FakeSession
from insight_sentiment.sentiment import SentimentCache, SentimentService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("GEMINI_MODEL", "GEMINI_API_BASE", "SENTIMENT_API_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def service(session: FakeSession) -> SentimentService:
    return SentimentService(cache=SentimentCache(), session=session)
