"""
Sentiment classification package for Insight Sentiment.

Provides the LLM-backed classifier, its cache, and its failure kinds.
"""

from insight_sentiment.sentiment.errors import (
    ClassificationError,
    MalformedResponseError,
    ProviderError,
    UnconfiguredError,
)
from insight_sentiment.sentiment.sentiment_cache import SentimentCache
from insight_sentiment.sentiment.sentiment_service import SentimentService

__all__ = [
    "ClassificationError",
    "MalformedResponseError",
    "ProviderError",
    "SentimentCache",
    "SentimentService",
    "UnconfiguredError",
]
