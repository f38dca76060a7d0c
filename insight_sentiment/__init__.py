"""Insight Sentiment - LLM-backed sentiment annotation for brand insights."""

from insight_sentiment.model import SentimentLabel, SentimentResult
from insight_sentiment.sentiment import SentimentService

__version__ = "0.1.0"

__all__ = ["SentimentLabel", "SentimentResult", "SentimentService"]
