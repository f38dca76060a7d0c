"""Model definitions for Insight Sentiment."""

from insight_sentiment.model.sentiment_output import NEUTRAL_DEFAULT, SentimentLabel, SentimentResult

__all__ = ["NEUTRAL_DEFAULT", "SentimentLabel", "SentimentResult"]
