from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SentimentLabel(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SentimentResult(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        use_enum_values=True,
    )

    label: SentimentLabel = Field(..., description="The sentiment class of the text.")
    score: float = Field(..., ge=0.0, le=1.0, description="Confidence for the chosen label.")


NEUTRAL_DEFAULT = SentimentResult(label=SentimentLabel.NEUTRAL, score=0.5)
