"""
Tolerant JSON extraction from LLM output.

Models asked for "JSON only" still wrap answers in Markdown fences or add a
sentence around the object. The parser tries increasingly permissive
strategies in order and returns the first value that decodes:

1. the trimmed text as-is
2. the text with a leading ```json fence and trailing ``` fence removed
3. the greedy ``{...}`` block from the first ``{`` to the last ``}``

Each strategy raises ``ValueError`` when it does not apply (``json.loads``
raises ``RecursionError`` instead on very deeply nested input); adding a
strategy means appending a function to ``PARSE_STRATEGIES``.
"""

import json
import re
from typing import Any, Callable

from insight_sentiment.config.logging_config import get_logger
from insight_sentiment.sentiment.errors import MalformedResponseError

logger = get_logger(__name__)

MAX_EXCERPT_LENGTH = 120

_OPENING_FENCE = re.compile(r"^\s*```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```\s*$", re.IGNORECASE)
_BRACED_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


def parse_direct(text: str) -> Any:
    return json.loads(text)


def parse_unfenced(text: str) -> Any:
    unfenced = _OPENING_FENCE.sub("", text, count=1)
    unfenced = _CLOSING_FENCE.sub("", unfenced, count=1)
    return json.loads(unfenced)


def parse_braced_block(text: str) -> Any:
    match = _BRACED_BLOCK.search(text)
    if match is None:
        raise ValueError("no {...} block in text")
    return json.loads(match.group(0))


PARSE_STRATEGIES: tuple[Callable[[str], Any], ...] = (
    parse_direct,
    parse_unfenced,
    parse_braced_block,
)


def parse_jsonish(text: str | None) -> Any:
    """
    Parse text that should contain JSON, tolerating fences and chatter.

    Args:
        text: Raw model output

    Returns:
        The first successfully decoded JSON value

    Raises:
        MalformedResponseError: If no strategy finds valid JSON
    """
    trimmed = (text or "").strip()

    for strategy in PARSE_STRATEGIES:
        try:
            return strategy(trimmed)
        except (ValueError, RecursionError):
            continue

    excerpt = trimmed[:MAX_EXCERPT_LENGTH]
    logger.warning("No JSON found in model output: %r", excerpt)
    raise MalformedResponseError(excerpt)
