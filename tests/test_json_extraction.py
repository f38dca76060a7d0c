from __future__ import annotations

import pytest

from insight_sentiment.sentiment.errors import MalformedResponseError
from insight_sentiment.sentiment.json_extraction import (
    MAX_EXCERPT_LENGTH,
    parse_braced_block,
    parse_jsonish,
    parse_unfenced,
)


def test_parses_plain_json_with_surrounding_whitespace():
    assert parse_jsonish('  {"label":"POSITIVE","score":0.91}\n') == {"label": "POSITIVE", "score": 0.91}


def test_strips_json_fence():
    text = '```json\n{"label":"NEUTRAL","score":0.62}\n```'
    assert parse_jsonish(text) == {"label": "NEUTRAL", "score": 0.62}


def test_strips_bare_and_uppercase_fences():
    assert parse_unfenced('```\n{"a": 1}\n```') == {"a": 1}
    assert parse_unfenced('```JSON {"a": 1} ```') == {"a": 1}


def test_finds_object_inside_chatter():
    text = 'Sure! Here is the result: {"label": "negative", "score": 0.8} Hope it helps.'
    assert parse_jsonish(text) == {"label": "negative", "score": 0.8}


def test_braced_block_is_greedy_across_lines():
    text = 'prefix {"outer": {"inner": 1}}\nsuffix }'
    # first "{" to last "}" includes the stray brace, which is not valid JSON
    with pytest.raises(ValueError):
        parse_braced_block(text)


def test_braced_block_without_braces_raises_value_error():
    with pytest.raises(ValueError):
        parse_braced_block("no object here")


def test_non_object_json_is_returned_as_is():
    assert parse_jsonish("[1, 2]") == [1, 2]
    assert parse_jsonish("null") is None


def test_plain_prose_is_malformed():
    with pytest.raises(MalformedResponseError) as exc_info:
        parse_jsonish("I cannot classify this")
    assert exc_info.value.excerpt == "I cannot classify this"


def test_empty_text_is_malformed():
    with pytest.raises(MalformedResponseError):
        parse_jsonish("")
    with pytest.raises(MalformedResponseError):
        parse_jsonish(None)


def test_excerpt_is_truncated():
    text = "x" * 500
    with pytest.raises(MalformedResponseError) as exc_info:
        parse_jsonish(text)
    assert len(exc_info.value.excerpt) == MAX_EXCERPT_LENGTH


def test_deeply_nested_text_is_malformed():
    with pytest.raises(MalformedResponseError):
        parse_jsonish("[" * 100000 + "]" * 100000)
