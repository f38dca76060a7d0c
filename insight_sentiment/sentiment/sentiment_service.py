"""
Sentiment Classification Service

This module classifies freeform insight text as positive, neutral or negative
using a Gemini model over its REST API:
- Empty input short-circuits to a neutral result without any network call
- Results are cached per trimmed text for the lifetime of the service
- Model output is parsed tolerantly and normalized into a strict result

The API key is read from the environment on every cache miss, so a missing
key is an ordinary runtime condition reported as ``UnconfiguredError``.
"""

import math
from typing import Any, Sequence

import requests

from insight_sentiment.config import get_env_float, get_optional_env_variable
from insight_sentiment.config.logging_config import get_logger
from insight_sentiment.model import NEUTRAL_DEFAULT, SentimentLabel, SentimentResult
from insight_sentiment.prompts import SENTIMENT_LLM_SYSTEM_PROMPT
from insight_sentiment.sentiment.errors import ProviderError, UnconfiguredError
from insight_sentiment.sentiment.json_extraction import parse_jsonish
from insight_sentiment.sentiment.sentiment_cache import SentimentCache

logger = get_logger(__name__)

# Location of the generated text inside a generateContent response
GENERATED_TEXT_PATH: tuple[str | int, ...] = ("candidates", 0, "content", "parts", 0, "text")


def get_path(data: Any, path: Sequence[str | int]) -> Any:
    """
    Walk nested dicts/lists along ``path``.

    Returns None as soon as a key is absent, an index is out of range, or a
    step hits a value of the wrong type.
    """
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict) or step not in current:
                return None
            current = current[step]
    return current


def extract_generated_text(envelope: Any) -> str:
    """Return the model's text from a response envelope, or "" if it is missing."""
    text = get_path(envelope, GENERATED_TEXT_PATH)
    return text if isinstance(text, str) else ""


class SentimentService:
    """
    Classifies text sentiment with a Gemini model.

    The service owns its cache and HTTP session. Pass a ``SentimentCache`` to
    share or inspect results, and a ``requests.Session`` to control transport.
    """

    # Substring -> label, checked in order
    LABEL_MARKERS: tuple[tuple[str, SentimentLabel], ...] = (
        ("pos", SentimentLabel.POSITIVE),
        ("neu", SentimentLabel.NEUTRAL),
        ("neg", SentimentLabel.NEGATIVE),
    )

    DEFAULT_SCORE: float = 0.5

    # API configuration constants
    API_KEY_ENV: str = "GEMINI_API_KEY"
    DEFAULT_MODEL: str = "gemini-2.0-flash"
    DEFAULT_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"
    DEFAULT_TIMEOUT_SECONDS: float = 30.0
    MAX_LOG_QUERY_LENGTH: int = 100
    MAX_ERROR_MESSAGE_LENGTH: int = 200

    def __init__(
        self,
        cache: SentimentCache | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the SentimentService.

        Model, endpoint and timeout are loaded from environment variables.

        Args:
            cache: Result cache owned by this service (a fresh one if omitted)
            session: HTTP session used for provider calls (created lazily if omitted)
        """
        self._cache = cache if cache is not None else SentimentCache()
        self._session = session

        self._load_configuration()
        self._log_initialization()

    def _load_configuration(self) -> None:
        """Load model and endpoint configuration from environment variables."""
        self.llm_model = get_optional_env_variable("GEMINI_MODEL") or self.DEFAULT_MODEL
        self.api_base = (
            get_optional_env_variable("GEMINI_API_BASE") or self.DEFAULT_API_BASE
        ).rstrip("/")
        self.timeout_seconds = get_env_float(
            "SENTIMENT_API_TIMEOUT_SECONDS", self.DEFAULT_TIMEOUT_SECONDS
        )

    def _log_initialization(self) -> None:
        logger.info("SentimentService initialized:")
        logger.info("  - LLM model: %s", self.llm_model)
        logger.info("  - API base: %s", self.api_base)
        logger.info("  - Request timeout: %.1fs", self.timeout_seconds)

    @property
    def cache(self) -> SentimentCache:
        return self._cache

    @property
    def session(self) -> requests.Session:
        """
        Get or create a reusable HTTP session.

        Lazily initializes the session on first access so connections are
        pooled across calls.

        Returns:
            Configured requests Session instance
        """
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        """Close the HTTP session and release pooled connections."""
        if self._session is not None:
            self._session.close()
            self._session = None
            logger.debug("HTTP session closed")

    def __enter__(self) -> "SentimentService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def generate_url(self) -> str:
        return f"{self.api_base}/models/{self.llm_model}:generateContent"

    def classify(self, text: str | None) -> SentimentResult:
        """
        Classify the sentiment of a piece of text.

        Args:
            text: Freeform input; surrounding whitespace is ignored

        Returns:
            SentimentResult with a normalized label and a score in [0, 1]

        Raises:
            UnconfiguredError: If GEMINI_API_KEY is not set
            ProviderError: If the request fails or the provider returns a non-2xx status
            MalformedResponseError: If the model output contains no valid JSON
        """
        query = (text or "").strip()
        if not query:
            return NEUTRAL_DEFAULT

        cached = self._cache.get(query)
        if cached is not None:
            logger.debug("Sentiment cache hit for: %s", query[:self.MAX_LOG_QUERY_LENGTH])
            return cached

        api_key = get_optional_env_variable(self.API_KEY_ENV)
        if api_key is None:
            raise UnconfiguredError(self.API_KEY_ENV)

        envelope = self._call_llm_api(query, api_key)
        parsed = parse_jsonish(extract_generated_text(envelope))
        fields = parsed if isinstance(parsed, dict) else {}

        result = SentimentResult(
            label=self.normalize_label(fields.get("label")),
            score=self.clamp_score(fields.get("score")),
        )

        self._cache.set(query, result)
        logger.info("Sentiment analysis result: %s", result)
        return result

    def _build_payload(self, query: str) -> dict[str, Any]:
        return {
            "systemInstruction": {
                "role": "system",
                "parts": [{"text": SENTIMENT_LLM_SYSTEM_PROMPT}],
            },
            "contents": [{"role": "user", "parts": [{"text": query}]}],
            "generationConfig": {
                "response_mime_type": "application/json",
                "temperature": 0,
                "topP": 0,
            },
        }

    def _call_llm_api(self, query: str, api_key: str) -> Any:
        """
        Call the Gemini generateContent endpoint.

        Args:
            query: Trimmed text to classify
            api_key: Provider API key

        Returns:
            Decoded response envelope (an empty dict if the body is not JSON)

        Raises:
            ProviderError: On transport failure or non-2xx status
        """
        try:
            response = self.session.post(
                self.generate_url,
                params={"key": api_key},
                headers={"Content-Type": "application/json"},
                json=self._build_payload(query),
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as e:
            logger.warning("Gemini request failed: %s", type(e).__name__)
            raise ProviderError(None, type(e).__name__) from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Gemini error: %s %s",
                response.status_code,
                response.text[:self.MAX_ERROR_MESSAGE_LENGTH],
            )
            raise ProviderError(response.status_code)

        try:
            return response.json()
        except ValueError:
            logger.warning("Gemini returned a non-JSON body")
            return {}

    @classmethod
    def normalize_label(cls, raw: Any) -> SentimentLabel:
        """
        Map a free-form model label onto a SentimentLabel.

        Matching is case-insensitive and substring based ("Very Positive!" is
        positive). Anything unrecognized, including a missing label, is neutral.
        """
        value = "" if raw is None else str(raw).lower()
        for marker, label in cls.LABEL_MARKERS:
            if marker in value:
                return label
        return SentimentLabel.NEUTRAL

    @classmethod
    def clamp_score(cls, raw: Any) -> float:
        """Coerce a score to float and clamp it to [0, 1]; unusable values become 0.5."""
        if raw is None:
            return cls.DEFAULT_SCORE
        try:
            value = float(raw)
        except OverflowError:
            # integers beyond float range still clamp by sign
            return 1.0 if raw > 0 else 0.0
        except (TypeError, ValueError):
            return cls.DEFAULT_SCORE
        if math.isnan(value):
            return cls.DEFAULT_SCORE
        return max(0.0, min(1.0, value))
