"""Failure kinds raised by the sentiment classifier."""


class ClassificationError(Exception):
    """Base class for every classification failure."""


class UnconfiguredError(ClassificationError):
    """No provider credential is available, so no LLM can be called."""

    def __init__(self, env_key: str):
        super().__init__(f"No LLM available: set {env_key} in the env")
        self.env_key = env_key


class ProviderError(ClassificationError):
    """
    The provider rejected or failed the request.

    ``status`` is the HTTP status code, or None when the request never got a
    response (DNS failure, connection reset, timeout).
    """

    def __init__(self, status: int | None, detail: str = ""):
        if status is None:
            message = f"Gemini request failed: {detail}" if detail else "Gemini request failed"
        else:
            message = f"Gemini error {status}"
        super().__init__(message)
        self.status = status


class MalformedResponseError(ClassificationError):
    """The provider answered but the generated text held no usable JSON."""

    def __init__(self, excerpt: str):
        super().__init__(f"Model did not return valid JSON: {excerpt}")
        self.excerpt = excerpt
