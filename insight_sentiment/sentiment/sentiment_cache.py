import threading

from insight_sentiment.model import SentimentResult


class SentimentCache:
    """
    In-memory cache of classification results keyed by trimmed input text.

    Entries live as long as the cache instance. There is no eviction, TTL or
    size bound, so memory grows with the number of distinct texts classified.
    Writes replace whole entries; the lock keeps each get/set atomic when the
    service is called from several worker threads.
    """

    def __init__(self):
        self._entries: dict[str, SentimentResult] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> SentimentResult | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, result: SentimentResult) -> None:
        with self._lock:
            self._entries[key] = result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
