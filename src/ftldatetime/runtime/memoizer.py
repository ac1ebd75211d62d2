"""Per-language caches of expensive formatter objects.

A memoizer maps (constructor, args) to the object constructor(language, args)
built. Keys carry the constructor as well as the arguments, so different
formatter kinds sharing one memoizer never collide.

Failed constructions are never cached: the exception propagates and the next
call with the same key builds again.

Architecture:
    - IntlLangMemoizer: single-threaded, plain dict
    - ConcurrentIntlLangMemoizer: lock-protected; builds outside the lock,
      first insertion wins, every caller receives the retained instance
    - IntlMemoizer: hands out one language memoizer per language tag

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Hashable
from typing import Protocol

__all__ = [
    "ConcurrentIntlLangMemoizer",
    "IntlLangMemoizer",
    "IntlMemoizer",
    "LangMemoizer",
]

logger = logging.getLogger(__name__)

_MISSING = object()


class LangMemoizer(Protocol):
    """What a FluentType needs from a memoizer."""

    @property
    def language(self) -> str: ...

    def try_get[V, A: Hashable](self, constructor: Callable[[str, A], V], args: A) -> V: ...


class IntlLangMemoizer:
    """Single-threaded formatter cache for one language.

    Example:
        >>> memo = IntlLangMemoizer("en-US")
        >>> memo.try_get(lambda lang, n: f"{lang}:{n}", 3)
        'en-US:3'
        >>> memo.misses, memo.hits
        (1, 0)
    """

    __slots__ = ("_cache", "_hits", "_language", "_misses")

    def __init__(self, language: str) -> None:
        self._language = language
        self._cache: dict[tuple[Callable[..., object], Hashable], object] = {}
        self._hits = 0
        self._misses = 0

    @property
    def language(self) -> str:
        """Language tag passed to every constructor."""
        return self._language

    def try_get[V, A: Hashable](self, constructor: Callable[[str, A], V], args: A) -> V:
        """Return the cached object for (constructor, args), building on miss.

        Args:
            constructor: Called as constructor(language, args) on miss
            args: Hashable construction arguments

        Returns:
            Cached or newly built object

        Raises:
            Exception: Whatever constructor raises; nothing is cached
        """
        key = (constructor, args)
        cached = self._cache.get(key, _MISSING)
        if cached is not _MISSING:
            self._hits += 1
            return cached  # type: ignore[return-value]

        self._misses += 1
        logger.debug("Cache miss for '%s': %r", self._language, args)
        value = constructor(self._language, args)
        self._cache[key] = value
        return value

    @property
    def hits(self) -> int:
        """Lookups answered from the cache."""
        return self._hits

    @property
    def misses(self) -> int:
        """Lookups that called the constructor (including failed ones)."""
        return self._misses

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        """Drop cached objects and reset statistics."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def get_stats(self) -> dict[str, int | str]:
        """Cache statistics for diagnostics."""
        return {
            "language": self._language,
            "size": len(self._cache),
            "hits": self._hits,
            "misses": self._misses,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(language={self._language!r}, size={len(self._cache)})"


class ConcurrentIntlLangMemoizer(IntlLangMemoizer):
    """Thread-safe formatter cache for one language.

    Construction runs outside the lock, so a slow build never blocks readers
    of other keys. When two threads build the same key concurrently, the
    first insertion is retained and both callers receive it; the other
    instance is discarded.
    """

    __slots__ = ("_lock",)

    def __init__(self, language: str) -> None:
        super().__init__(language)
        self._lock = threading.Lock()

    def try_get[V, A: Hashable](self, constructor: Callable[[str, A], V], args: A) -> V:
        key = (constructor, args)
        with self._lock:
            cached = self._cache.get(key, _MISSING)
            if cached is not _MISSING:
                self._hits += 1
                return cached  # type: ignore[return-value]
            self._misses += 1
        logger.debug("Cache miss for '%s': %r", self._language, args)

        value = constructor(self._language, args)

        with self._lock:
            retained = self._cache.setdefault(key, value)
        if retained is not value:
            logger.debug("Discarded duplicate %s for '%s'", type(value).__name__, self._language)
        return retained  # type: ignore[return-value]

    def clear(self) -> None:
        with self._lock:
            super().clear()

    def get_stats(self) -> dict[str, int | str]:
        with self._lock:
            return super().get_stats()


class IntlMemoizer:
    """Registry of per-language memoizers.

    Repeated get_for_lang() calls with the same tag return the same
    memoizer, so formatters are shared across everything that renders in
    that language.

    Args:
        thread_safe: Hand out ConcurrentIntlLangMemoizer instances
    """

    __slots__ = ("_languages", "_lock", "_thread_safe")

    def __init__(self, *, thread_safe: bool = False) -> None:
        self._thread_safe = thread_safe
        self._languages: dict[str, IntlLangMemoizer] = {}
        self._lock = threading.Lock()

    @property
    def thread_safe(self) -> bool:
        """Whether handed-out memoizers are concurrent."""
        return self._thread_safe

    def get_for_lang(self, language: str) -> IntlLangMemoizer:
        """Return the memoizer for language, creating it on first request."""
        with self._lock:
            memoizer = self._languages.get(language)
            if memoizer is None:
                cls = ConcurrentIntlLangMemoizer if self._thread_safe else IntlLangMemoizer
                memoizer = cls(language)
                self._languages[language] = memoizer
            return memoizer

    def __len__(self) -> int:
        return len(self._languages)
