"""
Process-lifetime cache for facts derived from template strings.

Keys are ``(namespace, pattern)``. Entries are only ever added; the set of
patterns is bounded by user configuration, not by library size.

Lookups are single-flight: when several threads miss on the same key at
once, the first computes and the rest wait for its result. A computation
that raises is not cached; every waiter sees the same exception and the
next lookup tries again.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Namespaces used by FileNameBuilder
EPISODE_FORMATS = "episode_formats"
HAS_EPISODE_IDENTIFIER = "has_episode_identifier"
REQUIRES_EPISODE_TITLE = "requires_episode_title"


@dataclass
class PatternCache:
    """Thread-safe, append-only, single-flight cache.

    Instance-based so each builder (and each test) can own one.

    Example:
        cache = PatternCache()
        formats = cache.get_or_compute(EPISODE_FORMATS, pattern, lambda: parse(pattern))
    """

    _entries: dict[tuple[str, str], Future[Any]] = dataclass_field(default_factory=dict)
    _lock: threading.Lock = dataclass_field(default_factory=threading.Lock, repr=False)

    def get_or_compute(self, namespace: str, pattern: str, compute: Callable[[], T]) -> T:
        """Return the cached value for the key, computing it at most once at a time.

        Args:
            namespace: Kind of fact (e.g. EPISODE_FORMATS)
            pattern: Exact template text
            compute: Zero-argument function producing the value

        Returns:
            The cached or freshly computed value

        Raises:
            Exception: Whatever ``compute`` raised (for every waiter)
        """
        key = (namespace, pattern)

        with self._lock:
            future = self._entries.get(key)
            owner = future is None
            if future is None:
                future = Future()
                self._entries[key] = future

        if not owner:
            return future.result()  # type: ignore[no-any-return]

        logger.debug("Pattern cache miss: %s %r", namespace, pattern)
        try:
            value = compute()
        except BaseException as e:
            with self._lock:
                # Drop the failed entry so a later call can retry
                if self._entries.get(key) is future:
                    del self._entries[key]
            future.set_exception(e)
            raise

        future.set_result(value)
        return value

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for f in self._entries.values() if f.done() and f.exception() is None)

    def __contains__(self, key: tuple[str, str]) -> bool:
        with self._lock:
            future = self._entries.get(key)
        return future is not None and future.done() and future.exception() is None
