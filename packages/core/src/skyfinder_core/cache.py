"""In-process TTL cache for airport suggestions."""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .schemas import AirportGroup

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0  # 5 min
DEFAULT_MAX_ENTRIES = 512
MIN_KEYWORD_LENGTH = 2


def normalize_keyword(keyword: str) -> str:
    """Cache key for a keyword: trimmed and lower-cased."""
    return keyword.strip().lower()


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Grouped suggestions plus the clock reading after which they are stale."""

    data: tuple[AirportGroup, ...]
    expires_at: float


class SuggestionCache:
    """Keyword-keyed suggestion cache with lazy TTL expiry and LRU bound.

    Expired entries are not swept; a read after ``expires_at`` is a miss and
    the next store for the same key overwrites the entry.  When more than
    ``max_entries`` keys are held, the least recently used one is evicted.

    ``now`` may be passed explicitly to every operation; otherwise the
    injected ``clock`` is read.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            msg = "ttl_seconds must be positive"
            raise ValueError(msg)
        if max_entries < 1:
            msg = "max_entries must be >= 1"
            raise ValueError(msg)
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(
        self,
        keyword: str,
        now: float | None = None,
    ) -> tuple[AirportGroup, ...] | None:
        """Return cached groups for *keyword*, or None on a miss."""
        key = normalize_keyword(keyword)
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Suggestion cache miss: %r", key)
            return None
        now = self._clock() if now is None else now
        if now >= entry.expires_at:
            logger.debug("Suggestion cache expired: %r", key)
            return None
        self._entries.move_to_end(key)
        logger.debug("Suggestion cache hit: %r", key)
        return entry.data

    def store(
        self,
        keyword: str,
        groups: Iterable[AirportGroup],
        now: float | None = None,
    ) -> None:
        """Cache *groups* for *keyword* for one TTL window from *now*."""
        key = normalize_keyword(keyword)
        now = self._clock() if now is None else now
        self._entries[key] = CacheEntry(data=tuple(groups), expires_at=now + self._ttl)
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Suggestion cache evicted: %r", evicted)

    def clear(self) -> None:
        self._entries.clear()
