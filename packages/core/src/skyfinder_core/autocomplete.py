"""Debounced airport autocomplete with stale-response protection.

Each keystroke restarts a short timer; only when the timer elapses is the
lookup dispatched.  A dispatched lookup is never cancelled, so a slow
response for an older keyword can arrive after a newer one.  Every lookup
carries the sequence number current at the time it was scheduled and its
result is applied only if no newer keyword has been issued since.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from .cache import MIN_KEYWORD_LENGTH

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from .schemas import AirportGroup

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.28


class AutocompleteSession:
    """State of one autocomplete input field."""

    def __init__(
        self,
        fetch: Callable[[str], Awaitable[Sequence[AirportGroup]]],
        *,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        min_length: int = MIN_KEYWORD_LENGTH,
    ) -> None:
        self._fetch = fetch
        self._delay = delay
        self._min_length = min_length
        self._seq = 0
        self._timer: asyncio.Task[None] | None = None
        self._inflight: set[asyncio.Task[None]] = set()

        self.keyword = ""
        self.results: list[AirportGroup] = []
        self.error: Exception | None = None
        self.applied_seq = 0

    @property
    def sequence(self) -> int:
        """Sequence number of the most recently issued keyword."""
        return self._seq

    async def update(self, keyword: str) -> None:
        """Record a keystroke and (re)start the debounce timer."""
        self._seq += 1
        self._cancel_timer()
        self.keyword = keyword.strip()

        if len(self.keyword) < self._min_length:
            self.results = []
            self.error = None
            self.applied_seq = self._seq
            return

        self._timer = asyncio.create_task(self._debounce(self._seq, self.keyword))

    async def wait(self) -> None:
        """Wait until no timer is pending and no lookup is in flight."""
        while self._timer is not None or self._inflight:
            pending = [t for t in (self._timer, *self._inflight) if t is not None]
            await asyncio.gather(*pending, return_exceptions=True)

    def close(self) -> None:
        """Cancel a pending timer.  In-flight lookups are left to finish."""
        self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def _debounce(self, seq: int, keyword: str) -> None:
        await asyncio.sleep(self._delay)
        if self._timer is asyncio.current_task():
            self._timer = None
        task = asyncio.create_task(self._lookup(seq, keyword))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)

    async def _lookup(self, seq: int, keyword: str) -> None:
        try:
            groups = await self._fetch(keyword)
        except Exception as exc:
            logger.warning("Suggestion lookup failed for %r: %s", keyword, exc)
            if seq == self._seq:
                self.error = exc
            return

        if seq != self._seq:
            logger.debug(
                "Discarding stale suggestions for %r (seq %d < %d)",
                keyword,
                seq,
                self._seq,
            )
            return

        self.results = list(groups)
        self.error = None
        self.applied_seq = seq
