"""Airport autocomplete service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skyfinder_core.cache import MIN_KEYWORD_LENGTH
from skyfinder_core.grouping import group_locations

if TYPE_CHECKING:
    from skyfinder_core.cache import SuggestionCache
    from skyfinder_core.schemas import AirportGroup

    from ..providers import AmadeusClient

logger = logging.getLogger(__name__)


class AirportService:
    """Cache lookup, provider location search and city grouping."""

    def __init__(self, provider: AmadeusClient, cache: SuggestionCache) -> None:
        self._provider = provider
        self._cache = cache

    async def suggest(self, keyword: str) -> list[AirportGroup]:
        """Grouped suggestions for *keyword*; short keywords never hit the network."""
        keyword = keyword.strip()
        if len(keyword) < MIN_KEYWORD_LENGTH:
            return []

        cached = self._cache.lookup(keyword)
        if cached is not None:
            return list(cached)

        # Failures propagate before anything is stored.
        raw = await self._provider.search_locations(keyword)
        groups = group_locations(raw)
        self._cache.store(keyword, groups)
        logger.info("Airport suggestions for %r: %d groups", keyword, len(groups))
        return groups
