"""Enums shared by the domain logic and the API layer."""

from __future__ import annotations

from enum import StrEnum


class LocationSubType(StrEnum):
    """Kind of location returned by the location search."""

    AIRPORT = "AIRPORT"
    CITY = "CITY"


class TravelClass(StrEnum):
    """Cabin class for a flight search."""

    ECONOMY = "ECONOMY"
    PREMIUM_ECONOMY = "PREMIUM_ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"


class SortKey(StrEnum):
    """Ordering applied to a list of flight offers."""

    PRICE = "price"
    DURATION = "duration"
    DEPARTURE = "departure"

    @classmethod
    def _missing_(cls, value: object) -> SortKey | None:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None
