"""Ordering of provider flight offers for the results view."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from .duration import duration_minutes
from .schemas import SortKey

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping


def _price_key(offer: Mapping[str, Any]) -> tuple[bool, Decimal]:
    raw = (offer.get("price") or {}).get("grandTotal")
    try:
        amount = Decimal(str(raw))
    except (InvalidOperation, ValueError):
        amount = None
    if amount is None or not amount.is_finite():
        # Unpriced offers go last.
        return True, Decimal(0)
    return False, amount


def _departure_key(offer: Mapping[str, Any]) -> tuple[bool, str]:
    # Fixed-width ISO timestamps compare correctly as strings.
    try:
        at = offer["itineraries"][0]["segments"][0]["departure"]["at"]
    except (KeyError, IndexError, TypeError):
        return True, ""
    return False, str(at)


def total_duration_minutes(offer: Mapping[str, Any]) -> int:
    """Sum of itinerary durations (outbound + return) in minutes."""
    return sum(
        duration_minutes(itin.get("duration"))
        for itin in offer.get("itineraries") or []
    )


_SORT_KEYS: dict[SortKey, Callable[[Mapping[str, Any]], Any]] = {
    SortKey.PRICE: _price_key,
    SortKey.DURATION: total_duration_minutes,
    SortKey.DEPARTURE: _departure_key,
}


def sort_offers(
    offers: Iterable[Mapping[str, Any]],
    key: SortKey | str = SortKey.PRICE,
) -> list[Mapping[str, Any]]:
    """Return *offers* in a new, stably sorted list.

    Offers with equal keys keep their provider order.  The offers themselves
    are not modified.
    """
    return sorted(offers, key=_SORT_KEYS[SortKey(key)])
