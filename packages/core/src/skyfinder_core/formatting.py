"""Display strings for flight result cards."""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from .duration import duration_components

_CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "KRW": "₩",
    "INR": "₹",
}


def format_duration(iso_dur: str) -> str:
    """``PT2H35M`` → ``2h 35m``; unparsable input is returned unchanged.

    Every component present in the text is shown, so ``PT2H0M`` → ``2h 0m``.
    """
    components = duration_components(iso_dur)
    if components is None:
        return iso_dur
    hours, minutes = components
    parts = []
    if hours is not None:
        parts.append(f"{hours}h")
    if minutes is not None:
        parts.append(f"{minutes}m")
    return " ".join(parts)


def format_time(iso: str) -> str:
    """``2024-11-15T06:45:00`` → ``06:45``."""
    return iso[11:16]


def format_date(iso: str) -> str:
    """``2024-11-15T06:45:00`` → ``15 Nov``."""
    d = datetime.fromisoformat(iso)
    return f"{d.day} {d:%b}"


def format_price(amount: str | float, currency: str) -> str:
    """Whole-unit price with thousands separators, e.g. ``$1,235``."""
    try:
        value = Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return f"{amount} {currency}"
    if not value.is_finite():
        return f"{amount} {currency}"
    digits = f"{value:,}"
    symbol = _CURRENCY_SYMBOLS.get(currency.upper())
    if symbol is None:
        return f"{digits} {currency.upper()}"
    if value < 0:
        return f"-{symbol}{digits[1:]}"
    return f"{symbol}{digits}"


def day_diff(departure: str, arrival: str) -> int:
    """Calendar days between departure and arrival (``+1`` for next-day)."""
    dep = datetime.fromisoformat(departure).date()
    arr = datetime.fromisoformat(arrival).date()
    return (arr - dep).days


def offer_count(payload: dict[str, Any]) -> int:
    """Number of offers a search reported, falling back to the list length."""
    meta = payload.get("meta") or {}
    count = meta.get("count")
    if isinstance(count, int):
        return count
    return len(payload.get("data") or [])
