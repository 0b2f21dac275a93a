"""Flight search business logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from skyfinder_core.schemas import SortKey
from skyfinder_core.sorting import sort_offers

from ..errors import InvalidRequestError
from ..schemas.flights import FlightSearchParams

if TYPE_CHECKING:
    from ..config import ApiSettings
    from ..providers import AmadeusClient

logger = logging.getLogger(__name__)

_TRUTHY = {"true", "1", "yes"}


def _describe(exc: ValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err.get("loc", ()))
    msg = err.get("msg", "invalid value")
    return f"{field}: {msg}" if field else msg


def parse_sort_key(raw: str | None) -> SortKey | None:
    """Optional ``sort`` query value → :class:`SortKey`."""
    if not raw:
        return None
    try:
        return SortKey(raw)
    except ValueError:
        choices = ", ".join(k.value for k in SortKey)
        msg = f"sort must be one of {choices}"
        raise InvalidRequestError(msg) from None


class FlightService:
    """Validates search parameters, calls the provider and orders the offers."""

    def __init__(self, provider: AmadeusClient, api_settings: ApiSettings) -> None:
        self._provider = provider
        self._settings = api_settings

    def build_params(
        self,
        *,
        origin: str | None,
        destination: str | None,
        departure_date: str | None,
        return_date: str | None = None,
        adults: str | None = None,
        travel_class: str | None = None,
        non_stop: str | None = None,
        currency: str | None = None,
    ) -> FlightSearchParams:
        """Turn raw query-string values into :class:`FlightSearchParams`."""
        origin = (origin or "").strip()
        destination = (destination or "").strip()
        departure_date = (departure_date or "").strip()
        if not origin or not destination or not departure_date:
            msg = "origin, destination and departureDate are required"
            raise InvalidRequestError(msg)

        raw: dict[str, Any] = {
            "origin": origin,
            "destination": destination,
            "departure_date": departure_date,
            "return_date": return_date or None,
            "adults": adults or 1,
            "travel_class": travel_class or "ECONOMY",
            "non_stop": (non_stop or "").strip().lower() in _TRUTHY,
            "currency": currency or self._settings.default_currency,
        }
        try:
            return FlightSearchParams.model_validate(raw)
        except ValidationError as exc:
            raise InvalidRequestError(_describe(exc)) from None

    async def search(
        self,
        params: FlightSearchParams,
        sort: SortKey | None = None,
    ) -> dict[str, Any]:
        """Provider payload for *params*, with ``data`` reordered if *sort* is set."""
        payload = await self._provider.search_flight_offers(
            params.origin,
            params.destination,
            params.departure_date.isoformat(),
            return_date=params.return_date.isoformat() if params.return_date else None,
            adults=params.adults,
            travel_class=params.travel_class.value,
            non_stop=params.non_stop,
            currency_code=params.currency,
            max_results=self._settings.flight_max_results,
        )
        if sort is not None and payload.get("data"):
            payload = {**payload, "data": sort_offers(payload["data"], sort)}

        logger.info(
            "Flight search %s -> %s on %s: %d offers",
            params.origin,
            params.destination,
            params.departure_date,
            len(payload.get("data") or []),
        )
        return payload
