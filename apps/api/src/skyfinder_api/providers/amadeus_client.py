"""Amadeus Self-Service API client wrapper.

Uses the official ``amadeus`` Python SDK which handles the OAuth2 token
lifecycle automatically.  Exposes a thin async wrapper around the
synchronous SDK using ``asyncio.to_thread``.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from amadeus import Client, Location, ResponseError

from skyfinder_api.config import ApiSettings, settings
from skyfinder_api.errors import MissingCredentialsError, UpstreamError

logger = logging.getLogger(__name__)


def _log_amadeus_error(context: str, exc: ResponseError) -> None:
    """Log the provider's error entries; the caller only sees a generic message."""
    response = getattr(exc, "response", None)
    result: Any = getattr(response, "result", None)
    if not result and getattr(response, "body", None):
        try:
            result = json.loads(response.body)  # type: ignore[union-attr]
        except (TypeError, ValueError):
            result = None
    if isinstance(result, dict) and result.get("errors"):
        for err in result["errors"]:
            logger.error(
                "Amadeus %s %s: [%s] %s - %s (source: %s)",
                context,
                getattr(response, "status_code", "?"),
                err.get("code"),
                err.get("title", ""),
                err.get("detail", ""),
                err.get("source", {}),
            )
        return
    logger.error("Amadeus %s failed: %s", context, exc)


class AmadeusClient:
    """Async-friendly wrapper around the Amadeus Python SDK."""

    def __init__(
        self,
        api_settings: ApiSettings | None = None,
        sdk: Client | None = None,
    ) -> None:
        self._settings = api_settings or settings
        self._sdk = sdk

    def _ensure_sdk(self) -> Client:
        if self._sdk is None:
            if not self._settings.has_amadeus_credentials:
                raise MissingCredentialsError
            self._sdk = Client(
                client_id=self._settings.amadeus_api_key,
                client_secret=self._settings.amadeus_api_secret,
                hostname=self._settings.amadeus_hostname,
            )
            logger.info(
                "Amadeus SDK initialised (hostname=%s)", self._settings.amadeus_hostname
            )
        return self._sdk

    async def search_locations(
        self,
        keyword: str,
        *,
        page_limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Keyword search for airports and cities.

        GET /v1/reference-data/locations.  The keyword is upper-cased since
        the provider matches better that way.
        """
        sdk = self._ensure_sdk()
        params: dict[str, Any] = {
            "keyword": keyword.upper(),
            "subType": Location.ANY,
            "page[limit]": page_limit or self._settings.suggestion_page_limit,
        }

        def _call() -> list[dict[str, Any]]:
            try:
                resp = sdk.reference_data.locations.get(**params)
            except ResponseError as exc:
                _log_amadeus_error("location search", exc)
                raise UpstreamError("Airport search failed") from exc
            return list(resp.data or [])

        logger.info("Amadeus location search: %s", params["keyword"])
        return await asyncio.to_thread(_call)

    async def search_flight_offers(
        self,
        origin: str,
        destination: str,
        departure_date: str,
        *,
        return_date: str | None = None,
        adults: int = 1,
        travel_class: str | None = None,
        non_stop: bool = False,
        currency_code: str = "USD",
        max_results: int | None = None,
    ) -> dict[str, Any]:
        """Search for flight offers using GET /v2/shopping/flight-offers.

        Returns the provider payload unchanged: ``data`` plus the optional
        ``meta`` and ``dictionaries`` (carrier and aircraft display names).

        Parameters
        ----------
        origin:
            IATA origin code (e.g. ``JFK``).
        destination:
            IATA destination code (e.g. ``LHR``).
        departure_date:
            ISO-8601 date string (``YYYY-MM-DD``).
        return_date:
            Optional return date for round-trip searches.
        adults:
            Number of adult passengers (1-9).
        travel_class:
            ECONOMY, PREMIUM_ECONOMY, BUSINESS, or FIRST.
        non_stop:
            If True, return only non-stop flights.
        currency_code:
            ISO currency code for prices.
        max_results:
            Maximum number of offers to return.
        """
        sdk = self._ensure_sdk()
        params: dict[str, Any] = {
            "originLocationCode": origin,
            "destinationLocationCode": destination,
            "departureDate": departure_date,
            "adults": adults,
            "nonStop": "true" if non_stop else "false",
            "currencyCode": currency_code,
            "max": max_results or self._settings.flight_max_results,
        }
        if return_date:
            params["returnDate"] = return_date
        if travel_class:
            params["travelClass"] = travel_class

        def _call() -> dict[str, Any]:
            try:
                resp = sdk.shopping.flight_offers_search.get(**params)
            except ResponseError as exc:
                _log_amadeus_error("flight search", exc)
                raise UpstreamError("Flight search failed") from exc
            return dict(resp.result or {})

        logger.info(
            "Amadeus flight search: %s -> %s on %s", origin, destination, departure_date
        )
        return await asyncio.to_thread(_call)

    async def close(self) -> None:
        """No-op; the SDK manages its own HTTP lifecycle."""
        self._sdk = None
