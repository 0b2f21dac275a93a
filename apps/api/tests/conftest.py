"""Shared fixtures for API tests: settings, a fake provider and a test client."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from skyfinder_api.config import ApiSettings
from skyfinder_api.dependencies import get_provider
from skyfinder_api.errors import UpstreamError
from skyfinder_api.main import create_app


class FakeProvider:
    """In-memory stand-in for :class:`AmadeusClient`."""

    def __init__(self) -> None:
        self.locations: dict[str, list[dict[str, Any]]] = {}
        self.flight_payload: dict[str, Any] = {"data": []}
        self.location_calls: list[str] = []
        self.flight_calls: list[dict[str, Any]] = []
        self.fail_locations = False
        self.fail_flights = False

    async def search_locations(
        self, keyword: str, *, page_limit: int | None = None
    ) -> list[dict[str, Any]]:
        self.location_calls.append(keyword)
        if self.fail_locations:
            raise UpstreamError("Airport search failed")
        return self.locations.get(keyword.upper(), [])

    async def search_flight_offers(
        self, origin: str, destination: str, departure_date: str, **kwargs: Any
    ) -> dict[str, Any]:
        self.flight_calls.append(
            {
                "origin": origin,
                "destination": destination,
                "departure_date": departure_date,
                **kwargs,
            }
        )
        if self.fail_flights:
            raise UpstreamError("Flight search failed")
        return self.flight_payload

    async def close(self) -> None:
        return None


def _location(iata: str, sub_type: str, city_code: str | None = None) -> dict[str, Any]:
    address: dict[str, Any] = {"cityName": "NEW YORK", "countryCode": "US"}
    if city_code:
        address["cityCode"] = city_code
    return {
        "type": "location",
        "subType": sub_type,
        "name": f"{iata} NAME",
        "iataCode": iata,
        "address": address,
        "geoCode": {"latitude": 40.7, "longitude": -74.0},
    }


@pytest.fixture
def api_settings() -> ApiSettings:
    return ApiSettings(
        _env_file=None,
        amadeus_api_key="test-key",
        amadeus_api_secret="test-secret",
    )


@pytest.fixture
def provider() -> FakeProvider:
    fake = FakeProvider()
    fake.locations["NEW"] = [
        _location("NYC", "CITY"),
        _location("JFK", "AIRPORT", "NYC"),
        _location("EWR", "AIRPORT", "NYC"),
        _location("LGA", "AIRPORT", "XXX"),
    ]
    return fake


@pytest.fixture
def app(api_settings: ApiSettings, provider: FakeProvider):
    application = create_app(api_settings)
    application.dependency_overrides[get_provider] = lambda: provider
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
