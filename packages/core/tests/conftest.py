"""Shared fixtures and factories for core tests."""

from __future__ import annotations

from typing import Any

import pytest


def _make_location(
    iata_code: str,
    sub_type: str,
    *,
    name: str | None = None,
    city_code: str | None = None,
    city_name: str | None = None,
    country_code: str | None = "US",
    lat: float | None = None,
    lon: float | None = None,
) -> dict[str, Any]:
    """Build a raw location record shaped like the provider's."""
    address: dict[str, Any] = {}
    if city_code is not None:
        address["cityCode"] = city_code
    if city_name is not None:
        address["cityName"] = city_name
    if country_code is not None:
        address["countryCode"] = country_code
    record: dict[str, Any] = {
        "iataCode": iata_code,
        "subType": sub_type,
        "name": name or iata_code,
        "address": address,
    }
    if lat is not None and lon is not None:
        record["geoCode"] = {"latitude": lat, "longitude": lon}
    return record


def _make_offer(
    offer_id: str,
    *,
    grand_total: str | None = "100.00",
    durations: tuple[str, ...] = ("PT2H",),
    departure_at: str = "2026-06-20T08:00:00",
) -> dict[str, Any]:
    """Build a minimal provider flight offer."""
    itineraries = []
    for i, duration in enumerate(durations):
        itineraries.append(
            {
                "duration": duration,
                "segments": [
                    {
                        "departure": {
                            "iataCode": "JFK",
                            "at": departure_at if i == 0 else "2026-06-27T10:00:00",
                        },
                        "arrival": {"iataCode": "LHR", "at": "2026-06-20T20:00:00"},
                        "carrierCode": "BA",
                        "number": "178",
                    }
                ],
            }
        )
    offer: dict[str, Any] = {"id": offer_id, "itineraries": itineraries}
    if grand_total is not None:
        offer["price"] = {"currency": "USD", "total": grand_total, "grandTotal": grand_total}
    return offer


@pytest.fixture
def new_york_locations() -> list[dict[str, Any]]:
    """NYC city record, two NYC airports and one airport with an unreturned city."""
    return [
        _make_location(
            "NYC", "CITY", name="NEW YORK", city_name="NEW YORK", lat=40.71, lon=-74.0
        ),
        _make_location(
            "JFK",
            "AIRPORT",
            name="JOHN F KENNEDY INTL",
            city_code="NYC",
            city_name="NEW YORK",
            lat=40.64,
            lon=-73.78,
        ),
        _make_location(
            "EWR",
            "AIRPORT",
            name="NEWARK LIBERTY INTL",
            city_code="NYC",
            city_name="NEW YORK",
            lat=40.69,
            lon=-74.17,
        ),
        _make_location(
            "LGA",
            "AIRPORT",
            name="LAGUARDIA",
            city_code="XXX",
            city_name="QUEENS",
            lat=40.78,
            lon=-73.87,
        ),
    ]


@pytest.fixture
def make_location():
    """Factory fixture for raw location records."""
    return _make_location


@pytest.fixture
def make_offer():
    """Factory fixture for provider flight offers."""
    return _make_offer
