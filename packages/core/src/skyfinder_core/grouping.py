"""Group raw location search results into city → airports suggestions.

The location search returns a flat, mixed list of CITY and AIRPORT records.
The autocomplete dropdown shows them as two levels: a city header followed by
the airports serving it.  Cities the provider returned come first, in provider
order.  Airports whose city was not returned get a city header synthesised
from their own address metadata, in the order the airports were encountered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .schemas import AirportGroup, AirportSuggestion, LocationSubType

logger = logging.getLogger(__name__)


def _city_code(location: Mapping[str, Any]) -> str:
    """City code of an airport record, falling back to its own IATA code."""
    address = location.get("address") or {}
    return address.get("cityCode") or location.get("iataCode", "")


def to_suggestion(
    location: Mapping[str, Any],
    sub_type: LocationSubType,
) -> AirportSuggestion:
    """Normalise one raw location record."""
    address = location.get("address") or {}
    geo = location.get("geoCode") or {}
    name = location.get("name", "")
    return AirportSuggestion(
        iata_code=location.get("iataCode", ""),
        name=name,
        city_name=address.get("cityName") or name,
        country_code=address.get("countryCode") or "",
        sub_type=sub_type,
        lat=geo.get("latitude"),
        lon=geo.get("longitude"),
    )


def _synthesise_city(airport: Mapping[str, Any], city_code: str) -> AirportSuggestion:
    """Build a CITY header from an airport whose city was not returned."""
    address = airport.get("address") or {}
    geo = airport.get("geoCode") or {}
    city_name = address.get("cityName") or airport.get("name", "")
    return AirportSuggestion(
        iata_code=city_code,
        name=city_name,
        city_name=city_name,
        country_code=address.get("countryCode") or "",
        sub_type=LocationSubType.CITY,
        lat=geo.get("latitude"),
        lon=geo.get("longitude"),
    )


def group_locations(raw: Iterable[Mapping[str, Any]]) -> list[AirportGroup]:
    """Turn a raw location list into an ordered list of :class:`AirportGroup`.

    No city code appears in more than one group, and every airport in a group
    shares that group's city code.  Groups with no airports are kept.
    """
    cities: list[Mapping[str, Any]] = []
    airports: list[Mapping[str, Any]] = []
    for loc in raw:
        sub_type = loc.get("subType")
        if sub_type == LocationSubType.CITY:
            cities.append(loc)
        elif sub_type == LocationSubType.AIRPORT:
            airports.append(loc)

    # cityCode → airports under that city, in provider order
    by_city: dict[str, list[AirportSuggestion]] = {}
    for ap in airports:
        by_city.setdefault(_city_code(ap), []).append(
            to_suggestion(ap, LocationSubType.AIRPORT)
        )

    groups: list[AirportGroup] = []
    handled: set[str] = set()

    for city in cities:
        code = city.get("iataCode", "")
        if code in handled:
            continue
        handled.add(code)
        groups.append(
            AirportGroup(
                city=to_suggestion(city, LocationSubType.CITY),
                airports=tuple(by_city.get(code, ())),
            )
        )

    synthesised = 0
    for ap in airports:
        code = _city_code(ap)
        if code in handled:
            continue
        handled.add(code)
        synthesised += 1
        groups.append(
            AirportGroup(
                city=_synthesise_city(ap, code),
                airports=tuple(by_city.get(code, ())),
            )
        )

    logger.debug(
        "Grouped %d cities and %d airports into %d groups (%d synthesised)",
        len(cities),
        len(airports),
        len(groups),
        synthesised,
    )
    return groups
