"""Tests for the city → airports suggestion grouping."""

from __future__ import annotations

from skyfinder_core.grouping import group_locations, to_suggestion
from skyfinder_core.schemas import LocationSubType


def _codes(groups):
    return [(g.city.iata_code, [a.iata_code for a in g.airports]) for g in groups]


def test_groups_airports_under_returned_and_synthesised_cities(new_york_locations):
    groups = group_locations(new_york_locations)

    assert _codes(groups) == [("NYC", ["JFK", "EWR"]), ("XXX", ["LGA"])]
    assert groups[0].city.name == "NEW YORK"
    assert groups[0].city.sub_type == LocationSubType.CITY


def test_synthesised_city_uses_airport_address_and_coordinates(new_york_locations):
    synth = group_locations(new_york_locations)[1].city

    assert synth.iata_code == "XXX"
    assert synth.sub_type == LocationSubType.CITY
    assert synth.name == "QUEENS"
    assert synth.city_name == "QUEENS"
    assert synth.country_code == "US"
    assert (synth.lat, synth.lon) == (40.78, -73.87)


def test_provider_cities_come_before_synthesised_ones(make_location):
    raw = [
        make_location("ORY", "AIRPORT", city_code="PAR", city_name="PARIS"),
        make_location("LON", "CITY", city_name="LONDON"),
        make_location("LHR", "AIRPORT", city_code="LON"),
        make_location("BER", "AIRPORT", city_code="BER", city_name="BERLIN"),
    ]

    assert _codes(group_locations(raw)) == [
        ("LON", ["LHR"]),
        ("PAR", ["ORY"]),
        ("BER", ["BER"]),
    ]


def test_airport_without_city_code_falls_back_to_own_code(make_location):
    raw = [make_location("SFO", "AIRPORT", city_name="SAN FRANCISCO")]

    groups = group_locations(raw)

    assert _codes(groups) == [("SFO", ["SFO"])]
    assert groups[0].city.name == "SAN FRANCISCO"


def test_city_code_matching_airport_fallback_is_emitted_once(make_location):
    raw = [
        make_location("SFO", "CITY", city_name="SAN FRANCISCO"),
        make_location("SFO", "AIRPORT", name="SAN FRANCISCO INTL"),
    ]

    groups = group_locations(raw)

    assert _codes(groups) == [("SFO", ["SFO"])]
    assert groups[0].city.sub_type == LocationSubType.CITY


def test_duplicate_city_records_keep_first(make_location):
    raw = [
        make_location("PAR", "CITY", name="PARIS"),
        make_location("PAR", "CITY", name="PARIS AGAIN"),
    ]

    groups = group_locations(raw)

    assert len(groups) == 1
    assert groups[0].city.name == "PARIS"


def test_city_without_airports_is_kept(make_location):
    groups = group_locations([make_location("QLA", "CITY", name="LAUSANNE")])

    assert _codes(groups) == [("QLA", [])]


def test_unknown_sub_types_are_ignored(make_location):
    raw = [
        make_location("XYZ", "POINT_OF_INTEREST"),
        make_location("MAD", "AIRPORT", city_code="MAD"),
    ]

    assert _codes(group_locations(raw)) == [("MAD", ["MAD"])]


def test_group_invariants_hold(new_york_locations, make_location):
    raw = [
        *new_york_locations,
        make_location("LCY", "AIRPORT", city_code="LON"),
        make_location("LON", "CITY"),
        make_location("LHR", "AIRPORT", city_code="LON"),
    ]

    groups = group_locations(raw)
    city_codes = [g.city.iata_code for g in groups]

    assert len(city_codes) == len(set(city_codes))
    by_code = {loc["iataCode"]: loc for loc in raw if loc["subType"] == "AIRPORT"}
    for group in groups:
        for airport in group.airports:
            assert by_code[airport.iata_code]["address"]["cityCode"] == group.city.iata_code
            assert airport.sub_type == LocationSubType.AIRPORT


def test_grouping_is_deterministic(new_york_locations):
    assert group_locations(new_york_locations) == group_locations(new_york_locations)


def test_empty_input():
    assert group_locations([]) == []


def test_to_suggestion_falls_back_to_name_and_empty_country():
    suggestion = to_suggestion(
        {"iataCode": "ZRH", "name": "ZURICH", "subType": "AIRPORT"},
        LocationSubType.AIRPORT,
    )

    assert suggestion.city_name == "ZURICH"
    assert suggestion.country_code == ""
    assert suggestion.lat is None
    assert not suggestion.has_coordinates


def test_suggestions_serialise_with_camel_case_keys(new_york_locations):
    payload = group_locations(new_york_locations)[0].model_dump(mode="json", by_alias=True)

    assert payload["city"]["iataCode"] == "NYC"
    assert payload["city"]["subType"] == "CITY"
    assert [a["iataCode"] for a in payload["airports"]] == ["JFK", "EWR"]
    assert payload["airports"][0]["cityName"] == "NEW YORK"
