"""Tests for GET /api/airports."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from skyfinder_api.config import ApiSettings
from skyfinder_api.main import create_app


@pytest.mark.parametrize("keyword", ["", "n", " n ", "  "])
def test_short_keyword_returns_empty_without_network(client, provider, keyword):
    resp = client.get("/api/airports", params={"q": keyword})

    assert resp.status_code == 200
    assert resp.json() == []
    assert provider.location_calls == []


def test_missing_keyword_returns_empty(client, provider):
    resp = client.get("/api/airports")

    assert resp.status_code == 200
    assert resp.json() == []
    assert provider.location_calls == []


def test_returns_grouped_suggestions(client):
    resp = client.get("/api/airports", params={"q": "new"})

    assert resp.status_code == 200
    body = resp.json()
    assert [g["city"]["iataCode"] for g in body] == ["NYC", "XXX"]
    assert [a["iataCode"] for a in body[0]["airports"]] == ["JFK", "EWR"]
    assert [a["iataCode"] for a in body[1]["airports"]] == ["LGA"]
    assert body[1]["city"]["subType"] == "CITY"
    assert body[0]["airports"][0]["subType"] == "AIRPORT"
    assert body[0]["airports"][0]["lat"] == 40.7


def test_repeat_lookups_are_served_from_cache(client, provider):
    first = client.get("/api/airports", params={"q": "new"})
    second = client.get("/api/airports", params={"q": "NEW "})

    assert first.json() == second.json()
    assert provider.location_calls == ["new"]


def test_upstream_failure_is_reported_and_not_cached(client, provider):
    provider.fail_locations = True

    resp = client.get("/api/airports", params={"q": "new"})

    assert resp.status_code == 502
    assert resp.json() == {"error": "Airport search failed"}

    provider.fail_locations = False
    retry = client.get("/api/airports", params={"q": "new"})

    assert retry.status_code == 200
    assert len(retry.json()) == 2
    assert provider.location_calls == ["new", "new"]


def test_missing_credentials_is_a_server_error():
    app = create_app(
        ApiSettings(_env_file=None, amadeus_api_key="", amadeus_api_secret="")
    )
    client = TestClient(app)

    resp = client.get("/api/airports", params={"q": "lon"})

    assert resp.status_code == 500
    assert "AMADEUS_API_KEY" in resp.json()["error"]


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"ok": True, "service": "skyfinder-api"}


def test_long_keyword_is_searched(client, provider):
    keyword = "n" * 60

    resp = client.get("/api/airports", params={"q": keyword})

    assert resp.status_code == 200
    assert resp.json() == []
    assert provider.location_calls == [keyword]
