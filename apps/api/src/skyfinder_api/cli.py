"""CLI for querying the provider and running the API locally."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import click

from skyfinder_core.cache import SuggestionCache
from skyfinder_core.formatting import (
    day_diff,
    format_date,
    format_duration,
    format_price,
    format_time,
    offer_count,
)
from skyfinder_core.schemas import SortKey, TravelClass

from .config import settings
from .errors import SkyfinderError
from .logging_setup import configure_logging
from .providers import AmadeusClient
from .services.airport_service import AirportService
from .services.flight_service import FlightService


def _run(coro: Any) -> Any:
    try:
        return asyncio.run(coro)
    except SkyfinderError as exc:
        raise click.ClickException(exc.message) from exc


def _print_groups(groups: list) -> None:  # type: ignore[type-arg]
    if not groups:
        click.echo("No airports found.")
        return
    for group in groups:
        city = group.city
        click.echo(f"{city.iata_code}  {city.city_name}, {city.country_code}")
        for ap in group.airports:
            click.echo(f"    {ap.iata_code}  {ap.name}")


def _leg_line(itin: dict[str, Any], carriers: dict[str, str]) -> str:
    # Missing or malformed fields print as "?".
    segments = itin["segments"]
    first, last = segments[0], segments[-1]
    dep = first.get("departure") or {}
    arr = last.get("arrival") or {}
    dep_at = str(dep.get("at") or "")
    arr_at = str(arr.get("at") or "")

    try:
        date = format_date(dep_at)
    except ValueError:
        date = "?"
    try:
        days = day_diff(dep_at, arr_at)
    except ValueError:
        days = 0
    plus = f" +{days}" if days > 0 else ""
    code = first.get("carrierCode") or ""
    carrier = carriers.get(code, code) or "?"
    stops = len(segments) - 1
    return (
        f"     {date} {dep.get('iataCode', '?')} {format_time(dep_at) or '?'}"
        f" -> {arr.get('iataCode', '?')} {format_time(arr_at) or '?'}{plus}"
        f" | {format_duration(itin.get('duration') or '?')}"
        f" | {'nonstop' if stops == 0 else f'{stops} stop(s)'} | {carrier}"
    )


def _print_offers(payload: dict[str, Any]) -> None:
    offers = payload.get("data") or []
    carriers = (payload.get("dictionaries") or {}).get("carriers") or {}
    count = offer_count(payload)
    click.echo(f"\n{count} flight{'s' if count != 1 else ''} found\n")
    for i, offer in enumerate(offers, 1):
        price = offer.get("price") or {}
        click.echo(
            f"  {i}. {format_price(price.get('grandTotal', '?'), price.get('currency') or 'USD')}"
        )
        for itin in offer.get("itineraries") or []:
            if itin.get("segments"):
                click.echo(_leg_line(itin, carriers))


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from settings)")
def cli(log_level: str | None) -> None:
    """Skyfinder flight search CLI."""
    configure_logging(log_level or settings.log_level)


@cli.command("airports")
@click.argument("keyword")
@click.option("--json-output", is_flag=True, help="Output as JSON")
def airports(keyword: str, json_output: bool) -> None:
    """Grouped airport suggestions for KEYWORD."""
    service = AirportService(AmadeusClient(settings), SuggestionCache())
    groups = _run(service.suggest(keyword))
    if json_output:
        click.echo(
            json.dumps(
                [g.model_dump(mode="json", by_alias=True) for g in groups], indent=2
            )
        )
    else:
        _print_groups(groups)


@cli.command("flights")
@click.argument("origin")
@click.argument("destination")
@click.argument("departure_date")
@click.option("--return-date", default=None, help="Return date (YYYY-MM-DD)")
@click.option("--adults", default=1, show_default=True, type=click.IntRange(1, 9))
@click.option(
    "--cabin",
    default=TravelClass.ECONOMY.value,
    show_default=True,
    type=click.Choice([c.value for c in TravelClass], case_sensitive=False),
)
@click.option("--non-stop", is_flag=True, help="Only non-stop flights")
@click.option("--currency", default=None, help="ISO currency code")
@click.option(
    "--sort",
    "sort_key",
    default=SortKey.PRICE.value,
    show_default=True,
    type=click.Choice([k.value for k in SortKey], case_sensitive=False),
)
@click.option("--json-output", is_flag=True, help="Output as JSON")
def flights(
    origin: str,
    destination: str,
    departure_date: str,
    return_date: str | None,
    adults: int,
    cabin: str,
    non_stop: bool,
    currency: str | None,
    sort_key: str,
    json_output: bool,
) -> None:
    """Search flight offers from ORIGIN to DESTINATION on DEPARTURE_DATE."""
    service = FlightService(AmadeusClient(settings), settings)
    try:
        params = service.build_params(
            origin=origin,
            destination=destination,
            departure_date=departure_date,
            return_date=return_date,
            adults=str(adults),
            travel_class=cabin,
            non_stop="true" if non_stop else "false",
            currency=currency,
        )
    except SkyfinderError as exc:
        raise click.BadParameter(exc.message) from exc

    payload = _run(service.search(params, sort=SortKey(sort_key)))
    if json_output:
        click.echo(json.dumps(payload, indent=2))
    else:
        _print_offers(payload)


@cli.command("serve")
@click.option("--host", default=None, help="Bind address")
@click.option("--port", default=None, type=int, help="Bind port")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "skyfinder_api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    cli()
