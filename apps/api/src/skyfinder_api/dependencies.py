"""FastAPI dependency injection providers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from skyfinder_core.cache import SuggestionCache

from .config import ApiSettings
from .providers import AmadeusClient
from .services.airport_service import AirportService
from .services.flight_service import FlightService


def get_settings(request: Request) -> ApiSettings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_provider(request: Request) -> AmadeusClient:
    """The shared Amadeus client."""
    return request.app.state.provider


def get_suggestion_cache(request: Request) -> SuggestionCache:
    """The process-wide airport suggestion cache."""
    return request.app.state.suggestion_cache


SettingsDep = Annotated[ApiSettings, Depends(get_settings)]
ProviderDep = Annotated[AmadeusClient, Depends(get_provider)]
CacheDep = Annotated[SuggestionCache, Depends(get_suggestion_cache)]


def get_airport_service(provider: ProviderDep, cache: CacheDep) -> AirportService:
    return AirportService(provider, cache)


def get_flight_service(provider: ProviderDep, api_settings: SettingsDep) -> FlightService:
    return FlightService(provider, api_settings)
