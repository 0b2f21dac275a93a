"""Core schemas for Skyfinder."""

from .enums import LocationSubType, SortKey, TravelClass
from .suggestion import AirportGroup, AirportSuggestion

__all__ = [
    "AirportGroup",
    "AirportSuggestion",
    "LocationSubType",
    "SortKey",
    "TravelClass",
]
