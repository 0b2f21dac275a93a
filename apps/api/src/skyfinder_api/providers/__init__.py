"""Upstream travel-data providers."""

from .amadeus_client import AmadeusClient

__all__ = ["AmadeusClient"]
