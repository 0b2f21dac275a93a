"""Skyfinder HTTP API: airport suggestions and flight search over Amadeus."""
