"""Shared response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for every handled failure."""

    error: str


class HealthResponse(BaseModel):
    ok: bool = True
    service: str = "skyfinder-api"
