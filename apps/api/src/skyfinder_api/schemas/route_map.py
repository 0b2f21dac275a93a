"""Route map schemas."""

from __future__ import annotations

from pydantic import BaseModel


class RouteArcResponse(BaseModel):
    """Great-circle arc points, or None when coordinates are missing."""

    points: list[tuple[float, float]] | None
