"""Route map router: great-circle arcs between two airports."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query

from skyfinder_core.geo import DEFAULT_STEPS, great_circle_points

from ..schemas.route_map import RouteArcResponse

router = APIRouter(prefix="/route-arc", tags=["map"])

OptionalFloat = float | None


@router.get("", response_model=RouteArcResponse)
async def route_arc(
    origin_lat: Annotated[OptionalFloat, Query(alias="originLat", ge=-90, le=90)] = None,
    origin_lon: Annotated[OptionalFloat, Query(alias="originLon", ge=-180, le=180)] = None,
    destination_lat: Annotated[OptionalFloat, Query(alias="destinationLat", ge=-90, le=90)] = None,
    destination_lon: Annotated[OptionalFloat, Query(alias="destinationLon", ge=-180, le=180)] = None,
    steps: Annotated[int, Query(ge=1, le=500)] = DEFAULT_STEPS,
) -> RouteArcResponse:
    """Arc points for the map; ``points`` is null when a coordinate is missing."""
    coords = (origin_lat, origin_lon, destination_lat, destination_lon)
    if any(c is None for c in coords):
        return RouteArcResponse(points=None)
    return RouteArcResponse(
        points=great_circle_points(
            origin_lat, origin_lon, destination_lat, destination_lon, steps  # type: ignore[arg-type]
        )
    )
