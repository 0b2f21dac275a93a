"""Great-circle arc interpolation for route maps."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schemas import AirportSuggestion

DEFAULT_STEPS = 80

# Below this sin(d) the two points are treated as coincident.
_EPSILON = 1e-10


def _unit_vector(lat: float, lon: float) -> tuple[float, float, float]:
    phi = math.radians(lat)
    lam = math.radians(lon)
    return (
        math.cos(phi) * math.cos(lam),
        math.cos(phi) * math.sin(lam),
        math.sin(phi),
    )


def great_circle_points(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    steps: int = DEFAULT_STEPS,
) -> list[tuple[float, float]]:
    """Return ``steps + 1`` (lat, lon) points along the minor great-circle arc.

    Uses spherical linear interpolation between the unit vectors of the two
    coordinates. The first and last points are exactly the inputs.
    """
    if steps < 1:
        msg = f"steps must be >= 1, got {steps}"
        raise ValueError(msg)

    x1, y1, z1 = _unit_vector(lat1, lon1)
    x2, y2, z2 = _unit_vector(lat2, lon2)

    d = math.acos(max(-1.0, min(1.0, x1 * x2 + y1 * y2 + z1 * z2)))
    sin_d = math.sin(d)

    if sin_d < _EPSILON:
        return [(lat1, lon1)] * (steps + 1)

    points: list[tuple[float, float]] = [(lat1, lon1)]
    for i in range(1, steps):
        t = i / steps
        a = math.sin((1 - t) * d) / sin_d
        b = math.sin(t * d) / sin_d
        x = a * x1 + b * x2
        y = a * y1 + b * y2
        z = a * z1 + b * z2
        points.append(
            (
                math.degrees(math.atan2(z, math.hypot(x, y))),
                math.degrees(math.atan2(y, x)),
            )
        )
    points.append((lat2, lon2))
    return points


def route_arc(
    origin: AirportSuggestion,
    destination: AirportSuggestion,
    steps: int = DEFAULT_STEPS,
) -> list[tuple[float, float]] | None:
    """Arc between two suggestions, or None when either lacks coordinates."""
    if not (origin.has_coordinates and destination.has_coordinates):
        return None
    return great_circle_points(
        origin.lat,  # type: ignore[arg-type]
        origin.lon,  # type: ignore[arg-type]
        destination.lat,  # type: ignore[arg-type]
        destination.lon,  # type: ignore[arg-type]
        steps,
    )
