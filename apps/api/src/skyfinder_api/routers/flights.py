"""Flight search router."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_flight_service
from ..schemas.common import ErrorResponse
from ..services.flight_service import FlightService, parse_sort_key

router = APIRouter(prefix="/flights", tags=["flights"])

FlightServiceDep = Annotated[FlightService, Depends(get_flight_service)]

OptionalStr = str | None


@router.get(
    "",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def search_flights(
    service: FlightServiceDep,
    origin: Annotated[OptionalStr, Query()] = None,
    destination: Annotated[OptionalStr, Query()] = None,
    departure_date: Annotated[OptionalStr, Query(alias="departureDate")] = None,
    return_date: Annotated[OptionalStr, Query(alias="returnDate")] = None,
    adults: Annotated[OptionalStr, Query()] = None,
    travel_class: Annotated[OptionalStr, Query(alias="travelClass")] = None,
    non_stop: Annotated[OptionalStr, Query(alias="nonStop")] = None,
    currency: Annotated[OptionalStr, Query()] = None,
    sort: Annotated[OptionalStr, Query()] = None,
) -> dict[str, Any]:
    """Search flight offers; the provider payload is returned as-is."""
    params = service.build_params(
        origin=origin,
        destination=destination,
        departure_date=departure_date,
        return_date=return_date,
        adults=adults,
        travel_class=travel_class,
        non_stop=non_stop,
        currency=currency,
    )
    return await service.search(params, sort=parse_sort_key(sort))
