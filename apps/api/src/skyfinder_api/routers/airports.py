"""Airport autocomplete router."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from skyfinder_core.schemas import AirportGroup

from ..dependencies import get_airport_service
from ..schemas.common import ErrorResponse
from ..services.airport_service import AirportService

router = APIRouter(prefix="/airports", tags=["airports"])

AirportServiceDep = Annotated[AirportService, Depends(get_airport_service)]


@router.get(
    "",
    response_model=list[AirportGroup],
    responses={500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def search_airports(
    service: AirportServiceDep,
    q: Annotated[str, Query()] = "",
) -> list[AirportGroup]:
    """City → airports suggestions for a keyword (fewer than 2 chars → ``[]``)."""
    return await service.suggest(q)
