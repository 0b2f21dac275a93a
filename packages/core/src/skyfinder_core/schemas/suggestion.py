"""Airport suggestion DTOs returned by the location autocomplete."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import LocationSubType


class _CamelModel(BaseModel):
    """Immutable model serialised with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AirportSuggestion(_CamelModel):
    """One normalised location: either a city or a single airport."""

    iata_code: str = Field(description="IATA airport or city code")
    name: str
    city_name: str
    country_code: str = ""
    sub_type: LocationSubType
    lat: float | None = None
    lon: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lon is not None


class AirportGroup(_CamelModel):
    """A city header with the airports that serve it."""

    city: AirportSuggestion
    airports: tuple[AirportSuggestion, ...] = ()
