"""Flight search request schemas."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator, model_validator

from skyfinder_core.schemas import TravelClass


class FlightSearchParams(BaseModel):
    """Validated flight search parameters forwarded to the provider."""

    origin: str = Field(min_length=3, max_length=3, description="IATA airport or city code")
    destination: str = Field(
        min_length=3, max_length=3, description="IATA airport or city code"
    )
    departure_date: date
    return_date: date | None = None
    adults: int = Field(default=1, ge=1, le=9)
    travel_class: TravelClass = TravelClass.ECONOMY
    non_stop: bool = False
    currency: str = Field(default="USD", min_length=3, max_length=3)

    @field_validator("origin", "destination", "currency", "travel_class", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def _validate_dates(self) -> FlightSearchParams:
        if self.return_date and self.return_date < self.departure_date:
            msg = "return_date must be after departure_date"
            raise ValueError(msg)
        return self
