"""API request/response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ecotrip.domain.enums import AccommodationType, ActivityStyle, TransportMode
from ecotrip.domain.models import (
    ClimateSignals,
    Coordinate,
    DestinationSignals,
    MonthlyClimate,
    TripRequest,
)


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CoordinateIn(_ApiModel):
    latitude: float = Field(ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(ge=-180, le=180, description="Longitude in degrees")

    def to_domain(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class TripEstimateRequest(_ApiModel):
    origin: CoordinateIn
    destination: CoordinateIn
    transport_mode: str = Field(default=TransportMode.FLIGHT.value, max_length=64)
    days: int = Field(default=7, ge=1, le=365, description="Trip length in days")
    accommodation_type: str = Field(default=AccommodationType.HOTEL_STANDARD.value, max_length=64)
    activity_styles: list[str] = Field(
        default_factory=lambda: [ActivityStyle.FOOD_LOCAL.value],
        max_length=len(ActivityStyle),
    )

    def to_domain(self) -> TripRequest:
        return TripRequest(
            origin=self.origin.to_domain(),
            destination=self.destination.to_domain(),
            transport_mode=self.transport_mode,
            days=self.days,
            accommodation_type=self.accommodation_type,
            activity_styles=list(self.activity_styles),
        )


class TripCompareRequest(TripEstimateRequest):
    modes: Optional[list[str]] = Field(default=None, description="Candidate modes; all when omitted")


class DestinationSignalsIn(_ApiModel):
    tourism_density: Optional[float] = Field(default=None, ge=0, description="POIs per km2")
    population: Optional[int] = Field(default=None, ge=0)
    has_public_transit: bool = False
    green_space_ratio: Optional[float] = Field(default=None, ge=0, le=1)

    def to_domain(self) -> DestinationSignals:
        return DestinationSignals(**self.model_dump())


class ClimateSignalsIn(_ApiModel):
    population: Optional[int] = Field(default=None, ge=0)
    avg_temperature_c: Optional[float] = Field(default=None, ge=-90, le=60)
    has_public_transit: bool = False

    def to_domain(self) -> ClimateSignals:
        return ClimateSignals(**self.model_dump())


class BestMonthsRequest(_ApiModel):
    temperatures: list[Optional[float]] = Field(max_length=12)
    precipitation: list[Optional[float]] = Field(default_factory=list, max_length=12)
    top: int = Field(default=3, ge=1, le=12)

    def to_domain(self) -> MonthlyClimate:
        return MonthlyClimate(temperatures=self.temperatures, precipitation=self.precipitation)


class BestMonthsResponse(_ApiModel):
    months: list[str] = Field(default_factory=list)
    annual_mean_temperature_c: Optional[float] = None


class HealthResponse(BaseModel):
    status: str = "ok"
