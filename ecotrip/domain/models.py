"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ecotrip.domain.enums import AccommodationType, ActivityStyle, ScoreVariant, TransportMode


class _WireModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinate(_WireModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class TripRequest(_WireModel):
    """Input of the carbon estimator.

    Tags are kept as plain strings so free text coming from a form can reach
    the factor table, which substitutes documented defaults for unknown tags.
    Distance is never supplied; it is always derived from the coordinates.
    """

    origin: Coordinate
    destination: Coordinate
    transport_mode: str = TransportMode.FLIGHT.value
    days: int = 7
    accommodation_type: str = AccommodationType.HOTEL_STANDARD.value
    activity_styles: list[str] = Field(default_factory=lambda: [ActivityStyle.FOOD_LOCAL.value])


class BreakdownItem(_WireModel):
    label: str
    value_kg: float
    percent_of_total: int
    color_hint: str


class TripCarbonResult(_WireModel):
    distance_km: int
    transport_carbon_kg: float
    accommodation_carbon_kg: float
    activity_carbon_kg: float
    total_carbon_kg: float
    total_tonnes: float
    trees_to_offset: int
    breakdown: list[BreakdownItem] = Field(default_factory=list)
    transport_mode: TransportMode
    accommodation_type: AccommodationType
    activity_styles: list[ActivityStyle] = Field(default_factory=list)
    round_trip: bool = True
    fallbacks: list[str] = Field(default_factory=list)


class ModeComparison(_WireModel):
    transport_mode: TransportMode
    transport_carbon_kg: float
    total_carbon_kg: float
    saving_kg: float
    is_requested: bool = False


class DestinationSignals(_WireModel):
    tourism_density: Optional[float] = None
    population: Optional[int] = None
    has_public_transit: bool = False
    green_space_ratio: Optional[float] = None


class ClimateSignals(_WireModel):
    population: Optional[int] = None
    avg_temperature_c: Optional[float] = None
    has_public_transit: bool = False


class MonthlyClimate(_WireModel):
    """Twelve monthly means as returned by the weather collaborator."""

    temperatures: list[Optional[float]] = Field(default_factory=list)
    precipitation: list[Optional[float]] = Field(default_factory=list)


class ScoreExplanation(_WireModel):
    score: int
    variant: Optional[ScoreVariant] = None
    base: int
    raw: int
    adjustments: dict[str, int] = Field(default_factory=dict)
    estimate: bool = True


class ErrorResponse(BaseModel):
    error: bool = True
    code: str = "UNKNOWN"
    message: str = ""
    details: list[str] = Field(default_factory=list)
