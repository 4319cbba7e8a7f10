"""Domain layer exports."""

from ecotrip.domain.enums import AccommodationType, ActivityStyle, ScoreVariant, TransportMode
from ecotrip.domain.exceptions import (
    DomainError,
    InvalidCoordinate,
    InvalidDuration,
    InvalidTripInput,
    NonFiniteDistance,
)
from ecotrip.domain.models import (
    BreakdownItem,
    ClimateSignals,
    Coordinate,
    DestinationSignals,
    ModeComparison,
    MonthlyClimate,
    ScoreExplanation,
    TripCarbonResult,
    TripRequest,
)

__all__ = [
    "AccommodationType",
    "ActivityStyle",
    "BreakdownItem",
    "ClimateSignals",
    "Coordinate",
    "DestinationSignals",
    "DomainError",
    "InvalidCoordinate",
    "InvalidDuration",
    "InvalidTripInput",
    "ModeComparison",
    "MonthlyClimate",
    "NonFiniteDistance",
    "ScoreExplanation",
    "ScoreVariant",
    "TransportMode",
    "TripCarbonResult",
    "TripRequest",
]
