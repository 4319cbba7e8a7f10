"""Trip carbon estimation."""

from ecotrip.carbon.distance import distance_km, haversine
from ecotrip.carbon.estimator import (
    CarbonPolicy,
    compare_transport_modes,
    compute_carbon_totals,
    estimate_trip_carbon,
)

__all__ = [
    "CarbonPolicy",
    "compare_transport_modes",
    "compute_carbon_totals",
    "distance_km",
    "estimate_trip_carbon",
    "haversine",
]
