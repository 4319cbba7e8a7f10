"""Trip carbon footprint and destination sustainability engine."""

from ecotrip.carbon.estimator import CarbonPolicy, compare_transport_modes, estimate_trip_carbon
from ecotrip.scoring.sustainability import score_destination_sustainability

__version__ = "1.0.0"

__all__ = [
    "CarbonPolicy",
    "compare_transport_modes",
    "estimate_trip_carbon",
    "score_destination_sustainability",
]
