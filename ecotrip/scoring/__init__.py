"""Destination scoring heuristics."""

from ecotrip.scoring.climate import annual_mean_temperature, month_comfort_score, rank_travel_months
from ecotrip.scoring.sustainability import (
    explain_climate_sustainability,
    explain_destination_sustainability,
    score_climate_sustainability,
    score_destination_sustainability,
)

__all__ = [
    "annual_mean_temperature",
    "explain_climate_sustainability",
    "explain_destination_sustainability",
    "month_comfort_score",
    "rank_travel_months",
    "score_climate_sustainability",
    "score_destination_sustainability",
]
