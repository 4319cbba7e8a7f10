"""Destination sustainability heuristics.

Both variants share the additive skeleton in ``rules``: start at 60, add each
signal's adjustment once, clamp to [20, 99]. No destination reads as zero or
as a perfect 100. Scores are advisory estimates, never certified metrics.
"""

from __future__ import annotations

from ecotrip.domain.constants import SCORE_BASE, SCORE_CEILING, SCORE_FLOOR
from ecotrip.domain.enums import ScoreVariant
from ecotrip.domain.models import ClimateSignals, DestinationSignals, ScoreExplanation
from ecotrip.scoring.rules import AdditiveScorer, ScoreTrace, banded, flag

# POIs per km2; 200-500 is neutral.
_TOURISM_DENSITY_BANDS = (
    (lambda v: v < 50, 15),
    (lambda v: v < 200, 8),
    (lambda v: v > 500, -10),
)
_GREEN_SPACE_BANDS = (
    (lambda v: v > 0.3, 10),
    (lambda v: v > 0.1, 5),
)
_POPULATION_BANDS = (
    (lambda v: v < 100_000, 15),
    (lambda v: v < 1_000_000, 8),
    (lambda v: v > 5_000_000, -10),
)
_TEMPERATURE_BANDS = (
    (lambda v: 15 <= v <= 25, 10),
    (lambda v: 10 <= v <= 30, 5),
    (lambda v: v < 0 or v > 35, -10),
)

TOURISM_SCORER: AdditiveScorer[DestinationSignals] = AdditiveScorer(
    base=SCORE_BASE,
    floor=SCORE_FLOOR,
    ceiling=SCORE_CEILING,
    rules=(
        banded("tourism_density", lambda s: s.tourism_density, _TOURISM_DENSITY_BANDS),
        flag("public_transit", lambda s: s.has_public_transit, 10),
        banded("green_space", lambda s: s.green_space_ratio, _GREEN_SPACE_BANDS),
    ),
)

CLIMATE_SCORER: AdditiveScorer[ClimateSignals] = AdditiveScorer(
    base=SCORE_BASE,
    floor=SCORE_FLOOR,
    ceiling=SCORE_CEILING,
    rules=(
        banded("population", lambda s: s.population, _POPULATION_BANDS),
        banded("temperature_comfort", lambda s: s.avg_temperature_c, _TEMPERATURE_BANDS),
        flag("public_transit", lambda s: s.has_public_transit, 10),
    ),
)


def _explanation(trace: ScoreTrace, variant: ScoreVariant) -> ScoreExplanation:
    return ScoreExplanation(
        score=trace.score,
        variant=variant,
        base=trace.base,
        raw=trace.raw,
        adjustments=dict(trace.adjustments),
    )


def score_destination_sustainability(signals: DestinationSignals) -> int:
    return TOURISM_SCORER.score(signals)


def explain_destination_sustainability(signals: DestinationSignals) -> ScoreExplanation:
    return _explanation(TOURISM_SCORER.explain(signals), ScoreVariant.TOURISM)


def score_climate_sustainability(signals: ClimateSignals) -> int:
    return CLIMATE_SCORER.score(signals)


def explain_climate_sustainability(signals: ClimateSignals) -> ScoreExplanation:
    return _explanation(CLIMATE_SCORER.explain(signals), ScoreVariant.CLIMATE)


__all__ = [
    "CLIMATE_SCORER",
    "TOURISM_SCORER",
    "explain_climate_sustainability",
    "explain_destination_sustainability",
    "score_climate_sustainability",
    "score_destination_sustainability",
]
