"""Monthly climate comfort and best-time-to-visit ranking."""

from __future__ import annotations

from typing import Optional

from ecotrip.domain.constants import MONTH_NAMES
from ecotrip.domain.models import MonthlyClimate
from ecotrip.scoring.rules import AdditiveScorer, banded

_MONTH_TEMPERATURE_BANDS = (
    (lambda v: 18 <= v <= 24, 20),
    (lambda v: 12 <= v <= 30, 10),
    (lambda v: v < 0 or v > 35, -20),
)
_MONTH_PRECIPITATION_BANDS = (
    (lambda v: v < 50, 10),
    (lambda v: v > 150, -10),
)

MONTH_COMFORT_SCORER: AdditiveScorer[tuple[Optional[float], Optional[float]]] = AdditiveScorer(
    base=60,
    floor=0,
    ceiling=100,
    rules=(
        banded("temperature", lambda month: month[0], _MONTH_TEMPERATURE_BANDS),
        banded("precipitation", lambda month: month[1], _MONTH_PRECIPITATION_BANDS),
    ),
)


def month_comfort_score(temp_c: Optional[float], precip_mm: Optional[float]) -> int:
    return MONTH_COMFORT_SCORER.score((temp_c, precip_mm))


def _month_rows(climate: MonthlyClimate) -> list[tuple[int, float, Optional[float]]]:
    rows: list[tuple[int, float, Optional[float]]] = []
    for idx, temp in enumerate(climate.temperatures[: len(MONTH_NAMES)]):
        if temp is None:
            continue
        precip = climate.precipitation[idx] if idx < len(climate.precipitation) else None
        rows.append((idx, temp, precip))
    return rows


def rank_travel_months(climate: MonthlyClimate, top: int = 3) -> list[str]:
    """Most comfortable months first; months without a temperature are skipped."""
    scored = [
        (month_comfort_score(temp, precip), idx)
        for idx, temp, precip in _month_rows(climate)
    ]
    scored.sort(key=lambda row: (-row[0], row[1]))
    return [MONTH_NAMES[idx] for _, idx in scored[: max(0, top)]]


def annual_mean_temperature(climate: MonthlyClimate) -> Optional[float]:
    temps = [temp for _, temp, _ in _month_rows(climate)]
    if not temps:
        return None
    return round(sum(temps) / len(temps), 1)


__all__ = [
    "MONTH_COMFORT_SCORER",
    "annual_mean_temperature",
    "month_comfort_score",
    "rank_travel_months",
]
