"""Trip carbon aggregation: transport, lodging and daily activities."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ecotrip.carbon import factors
from ecotrip.carbon.distance import distance_km
from ecotrip.config.settings import EngineSettings
from ecotrip.domain.constants import BREAKDOWN_COLORS, TREE_ABSORPTION_KG_PER_YEAR
from ecotrip.domain.enums import AccommodationType, ActivityStyle, TransportMode
from ecotrip.domain.exceptions import InvalidCoordinate, InvalidDuration, NonFiniteDistance
from ecotrip.domain.models import BreakdownItem, ModeComparison, TripCarbonResult, TripRequest
from ecotrip.infrastructure.logging import StructuredLogger, get_logger

COMPARISON_MODES: tuple[TransportMode, ...] = (
    TransportMode.FLIGHT,
    TransportMode.TRAIN,
    TransportMode.BUS,
    TransportMode.CAR_SOLO,
    TransportMode.CAR_SHARED,
    TransportMode.ELECTRIC_CAR,
    TransportMode.FERRY,
    TransportMode.BICYCLE,
    TransportMode.WALKING,
)


@dataclass(frozen=True)
class CarbonPolicy:
    round_trip: bool = True
    strict: bool = False

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "CarbonPolicy":
        return cls(round_trip=settings.round_trip, strict=settings.strict_validation)


@dataclass(frozen=True)
class Fallback:
    field: str
    raw: str
    substitute: str

    def describe(self) -> str:
        return f"{self.field}: {self.raw!r} -> {self.substitute}"


@dataclass(frozen=True)
class CarbonTotals:
    """Full-precision intermediate; ``total_kg`` is exactly the category sum."""

    one_way_km: float
    travelled_km: float
    transport_mode: TransportMode
    accommodation_type: AccommodationType
    activity_styles: tuple[ActivityStyle, ...]
    transport_kg: float
    accommodation_kg: float
    activity_kg: float
    round_trip: bool
    fallbacks: tuple[Fallback, ...] = field(default_factory=tuple)

    @property
    def total_kg(self) -> float:
        return self.transport_kg + self.accommodation_kg + self.activity_kg


def _round_half_up(value: float) -> int:
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _percent(part: float, total: float) -> int:
    if total <= 0:
        return 0
    return _round_half_up(part / total * 100)


def _check_request(request: TripRequest) -> None:
    for name, point in (("origin", request.origin), ("destination", request.destination)):
        if not -90.0 <= point.latitude <= 90.0:
            raise InvalidCoordinate(f"{name}.latitude", point.latitude)
        if not -180.0 <= point.longitude <= 180.0:
            raise InvalidCoordinate(f"{name}.longitude", point.longitude)
    if request.days < 1:
        raise InvalidDuration(request.days)


def _resolve_activities(raw_styles: list[str]) -> tuple[tuple[ActivityStyle, ...], list[Fallback]]:
    styles: list[ActivityStyle] = []
    fallbacks: list[Fallback] = []
    for raw in raw_styles or [factors.DEFAULT_ACTIVITY.value]:
        style, fell_back = factors.resolve_activity(raw)
        if fell_back:
            fallbacks.append(Fallback("activity_styles", str(raw), style.value))
        if style not in styles:
            styles.append(style)
    return tuple(styles), fallbacks


def compute_carbon_totals(
    request: TripRequest,
    policy: Optional[CarbonPolicy] = None,
) -> CarbonTotals:
    policy = policy or CarbonPolicy()
    if policy.strict:
        _check_request(request)

    one_way = distance_km(request.origin, request.destination)
    if not math.isfinite(one_way):
        raise NonFiniteDistance(f"distance between {request.origin} and {request.destination} is {one_way}")

    fallbacks: list[Fallback] = []
    mode, fell_back = factors.resolve_transport_mode(request.transport_mode)
    if fell_back:
        fallbacks.append(Fallback("transport_mode", str(request.transport_mode), mode.value))
    mode = factors.concrete_mode(mode, one_way)

    lodging, fell_back = factors.resolve_accommodation(request.accommodation_type)
    if fell_back:
        fallbacks.append(Fallback("accommodation_type", str(request.accommodation_type), lodging.value))

    styles, activity_fallbacks = _resolve_activities(request.activity_styles)
    fallbacks.extend(activity_fallbacks)

    travelled = one_way * 2 if policy.round_trip else one_way
    days = request.days
    # Sightseeing happens whatever the food style, so it is always added.
    per_day = sum(factors.activity_factor(style) for style in styles)
    per_day += factors.activity_factor(ActivityStyle.SIGHTSEEING)

    return CarbonTotals(
        one_way_km=one_way,
        travelled_km=travelled,
        transport_mode=mode,
        accommodation_type=lodging,
        activity_styles=styles,
        transport_kg=travelled * factors.transport_factor(mode),
        accommodation_kg=factors.accommodation_factor(lodging) * days,
        activity_kg=per_day * days,
        round_trip=policy.round_trip,
        fallbacks=tuple(fallbacks),
    )


def build_result(totals: CarbonTotals) -> TripCarbonResult:
    total = totals.total_kg
    rows = (
        ("Transport", totals.transport_kg, BREAKDOWN_COLORS["transport"]),
        ("Accommodation", totals.accommodation_kg, BREAKDOWN_COLORS["accommodation"]),
        ("Food & Activities", totals.activity_kg, BREAKDOWN_COLORS["activity"]),
    )
    breakdown = [
        BreakdownItem(
            label=label,
            value_kg=round(value, 1),
            percent_of_total=_percent(value, total),
            color_hint=color,
        )
        for label, value, color in rows
    ]
    return TripCarbonResult(
        distance_km=_round_half_up(totals.one_way_km),
        transport_carbon_kg=round(totals.transport_kg, 1),
        accommodation_carbon_kg=round(totals.accommodation_kg, 1),
        activity_carbon_kg=round(totals.activity_kg, 1),
        total_carbon_kg=round(total, 1),
        total_tonnes=round(total / 1000, 2),
        trees_to_offset=max(0, math.ceil(total / TREE_ABSORPTION_KG_PER_YEAR)),
        breakdown=breakdown,
        transport_mode=totals.transport_mode,
        accommodation_type=totals.accommodation_type,
        activity_styles=list(totals.activity_styles),
        round_trip=totals.round_trip,
        fallbacks=[item.describe() for item in totals.fallbacks],
    )


def _log_fallbacks(logger: StructuredLogger, totals: CarbonTotals) -> None:
    for item in totals.fallbacks:
        logger.fallback(item.field, item.raw, item.substitute)


def estimate_trip_carbon(
    request: TripRequest,
    policy: Optional[CarbonPolicy] = None,
    *,
    logger: Optional[StructuredLogger] = None,
) -> TripCarbonResult:
    log = logger or get_logger()
    log.calc_start("estimate_trip_carbon", transport_mode=request.transport_mode, days=request.days)
    try:
        totals = compute_carbon_totals(request, policy)
    except NonFiniteDistance as exc:
        log.error("estimate_trip_carbon", str(exc))
        raise
    _log_fallbacks(log, totals)
    result = build_result(totals)
    log.calc_end(
        "estimate_trip_carbon",
        distance_km=result.distance_km,
        total_carbon_kg=result.total_carbon_kg,
        fallbacks=len(result.fallbacks),
    )
    return result


def compare_transport_modes(
    request: TripRequest,
    modes: Optional[Iterable[TransportMode | str]] = None,
    policy: Optional[CarbonPolicy] = None,
    *,
    logger: Optional[StructuredLogger] = None,
) -> list[ModeComparison]:
    """Estimate the same trip under several transport modes, greenest first.

    ``saving_kg`` is measured against the requested mode, so a positive value
    means the alternative emits less.
    """
    log = logger or get_logger()
    baseline = compute_carbon_totals(request, policy)
    _log_fallbacks(log, baseline)

    candidates: list[TransportMode] = []
    for raw in list(modes) if modes is not None else list(COMPARISON_MODES):
        mode, fell_back = factors.resolve_transport_mode(raw)
        if fell_back:
            log.fallback("modes", raw, mode.value)
        if mode not in candidates:
            candidates.append(mode)

    rows: dict[TransportMode, ModeComparison] = {}
    for candidate in candidates:
        totals = compute_carbon_totals(
            request.model_copy(update={"transport_mode": candidate.value}),
            policy,
        )
        if totals.transport_mode in rows:
            continue
        rows[totals.transport_mode] = ModeComparison(
            transport_mode=totals.transport_mode,
            transport_carbon_kg=round(totals.transport_kg, 1),
            total_carbon_kg=round(totals.total_kg, 1),
            saving_kg=round(baseline.total_kg - totals.total_kg, 1),
            is_requested=totals.transport_mode is baseline.transport_mode,
        )

    if baseline.transport_mode not in rows:
        rows[baseline.transport_mode] = ModeComparison(
            transport_mode=baseline.transport_mode,
            transport_carbon_kg=round(baseline.transport_kg, 1),
            total_carbon_kg=round(baseline.total_kg, 1),
            saving_kg=0.0,
            is_requested=True,
        )

    ordered = sorted(rows.values(), key=lambda row: (row.total_carbon_kg, row.transport_mode.value))
    log.summary(calc="compare_transport_modes", candidates=len(ordered))
    return ordered


__all__ = [
    "COMPARISON_MODES",
    "CarbonPolicy",
    "CarbonTotals",
    "Fallback",
    "build_result",
    "compare_transport_modes",
    "compute_carbon_totals",
    "estimate_trip_carbon",
]
