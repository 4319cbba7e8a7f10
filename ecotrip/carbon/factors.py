"""Emission factor tables and tag resolution.

Transport factors are kg CO2 per passenger-km (DEFRA, ICAO and EEA figures),
accommodation factors are kg CO2 per night and activity factors kg CO2 per
day. Unknown tags resolve to a documented default instead of failing:
``car_solo`` for transport, ``hotel_standard`` for lodging and
``food_local`` for activities.
"""

from __future__ import annotations

from typing import NamedTuple, TypeVar

from ecotrip.domain.constants import FLIGHT_MEDIUM_MAX_KM, FLIGHT_SHORT_MAX_KM
from ecotrip.domain.enums import AccommodationType, ActivityStyle, TransportMode

TRANSPORT_FACTORS: dict[TransportMode, float] = {
    TransportMode.FLIGHT_SHORT: 0.255,
    TransportMode.FLIGHT_MEDIUM: 0.195,
    TransportMode.FLIGHT_LONG: 0.150,
    TransportMode.TRAIN: 0.041,
    TransportMode.BUS: 0.089,
    TransportMode.CAR_SOLO: 0.171,
    TransportMode.CAR_SHARED: 0.085,
    TransportMode.ELECTRIC_CAR: 0.053,
    TransportMode.FERRY: 0.115,
    TransportMode.BICYCLE: 0.0,
    TransportMode.WALKING: 0.0,
}

ACCOMMODATION_FACTORS: dict[AccommodationType, float] = {
    AccommodationType.HOTEL_LUXURY: 30.2,
    AccommodationType.HOTEL_STANDARD: 17.4,
    AccommodationType.HOTEL_BUDGET: 10.2,
    AccommodationType.HOSTEL: 5.8,
    AccommodationType.AIRBNB: 8.1,
    AccommodationType.CAMPING: 2.3,
    AccommodationType.ECO_LODGE: 4.5,
}

ACTIVITY_FACTORS: dict[ActivityStyle, float] = {
    ActivityStyle.FOOD_LOCAL: 5.2,
    ActivityStyle.FOOD_TOURIST: 8.7,
    ActivityStyle.FOOD_VEGAN: 3.1,
    ActivityStyle.SIGHTSEEING: 2.0,
    ActivityStyle.ADVENTURE_SPORT: 4.5,
    ActivityStyle.SHOPPING: 3.2,
}

DEFAULT_TRANSPORT_MODE = TransportMode.CAR_SOLO
DEFAULT_ACCOMMODATION = AccommodationType.HOTEL_STANDARD
DEFAULT_ACTIVITY = ActivityStyle.FOOD_LOCAL

_E = TypeVar("_E", TransportMode, AccommodationType, ActivityStyle)


class Resolved(NamedTuple):
    value: TransportMode | AccommodationType | ActivityStyle
    fallback: bool


def _normalize_tag(raw: object) -> str:
    text = str(getattr(raw, "value", raw) or "").strip().lower()
    return text.replace("-", "_").replace(" ", "_")


def _resolve(raw: object, enum_cls: type[_E], default: _E) -> Resolved:
    key = _normalize_tag(raw)
    try:
        return Resolved(enum_cls(key), False)
    except ValueError:
        return Resolved(default, True)


def resolve_transport_mode(raw: object) -> Resolved:
    return _resolve(raw, TransportMode, DEFAULT_TRANSPORT_MODE)


def resolve_accommodation(raw: object) -> Resolved:
    return _resolve(raw, AccommodationType, DEFAULT_ACCOMMODATION)


def resolve_activity(raw: object) -> Resolved:
    return _resolve(raw, ActivityStyle, DEFAULT_ACTIVITY)


def flight_band(one_way_km: float) -> TransportMode:
    if one_way_km < FLIGHT_SHORT_MAX_KM:
        return TransportMode.FLIGHT_SHORT
    if one_way_km <= FLIGHT_MEDIUM_MAX_KM:
        return TransportMode.FLIGHT_MEDIUM
    return TransportMode.FLIGHT_LONG


def concrete_mode(mode: TransportMode, one_way_km: float) -> TransportMode:
    """Replace the generic ``flight`` tag with its distance band.

    An explicitly banded flight is kept as chosen.
    """
    if mode is TransportMode.FLIGHT:
        return flight_band(one_way_km)
    return mode


def transport_factor(mode: TransportMode) -> float:
    if mode is TransportMode.FLIGHT:
        raise ValueError("generic flight must be banded before lookup")
    return TRANSPORT_FACTORS[mode]


def accommodation_factor(kind: AccommodationType) -> float:
    return ACCOMMODATION_FACTORS[kind]


def activity_factor(style: ActivityStyle) -> float:
    return ACTIVITY_FACTORS[style]


__all__ = [
    "ACCOMMODATION_FACTORS",
    "ACTIVITY_FACTORS",
    "DEFAULT_ACCOMMODATION",
    "DEFAULT_ACTIVITY",
    "DEFAULT_TRANSPORT_MODE",
    "TRANSPORT_FACTORS",
    "Resolved",
    "accommodation_factor",
    "activity_factor",
    "concrete_mode",
    "flight_band",
    "resolve_accommodation",
    "resolve_activity",
    "resolve_transport_mode",
    "transport_factor",
]
