"""Domain enums."""

from __future__ import annotations

from enum import Enum


class TransportMode(str, Enum):
    FLIGHT = "flight"
    FLIGHT_SHORT = "flight_short"
    FLIGHT_MEDIUM = "flight_medium"
    FLIGHT_LONG = "flight_long"
    TRAIN = "train"
    BUS = "bus"
    CAR_SOLO = "car_solo"
    CAR_SHARED = "car_shared"
    ELECTRIC_CAR = "electric_car"
    FERRY = "ferry"
    BICYCLE = "bicycle"
    WALKING = "walking"

    @property
    def is_flight(self) -> bool:
        return self.value.startswith("flight")


class AccommodationType(str, Enum):
    HOTEL_LUXURY = "hotel_luxury"
    HOTEL_STANDARD = "hotel_standard"
    HOTEL_BUDGET = "hotel_budget"
    HOSTEL = "hostel"
    AIRBNB = "airbnb"
    CAMPING = "camping"
    ECO_LODGE = "eco_lodge"


class ActivityStyle(str, Enum):
    FOOD_LOCAL = "food_local"
    FOOD_TOURIST = "food_tourist"
    FOOD_VEGAN = "food_vegan"
    SIGHTSEEING = "sightseeing"
    ADVENTURE_SPORT = "adventure_sport"
    SHOPPING = "shopping"


class ScoreVariant(str, Enum):
    TOURISM = "tourism"
    CLIMATE = "climate"
