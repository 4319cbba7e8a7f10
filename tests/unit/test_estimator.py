"""Trip carbon estimator tests"""

import io
import json
import math

import pytest

from ecotrip.carbon.estimator import (
    CarbonPolicy,
    compare_transport_modes,
    compute_carbon_totals,
    estimate_trip_carbon,
)
from ecotrip.domain.enums import AccommodationType, ActivityStyle, TransportMode
from ecotrip.domain.exceptions import InvalidCoordinate, InvalidDuration, NonFiniteDistance
from ecotrip.domain.models import Coordinate, TripRequest
from ecotrip.infrastructure.logging import StructuredLogger


def _quiet() -> StructuredLogger:
    return StructuredLogger(trace_id="test", output=io.StringIO())


def _trip(mode: str, days: int = 5, **kw) -> TripRequest:
    return TripRequest(
        origin=Coordinate(latitude=52.52, longitude=13.405),
        destination=Coordinate(latitude=48.1351, longitude=11.582),
        transport_mode=mode,
        days=days,
        **kw,
    )


def test_paris_tokyo_long_flight(paris_tokyo):
    result = estimate_trip_carbon(paris_tokyo, logger=_quiet())

    assert result.distance_km == pytest.approx(9714, abs=15)
    assert result.transport_carbon_kg == pytest.approx(2914.2, abs=5)
    assert result.accommodation_carbon_kg == 121.8
    assert result.activity_carbon_kg == 50.4
    assert result.total_carbon_kg == pytest.approx(3086.4, abs=5)
    assert result.total_tonnes == pytest.approx(3.09, abs=0.01)
    assert result.trees_to_offset == 141
    assert result.transport_mode is TransportMode.FLIGHT_LONG
    assert result.fallbacks == []


def test_generic_flight_is_banded_by_one_way_distance(paris_tokyo):
    generic = paris_tokyo.model_copy(update={"transport_mode": "flight"})
    result = estimate_trip_carbon(generic, logger=_quiet())
    assert result.transport_mode is TransportMode.FLIGHT_LONG

    short_hop = estimate_trip_carbon(_trip("flight"), logger=_quiet())
    assert short_hop.transport_mode is TransportMode.FLIGHT_SHORT


def test_bicycle_has_no_transport_carbon(paris_tokyo):
    bike = paris_tokyo.model_copy(update={"transport_mode": "bicycle"})
    result = estimate_trip_carbon(bike, logger=_quiet())
    assert result.transport_carbon_kg == 0.0
    assert result.total_carbon_kg == 172.2
    assert result.breakdown[0].percent_of_total == 0


def test_category_sum_is_exact(paris_tokyo):
    totals = compute_carbon_totals(paris_tokyo)
    assert totals.transport_kg + totals.accommodation_kg + totals.activity_kg == totals.total_kg


def test_percentages_near_100(paris_tokyo):
    for mode in ("flight", "train", "bicycle", "car_shared"):
        request = paris_tokyo.model_copy(update={"transport_mode": mode})
        result = estimate_trip_carbon(request, logger=_quiet())
        assert abs(sum(item.percent_of_total for item in result.breakdown) - 100) <= 2


def test_breakdown_shape(paris_tokyo):
    result = estimate_trip_carbon(paris_tokyo, logger=_quiet())
    wire = result.model_dump(by_alias=True)
    assert [row["label"] for row in wire["breakdown"]] == ["Transport", "Accommodation", "Food & Activities"]
    assert set(wire["breakdown"][0]) == {"label", "valueKg", "percentOfTotal", "colorHint"}
    assert wire["breakdown"][0]["colorHint"] == "#ef4444"
    assert "distanceKm" in wire and "treesToOffset" in wire


@pytest.mark.parametrize("trip", [_trip("placeholder", days=3), _trip("placeholder", days=14)])
def test_mode_ordering(trip):
    totals = {
        mode: compute_carbon_totals(trip.model_copy(update={"transport_mode": mode})).total_kg
        for mode in ("bicycle", "train", "car_solo", "flight_short")
    }
    assert totals["bicycle"] <= totals["train"] <= totals["car_solo"] <= totals["flight_short"]


def test_mode_ordering_holds_for_long_haul(paris_tokyo):
    totals = [
        compute_carbon_totals(paris_tokyo.model_copy(update={"transport_mode": mode})).total_kg
        for mode in ("bicycle", "train", "car_solo", "flight_short")
    ]
    assert totals == sorted(totals)


def test_activity_includes_sightseeing_baseline():
    result = estimate_trip_carbon(_trip("train", days=2, activity_styles=["food_vegan"]), logger=_quiet())
    assert result.activity_carbon_kg == pytest.approx((3.1 + 2.0) * 2)


def test_multiple_activity_styles_are_summed_once():
    request = _trip("train", days=1, activity_styles=["food_tourist", "shopping", "food_tourist"])
    result = estimate_trip_carbon(request, logger=_quiet())
    assert result.activity_styles == [ActivityStyle.FOOD_TOURIST, ActivityStyle.SHOPPING]
    assert result.activity_carbon_kg == pytest.approx(8.7 + 3.2 + 2.0)


def test_empty_activity_list_uses_default():
    result = estimate_trip_carbon(_trip("train", days=1, activity_styles=[]), logger=_quiet())
    assert result.activity_styles == [ActivityStyle.FOOD_LOCAL]
    assert result.fallbacks == []


def test_unknown_tags_fall_back_and_are_logged():
    sink = io.StringIO()
    logger = StructuredLogger(trace_id="fb", output=sink)
    request = _trip("zeppelin", accommodation_type="treehouse", activity_styles=["karaoke"])

    result = estimate_trip_carbon(request, logger=logger)

    assert result.transport_mode is TransportMode.CAR_SOLO
    assert result.accommodation_type is AccommodationType.HOTEL_STANDARD
    assert result.activity_styles == [ActivityStyle.FOOD_LOCAL]
    assert len(result.fallbacks) == 3

    events = [json.loads(line) for line in sink.getvalue().splitlines()]
    fallback_events = [e for e in events if e["event"] == "fallback"]
    assert {e["substitute"] for e in fallback_events} == {"car_solo", "hotel_standard", "food_local"}
    assert all(e["trace_id"] == "fb" for e in events)


def test_unknown_mode_matches_car_solo():
    unknown = compute_carbon_totals(_trip("teleport"))
    car = compute_carbon_totals(_trip("car_solo"))
    assert unknown.total_kg == car.total_kg


def test_one_way_policy_halves_transport(paris_tokyo):
    both = compute_carbon_totals(paris_tokyo)
    one = compute_carbon_totals(paris_tokyo, CarbonPolicy(round_trip=False))
    assert one.transport_kg == pytest.approx(both.transport_kg / 2)
    assert one.accommodation_kg == both.accommodation_kg


def test_determinism(paris_tokyo):
    first = estimate_trip_carbon(paris_tokyo, logger=_quiet())
    second = estimate_trip_carbon(paris_tokyo, logger=_quiet())
    assert first.model_dump() == second.model_dump()


def test_lenient_policy_does_not_guard_days():
    result = estimate_trip_carbon(_trip("train", days=0), logger=_quiet())
    assert result.accommodation_carbon_kg == 0.0


def test_strict_policy_rejects_bad_duration():
    with pytest.raises(InvalidDuration):
        compute_carbon_totals(_trip("train", days=0), CarbonPolicy(strict=True))


def test_strict_policy_rejects_bad_coordinate(paris):
    request = TripRequest(
        origin=paris,
        destination=Coordinate(latitude=91.0, longitude=0.0),
        transport_mode="train",
        days=2,
    )
    with pytest.raises(InvalidCoordinate) as exc_info:
        compute_carbon_totals(request, CarbonPolicy(strict=True))
    assert exc_info.value.field == "destination.latitude"


def test_nan_coordinate_is_a_hard_failure(paris):
    request = TripRequest(
        origin=paris,
        destination=Coordinate(latitude=math.nan, longitude=0.0),
        days=2,
    )
    with pytest.raises(NonFiniteDistance):
        estimate_trip_carbon(request, logger=_quiet())


def test_compare_orders_greenest_first(paris_tokyo):
    rows = compare_transport_modes(paris_tokyo, logger=_quiet())

    totals = [row.total_carbon_kg for row in rows]
    assert totals == sorted(totals)
    assert rows[0].transport_mode is TransportMode.BICYCLE
    requested = [row for row in rows if row.is_requested]
    assert len(requested) == 1
    assert requested[0].transport_mode is TransportMode.FLIGHT_LONG
    assert requested[0].saving_kg == 0.0
    train = next(row for row in rows if row.transport_mode is TransportMode.TRAIN)
    assert train.saving_kg > 0


def test_compare_with_explicit_candidates_keeps_requested_mode(paris_tokyo):
    rows = compare_transport_modes(paris_tokyo, ["train", "bus", "train"], logger=_quiet())
    modes = [row.transport_mode for row in rows]
    assert modes == [TransportMode.TRAIN, TransportMode.BUS, TransportMode.FLIGHT_LONG]
