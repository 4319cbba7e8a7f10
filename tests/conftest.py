"""pytest global fixtures: isolate tests from the host environment."""

import pytest

from ecotrip.domain.models import Coordinate, TripRequest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop ECOTRIP_* overrides and the cached logger so each test starts fresh."""
    for name in (
        "ECOTRIP_ROUND_TRIP",
        "ECOTRIP_STRICT_VALIDATION",
        "ECOTRIP_STRUCTURED_LOGS",
        "ECOTRIP_ENABLE_DOCS",
    ):
        monkeypatch.delenv(name, raising=False)
    from ecotrip.infrastructure.logging import reset_logger

    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def paris() -> Coordinate:
    return Coordinate(latitude=48.8566, longitude=2.3522)


@pytest.fixture
def tokyo() -> Coordinate:
    return Coordinate(latitude=35.6762, longitude=139.6503)


@pytest.fixture
def paris_tokyo(paris, tokyo) -> TripRequest:
    return TripRequest(
        origin=paris,
        destination=tokyo,
        transport_mode="flight_long",
        days=7,
        accommodation_type="hotel_standard",
        activity_styles=["food_local"],
    )
