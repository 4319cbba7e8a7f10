"""FastAPI application exposing the carbon and scoring engine."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ecotrip import __version__
from ecotrip.api.schemas import (
    BestMonthsRequest,
    BestMonthsResponse,
    ClimateSignalsIn,
    DestinationSignalsIn,
    HealthResponse,
    TripCompareRequest,
    TripEstimateRequest,
)
from ecotrip.carbon.estimator import CarbonPolicy, compare_transport_modes, estimate_trip_carbon
from ecotrip.config.settings import resolve_engine_settings
from ecotrip.domain.exceptions import DomainError
from ecotrip.domain.models import ErrorResponse, ModeComparison, ScoreExplanation, TripCarbonResult
from ecotrip.scoring.climate import annual_mean_temperature, rank_travel_months
from ecotrip.scoring.sustainability import (
    explain_climate_sustainability,
    explain_destination_sustainability,
)

_api_logger = logging.getLogger("ecotrip.api")

load_dotenv()

_settings = resolve_engine_settings()

app = FastAPI(
    title="ecotrip",
    version=__version__,
    docs_url="/docs" if _settings.enable_docs else None,
    redoc_url=None,
)


def _policy() -> CarbonPolicy:
    return CarbonPolicy.from_settings(resolve_engine_settings())


@app.exception_handler(DomainError)
async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    _api_logger.warning("%s rejected: %s", request.url.path, exc)
    body = ErrorResponse(code=exc.code, message=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.post("/carbon/estimate", response_model=TripCarbonResult)
def carbon_estimate(req: TripEstimateRequest):
    return estimate_trip_carbon(req.to_domain(), _policy())


@app.post("/carbon/compare", response_model=list[ModeComparison])
def carbon_compare(req: TripCompareRequest):
    return compare_transport_modes(req.to_domain(), req.modes, _policy())


@app.post("/sustainability/score", response_model=ScoreExplanation)
def sustainability_score(req: DestinationSignalsIn):
    return explain_destination_sustainability(req.to_domain())


@app.post("/sustainability/score/climate", response_model=ScoreExplanation)
def sustainability_score_climate(req: ClimateSignalsIn):
    return explain_climate_sustainability(req.to_domain())


@app.post("/climate/best-months", response_model=BestMonthsResponse)
def climate_best_months(req: BestMonthsRequest):
    climate = req.to_domain()
    return BestMonthsResponse(
        months=rank_travel_months(climate, top=req.top),
        annual_mean_temperature_c=annual_mean_temperature(climate),
    )
