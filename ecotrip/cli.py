"""ecotrip command-line entry point."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from ecotrip.carbon.estimator import CarbonPolicy, compare_transport_modes, estimate_trip_carbon
from ecotrip.config.settings import resolve_engine_settings
from ecotrip.domain.enums import AccommodationType, ActivityStyle, TransportMode
from ecotrip.domain.exceptions import DomainError
from ecotrip.domain.models import (
    Coordinate,
    DestinationSignals,
    ModeComparison,
    TripCarbonResult,
    TripRequest,
)
from ecotrip.scoring.sustainability import explain_destination_sustainability


def _coordinate(text: str) -> Coordinate:
    try:
        lat_text, lng_text = text.split(",", 1)
        return Coordinate(latitude=float(lat_text), longitude=float(lng_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected LAT,LNG, got {text!r}") from exc


def _add_trip_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--from", dest="origin", type=_coordinate, required=True, help="Origin LAT,LNG")
    parser.add_argument("--to", dest="destination", type=_coordinate, required=True, help="Destination LAT,LNG")
    parser.add_argument("--mode", default=TransportMode.FLIGHT.value, help="Transport mode tag")
    parser.add_argument("--days", type=int, default=7, help="Trip length in days")
    parser.add_argument("--stay", default=AccommodationType.HOTEL_STANDARD.value, help="Accommodation tag")
    parser.add_argument(
        "--activity",
        action="append",
        dest="activities",
        help="Food/activity style tag (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Print the JSON wire model")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ecotrip", description="Trip carbon footprint and destination scoring")
    sub = parser.add_subparsers(dest="command", required=True)

    estimate = sub.add_parser("estimate", help="Estimate the carbon footprint of a trip")
    _add_trip_arguments(estimate)

    compare = sub.add_parser("compare", help="Compare transport alternatives for a trip")
    _add_trip_arguments(compare)
    compare.add_argument("--candidate", action="append", dest="candidates", help="Mode to compare (repeatable)")

    score = sub.add_parser("score", help="Score destination sustainability")
    score.add_argument("--density", type=float, default=None, help="Tourism POIs per km2")
    score.add_argument("--population", type=int, default=None)
    score.add_argument("--transit", action="store_true", help="Destination has public transit")
    score.add_argument("--green", type=float, default=None, help="Green space ratio 0-1")
    score.add_argument("--json", action="store_true", help="Print the JSON wire model")
    return parser


def _trip_request(args: argparse.Namespace) -> TripRequest:
    return TripRequest(
        origin=args.origin,
        destination=args.destination,
        transport_mode=args.mode,
        days=args.days,
        accommodation_type=args.stay,
        activity_styles=args.activities or [ActivityStyle.FOOD_LOCAL.value],
    )


def format_estimate(result: TripCarbonResult) -> str:
    trip = "round trip" if result.round_trip else "one way"
    lines = [
        f"Distance: {result.distance_km} km one way ({trip}, {result.transport_mode.value})",
        f"Total: {result.total_carbon_kg:.1f} kg CO2 ({result.total_tonnes:.2f} t)",
        "-" * 50,
    ]
    for item in result.breakdown:
        lines.append(f"  {item.label:<20} {item.value_kg:>10.1f} kg  {item.percent_of_total:>3d}%")
    lines.append("-" * 50)
    lines.append(f"Trees to offset for one year: {result.trees_to_offset}")
    if result.fallbacks:
        lines.append(f"Defaults used: {'; '.join(result.fallbacks)}")
    return "\n".join(lines)


def format_comparison(rows: list[ModeComparison]) -> str:
    lines = [f"{'Mode':<16}{'Transport kg':>14}{'Total kg':>12}{'Saving kg':>12}"]
    for row in rows:
        marker = " *" if row.is_requested else ""
        lines.append(
            f"{row.transport_mode.value:<16}{row.transport_carbon_kg:>14.1f}"
            f"{row.total_carbon_kg:>12.1f}{row.saving_kg:>12.1f}{marker}"
        )
    return "\n".join(lines)


def _dump(payload) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    policy = CarbonPolicy.from_settings(resolve_engine_settings())

    try:
        if args.command == "estimate":
            result = estimate_trip_carbon(_trip_request(args), policy)
            print(_dump(result.model_dump(mode="json", by_alias=True)) if args.json else format_estimate(result))
        elif args.command == "compare":
            rows = compare_transport_modes(_trip_request(args), args.candidates, policy)
            if args.json:
                print(_dump([row.model_dump(mode="json", by_alias=True) for row in rows]))
            else:
                print(format_comparison(rows))
        else:
            signals = DestinationSignals(
                tourism_density=args.density,
                population=args.population,
                has_public_transit=args.transit,
                green_space_ratio=args.green,
            )
            explanation = explain_destination_sustainability(signals)
            if args.json:
                print(_dump(explanation.model_dump(mode="json", by_alias=True)))
            else:
                print(f"Sustainability score (estimate): {explanation.score}/100")
    except DomainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
