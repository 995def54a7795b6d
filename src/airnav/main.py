"""AirNav - airport ground and approach navigation from the command line.

Typical usage:
    python -m airnav.main airports
    python -m airnav.main approach LSIA 03
    python -m airnav.main taxi LSIA --from -1150 -3100 14 --runway 03
    python -m airnav.main taxi LSIA --from -1336 -2434 14 --parking "Terminal Gate A1"
    python -m airnav.main nearest 1700 3250 41
"""

import argparse
import logging
import sys
from pathlib import Path

from airnav.airports.catalog import build_default_airports
from airnav.airports.database import AirportDatabase
from airnav.airports.pathfinding import route_length
from airnav.core.config import ConfigLoader, NavigationConfig
from airnav.core.logging_system import get_logger, initialize_logging, set_console_level
from airnav.navigation.announcements import (
    describe_nearest_airport,
    describe_nearest_runway,
    describe_runway,
    format_distance,
)
from airnav.physics.vectors import Vector3

logger = logging.getLogger(__name__)

DEFAULT_LOG_CONFIG = Path(__file__).resolve().parents[2] / "config" / "logging.yaml"


def build_database(config_path: str | None) -> AirportDatabase:
    """Create the registry over the built-in catalog, with optional YAML tunables."""
    config = NavigationConfig()
    if config_path:
        config = NavigationConfig.from_loader(ConfigLoader.load(config_path))
    return AirportDatabase(build_default_airports(config.glideslope_angle_deg), config)


def cmd_airports(db: AirportDatabase, _args: argparse.Namespace) -> int:
    for airport in db.get_all_airports():
        print(
            f"{airport.code:5} {airport.name}: {len(airport.runways)} runways, "
            f"{len(airport.parking_positions)} parking positions, "
            f"{len(airport.taxiways)} taxiway segments"
        )
    return 0


def cmd_approach(db: AirportDatabase, args: argparse.Namespace) -> int:
    airport = db.get_airport(args.airport)
    if airport is None:
        print(f"Unknown airport: {args.airport}")
        return 1

    runway = airport.get_runway(args.runway)
    if runway is None or runway.approach is None:
        print(f"No approach for runway {args.runway} at {airport.code}")
        return 1

    procedure = runway.approach
    print(f"{procedure.name} - {describe_runway(runway)}")
    for waypoint in procedure.waypoints:
        distance = waypoint.distance_from(runway.threshold)
        print(
            f"  {waypoint.name:4} {waypoint.position}  {waypoint.altitude_agl:6.0f} m AGL  "
            f"{waypoint.target_speed_kts:5.0f} kt  {format_distance(distance)}"
        )
    return 0


def cmd_taxi(db: AirportDatabase, args: argparse.Namespace) -> int:
    airport = db.get_airport(args.airport)
    if airport is None:
        print(f"Unknown airport: {args.airport}")
        return 1

    start = Vector3(*args.start)
    if args.runway:
        runway = airport.get_runway(args.runway)
        if runway is None:
            print(f"Unknown runway {args.runway} at {airport.code}")
            return 1
        route = db.get_taxi_route_to_runway(airport, start, runway)
        target = f"runway {runway.ident}"
    else:
        parking = airport.get_parking(args.parking)
        if parking is None:
            print(f"Unknown parking position {args.parking} at {airport.code}")
            return 1
        route = db.get_taxi_route_to_parking(airport, start, parking)
        target = parking.name

    if not route:
        print("No taxi route available")
        return 1

    print(f"Taxi to {target}: {len(route)} points, {format_distance(route_length([start, *route]))}")
    for point in route:
        print(f"  {point}")
    return 0


def cmd_nearest(db: AirportDatabase, args: argparse.Namespace) -> int:
    position = Vector3(*args.position)
    print(describe_nearest_airport(db, position))
    print(describe_nearest_runway(db, position))
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="AirNav - airport ground and approach navigation")
    parser.add_argument("--config", type=str, help="Navigation YAML configuration file")
    parser.add_argument(
        "--log-config",
        type=str,
        help="Logging YAML configuration file (default: config/logging.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    airports = subparsers.add_parser("airports", help="List catalog airports")
    airports.set_defaults(handler=cmd_airports)

    approach = subparsers.add_parser("approach", help="Show the approach to a runway")
    approach.add_argument("airport", help="Airport code (e.g., LSIA)")
    approach.add_argument("runway", help="Runway (e.g., 03)")
    approach.set_defaults(handler=cmd_approach)

    taxi = subparsers.add_parser("taxi", help="Compute a taxi route")
    taxi.add_argument("airport", help="Airport code (e.g., LSIA)")
    taxi.add_argument(
        "--from", dest="start", type=float, nargs=3, required=True, metavar=("X", "Y", "Z")
    )
    target = taxi.add_mutually_exclusive_group(required=True)
    target.add_argument("--runway", type=str, help="Target runway")
    target.add_argument("--parking", type=str, help="Target parking position name")
    taxi.set_defaults(handler=cmd_taxi)

    nearest = subparsers.add_parser("nearest", help="Nearest airport and runway to a point")
    nearest.add_argument("position", type=float, nargs=3, metavar=("X", "Y", "Z"))
    nearest.set_defaults(handler=cmd_nearest)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)
    try:
        log_config = args.log_config
        if log_config is None and DEFAULT_LOG_CONFIG.exists():
            log_config = DEFAULT_LOG_CONFIG
        initialize_logging(log_config, use_platform_dir=True)
        set_console_level(args.log_level)
        db = build_database(args.config)
        get_logger("airnav.cli").info("Running command: %s", args.command)
        return args.handler(db, args)
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception("Fatal error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
