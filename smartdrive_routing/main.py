#!/usr/bin/env python3
"""
SmartDrive Routing - Command Line Interface

Plans routes between two coordinates and prints them ranked for a profile.
"""

import argparse
import asyncio
import logging
import sys

from .config import RoutingConfig, get_available_profiles
from .data import GeoPoint, validate_travel_date, validate_travel_time
from .exceptions import DirectionsUnavailableError, SmartDriveError
from .planner import RoutePlanner


def parse_coordinates(value: str) -> GeoPoint:
    """Parse 'LAT,LNG' into a GeoPoint."""
    try:
        lat, lng = (float(part) for part in value.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected LAT,LNG but got '{value}'")
    return GeoPoint(lat, lng)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank driving routes by safety, speed or scenery")
    parser.add_argument("--origin", type=parse_coordinates, required=True, help="Start as LAT,LNG")
    parser.add_argument("--destination", type=parse_coordinates, required=True, help="End as LAT,LNG")
    parser.add_argument("--profile", default="safe", choices=list(get_available_profiles().keys()),
                        help="Driving profile (default: safe)")
    parser.add_argument("--date", help="Travel date YYYY-MM-DD for forecast weather")
    parser.add_argument("--time", help="Travel time HH:MM (default: 20:00 for ranking)")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"],
                        help="Log level")
    return parser


async def run(args: argparse.Namespace) -> int:
    config = RoutingConfig.from_env()

    async with RoutePlanner(config) as planner:
        try:
            result = await planner.plan(
                args.origin, args.destination, args.profile,
                date=validate_travel_date(args.date),
                time=validate_travel_time(args.time)
            )
        except DirectionsUnavailableError as e:
            print(f"❌ Directions unavailable: {e}")
            return 1
        except SmartDriveError as e:
            print(f"❌ {e}")
            return 1

    if not result.routes:
        print("No routes found")
        return 0

    print(f"\n🚗 Profile: {result.profile.name.replace('_', ' ')} - {result.profile.description}")
    print("=" * 60)
    for ranked in result.routes:
        route = ranked.route
        print(f"\n#{ranked.rank} {route.description} [{route.road_type.value}]")
        print(f"   ETA: {route.eta_minutes} min   Distance: {route.distance_km} km")
        print(f"   Activity: {route.activity_score}/10   Lighting: {route.lighting_score}/10")
        if route.weather:
            print(f"   Weather: {route.weather.origin.description} ({route.weather.origin.temperature_celsius:.0f}°C)"
                  f" -> {route.weather.destination.description}"
                  f" ({route.weather.destination.temperature_celsius:.0f}°C)")
            for waypoint in route.weather.waypoints:
                print(f"      via {waypoint.name}: {waypoint.weather.description}")
        print(f"   💡 {ranked.reason}")
    return 0


def main() -> int:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
