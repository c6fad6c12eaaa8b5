"""
Data model and geometry utilities for SmartDrive routing.

This module contains:
- Core value types (points, weather, routes, profiles)
- Deterministic path sampling and fingerprinting
"""

from .models import (
    GeoPoint,
    Path,
    WeatherPoint,
    CityWaypoint,
    WaypointWeather,
    RouteWeather,
    ProfileWeights,
    DrivingProfile,
    RoadType,
    RawRoute,
    EnrichedRoute,
    RankedRoute
)
from .geo_sampler import sample_path, path_fingerprint, round_half_up
from .travel_time import validate_travel_time, validate_travel_date

__all__ = [
    'GeoPoint',
    'Path',
    'WeatherPoint',
    'CityWaypoint',
    'WaypointWeather',
    'RouteWeather',
    'ProfileWeights',
    'DrivingProfile',
    'RoadType',
    'RawRoute',
    'EnrichedRoute',
    'RankedRoute',
    'sample_path',
    'path_fingerprint',
    'round_half_up',
    'validate_travel_time',
    'validate_travel_date'
]
