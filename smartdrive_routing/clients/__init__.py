"""
Thin async clients for the external services the pipeline consumes.
"""

from .base import ServiceClient, create_http_client
from .overpass_client import OverpassClient, build_road_query, build_settlement_query
from .weather_client import WeatherClient, WMO_CODES, describe_weather_code
from .directions_client import DirectionsClient
from .geocoding_client import GeocodingClient, GeocodedPlace

__all__ = [
    'ServiceClient',
    'create_http_client',
    'OverpassClient',
    'build_road_query',
    'build_settlement_query',
    'WeatherClient',
    'WMO_CODES',
    'describe_weather_code',
    'DirectionsClient',
    'GeocodingClient',
    'GeocodedPlace'
]
