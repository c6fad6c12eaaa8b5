"""
Route enrichment: waypoint cities, weather and the per-route pipeline.
"""

from .city_finder import CityFinder
from .weather_aggregator import WeatherAggregator
from .route_enrichment import RouteEnrichmentPipeline, build_route_id, classify_road_type

__all__ = [
    'CityFinder',
    'WeatherAggregator',
    'RouteEnrichmentPipeline',
    'build_route_id',
    'classify_road_type'
]
