"""
Route enrichment pipeline: raw directions alternatives -> EnrichedRoute records.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from .weather_aggregator import WeatherAggregator
from ..algorithms.lighting.lighting_estimator import LightingEstimator
from ..config.routing_config import RoutingConfig
from ..data.geo_sampler import round_half_up
from ..data.models import EnrichedRoute, GeoPoint, RawRoute, RoadType, RouteWeather

logger = logging.getLogger(__name__)


def classify_road_type(index: int, duration_s: float, fastest_duration_s: float,
                       scenic_threshold: float = 1.2) -> RoadType:
    """
    Classify an alternative by its position and relative duration.

    The first alternative is always the highway route; any other that takes
    more than `scenic_threshold` times the first one's duration is scenic.
    """
    if index == 0:
        return RoadType.HIGHWAY
    if duration_s > fastest_duration_s * scenic_threshold:
        return RoadType.SCENIC
    return RoadType.BACKROADS


def build_route_id(start_address: str, end_address: str, index: int) -> str:
    """
    Stable route id from endpoint names and ordinal.

    Independent of geometry so that refetching an unchanged route set keeps
    the ids a client may have selected.
    """
    return f"route-{start_address[:3]}-{end_address[:3]}-{index}"


class RouteEnrichmentPipeline:
    """Attaches road type, activity, lighting and weather to each route alternative."""

    def __init__(self, lighting_estimator: LightingEstimator,
                 weather_aggregator: WeatherAggregator,
                 config: Optional[RoutingConfig] = None):
        self.lighting_estimator = lighting_estimator
        self.weather_aggregator = weather_aggregator
        self.config = config or RoutingConfig()

    async def enrich(self, raw_route: RawRoute, index: int, routes: Sequence[RawRoute],
                     origin: GeoPoint, destination: GeoPoint,
                     date: Optional[str] = None,
                     time: Optional[str] = None) -> EnrichedRoute:
        """
        Enrich one alternative.

        Args:
            raw_route: The alternative to enrich
            index: Its position in the provider's response
            routes: The full provider response, used as the duration reference
            origin: Requested start coordinate
            destination: Requested end coordinate
            date: Optional travel date for forecasts
            time: Optional travel time for forecasts
        """
        fastest_duration_s = routes[0].duration_s if routes else raw_route.duration_s
        road_type = classify_road_type(
            index, raw_route.duration_s, fastest_duration_s, self.config.scenic_duration_threshold
        )

        lighting_score = self.config.lighting_default_score
        weather: Optional[RouteWeather] = None
        if raw_route.path:
            lighting_score, weather = await asyncio.gather(
                self.lighting_estimator.estimate(raw_route.path),
                self.weather_aggregator.aggregate(origin, destination, raw_route.path, date, time)
            )
        else:
            logger.warning(f"Route {index} has no geometry - skipping lighting and weather")

        enriched = EnrichedRoute(
            id=build_route_id(raw_route.start_address, raw_route.end_address, index),
            source=raw_route.start_address or 'Start',
            destination=raw_route.end_address or 'End',
            eta_minutes=round_half_up(raw_route.duration_s / 60),
            distance_km=round(raw_route.distance_m / 1000, 1),
            activity_score=self.config.activity_baselines[road_type],
            lighting_score=lighting_score,
            weather=weather,
            road_type=road_type,
            description=raw_route.summary or raw_route.start_address or 'Route',
            raw_geometry=raw_route.geometry
        )
        logger.info(f"Enriched route {enriched.id}: {enriched.get_summary()}")
        return enriched

    async def enrich_all(self, raw_routes: Sequence[RawRoute],
                         origin: GeoPoint, destination: GeoPoint,
                         date: Optional[str] = None,
                         time: Optional[str] = None) -> List[EnrichedRoute]:
        """Enrich every alternative concurrently, keeping provider order."""
        if not raw_routes:
            return []
        return list(await asyncio.gather(*[
            self.enrich(raw_route, index, raw_routes, origin, destination, date, time)
            for index, raw_route in enumerate(raw_routes)
        ]))
