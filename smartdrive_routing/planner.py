"""
Search orchestration: directions -> enrichment -> ranking.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import httpx

from .algorithms.lighting.lighting_estimator import LightingEstimator
from .algorithms.ranking.ranking_engine import RankingEngine
from .clients.base import create_http_client
from .clients.directions_client import DirectionsClient
from .clients.overpass_client import OverpassClient
from .clients.weather_client import WeatherClient
from .config.driving_profiles import get_profile_from_string
from .config.routing_config import RoutingConfig
from .data.models import DrivingProfile, EnrichedRoute, GeoPoint, RankedRoute
from .enrichment.city_finder import CityFinder
from .enrichment.route_enrichment import RouteEnrichmentPipeline
from .enrichment.weather_aggregator import WeatherAggregator
from .mapping.cache.lighting_cache import LightingCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanResult:
    """Outcome of one route search."""

    profile: DrivingProfile
    travel_time: Optional[str]
    routes: List[RankedRoute] = field(default_factory=list)

    @property
    def best(self) -> Optional[RankedRoute]:
        return self.routes[0] if self.routes else None


class RoutePlanner:
    """
    Main interface for a route search.

    Owns the HTTP client shared by all external lookups; use it as an async
    context manager. The lighting cache outlives searches and may be shared
    between planners so repeated geometry is never looked up twice.

    Example:
        async with RoutePlanner() as planner:
            result = await planner.plan(origin, destination, "safe", time="21:30")
    """

    def __init__(self, config: Optional[RoutingConfig] = None,
                 lighting_cache: Optional[LightingCache] = None,
                 http_client: Optional[httpx.AsyncClient] = None):
        self.config = config or RoutingConfig()
        self.config.validate()
        self.lighting_cache = lighting_cache if lighting_cache is not None else LightingCache()

        self._owns_client = http_client is None
        self.http_client = http_client or create_http_client(self.config)

        overpass = OverpassClient(self.http_client, self.config)
        self.directions = DirectionsClient(self.http_client, self.config)
        self.pipeline = RouteEnrichmentPipeline(
            LightingEstimator(overpass, self.lighting_cache, self.config),
            WeatherAggregator(WeatherClient(self.http_client, self.config), CityFinder(overpass, self.config)),
            self.config
        )
        self.ranking = RankingEngine(self.config)

        logger.info(f"RoutePlanner initialized (OSRM: {self.config.osrm_base_url})")

    async def __aenter__(self) -> 'RoutePlanner':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def plan(self, origin: GeoPoint, destination: GeoPoint, profile_id: str,
                   date: Optional[str] = None, time: Optional[str] = None,
                   origin_label: Optional[str] = None,
                   destination_label: Optional[str] = None) -> PlanResult:
        """
        Fetch, enrich and rank route alternatives.

        Args:
            origin: Start coordinate
            destination: End coordinate
            profile_id: 'fast', 'safe' or 'scenic'
            date: Optional 'YYYY-MM-DD' travel date for forecasts
            time: Optional 'HH:MM' travel time for forecasts and day/night ranking
            origin_label: Fallback name for the start address
            destination_label: Fallback name for the end address

        Raises:
            UnknownProfileError: If the profile id is not in the catalog
            DirectionsUnavailableError: If the directions provider fails
        """
        profile = get_profile_from_string(profile_id)
        logger.info(f"Planning routes from {origin.as_tuple()} to {destination.as_tuple()} (profile: {profile.id})")

        raw_routes = await self.directions.fetch_alternatives(
            origin, destination, origin_label, destination_label
        )
        if not raw_routes:
            logger.warning("Directions provider returned no alternatives")
            return PlanResult(profile=profile, travel_time=time)

        enriched = await self.pipeline.enrich_all(raw_routes, origin, destination, date, time)
        ranked = self.ranking.rank_with_reasons(enriched, profile, time)

        logger.info(f"Planning completed: {len(ranked)} routes, cache {self.lighting_cache.get_cache_stats()}")
        return PlanResult(profile=profile, travel_time=time, routes=ranked)

    def rerank(self, routes: Sequence[EnrichedRoute], profile_id: str,
               time: Optional[str] = None) -> PlanResult:
        """Rank already enriched routes for another profile or time, without network access."""
        profile = get_profile_from_string(profile_id)
        return PlanResult(
            profile=profile,
            travel_time=time,
            routes=self.ranking.rank_with_reasons(routes, profile, time)
        )
