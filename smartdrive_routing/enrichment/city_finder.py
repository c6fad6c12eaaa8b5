"""
Discovery of named settlements along a route.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..clients.overpass_client import OverpassClient
from ..config.routing_config import RoutingConfig
from ..data.geo_sampler import sample_path
from ..data.models import CityWaypoint, GeoPoint

logger = logging.getLogger(__name__)


def interior_samples(path: Sequence[GeoPoint], count: int) -> List[GeoPoint]:
    """Sample a path and drop the endpoints so origin and destination are not reported."""
    samples = sample_path(path, count)
    if len(samples) > 2:
        samples = samples[1:-1]
    return samples


def extract_cities(elements: Sequence[Dict[str, Any]], limit: int) -> List[CityWaypoint]:
    """
    Named places from Overpass elements, deduplicated by display name.

    The English name is preferred when tagged. Discovery order is kept.
    """
    unique: Dict[str, CityWaypoint] = {}
    for element in elements:
        tags = element.get('tags') or {}
        if not tags.get('name'):
            continue
        name = tags.get('name:en') or tags['name']
        if name in unique:
            continue
        try:
            unique[name] = CityWaypoint(name=name, lat=float(element['lat']), lng=float(element['lon']))
        except (KeyError, TypeError, ValueError):
            logger.debug(f"Skipping place '{name}' without usable coordinates")
    return list(unique.values())[:limit]


class CityFinder:
    """Finds up to three distinct towns or cities near the interior of a route."""

    def __init__(self, overpass: OverpassClient, config: Optional[RoutingConfig] = None):
        self.overpass = overpass
        self.config = config or RoutingConfig()

    async def find(self, path: Sequence[GeoPoint]) -> List[CityWaypoint]:
        """Cities along the path, or an empty list if none are found or the lookup fails."""
        if not path:
            return []

        try:
            samples = interior_samples(path, self.config.city_sample_count)
            elements = await self.overpass.fetch_settlements(samples, self.config.city_search_radius_m)
            cities = extract_cities(elements, self.config.max_waypoint_cities)
        except Exception as e:
            logger.error(f"Failed to find cities along route: {e}")
            return []

        logger.info(f"Found {len(cities)} waypoint cities: {[c.name for c in cities]}")
        return cities
