"""
Overpass API client for road attribute and settlement lookups.
"""

import logging
from typing import Any, Dict, List, Sequence

from .base import ServiceClient
from ..data.models import GeoPoint
from ..exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


def _around(point: GeoPoint) -> str:
    return f"{round(point.lat, 4)},{round(point.lng, 4)}"


def build_road_query(points: Sequence[GeoPoint], radius_m: int) -> str:
    """Batched query for highway ways within `radius_m` of each point, tags only."""
    parts = "".join(f'way(around:{radius_m},{_around(p)})["highway"];' for p in points)
    return f"[out:json][timeout:15];({parts});out tags;"


def build_settlement_query(points: Sequence[GeoPoint], radius_m: int) -> str:
    """Batched query for city and town nodes within `radius_m` of each point."""
    parts = "".join(f'node["place"~"city|town"](around:{radius_m},{_around(p)});' for p in points)
    return f"[out:json][timeout:15];({parts});out body;"


class OverpassClient(ServiceClient):
    """Runs Overpass QL queries and returns the raw `elements` list."""

    service_name = "overpass"

    async def query(self, ql: str) -> List[Dict[str, Any]]:
        """
        Execute a query.

        Raises:
            ExternalServiceError: On transport failure, non-2xx status or a
                payload without an `elements` list
        """
        payload = await self._request_json("POST", self.config.overpass_url, data={"data": ql})
        if not isinstance(payload, dict):
            raise ExternalServiceError(self.service_name, "payload is not a JSON object")
        elements = payload.get("elements", [])
        if not isinstance(elements, list):
            raise ExternalServiceError(self.service_name, "'elements' is not a list")
        return elements

    async def fetch_road_segments(self, points: Sequence[GeoPoint], radius_m: int) -> List[Dict[str, Any]]:
        return await self.query(build_road_query(points, radius_m))

    async def fetch_settlements(self, points: Sequence[GeoPoint], radius_m: int) -> List[Dict[str, Any]]:
        return await self.query(build_settlement_query(points, radius_m))
