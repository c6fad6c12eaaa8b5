"""
OSRM directions client returning route alternatives.

This is the only place where the provider's geometry is converted to
GeoPoints; everything downstream works on RawRoute.
"""

import logging
from typing import Any, Dict, List, Optional

from .base import ServiceClient
from ..data.models import GeoPoint, RawRoute
from ..exceptions import DirectionsUnavailableError, ExternalServiceError

logger = logging.getLogger(__name__)


def format_coordinates(origin: GeoPoint, destination: GeoPoint) -> str:
    """OSRM expects 'lng,lat;lng,lat'."""
    return f"{origin.lng},{origin.lat};{destination.lng},{destination.lat}"


def parse_route(route: Dict[str, Any], start_address: str, end_address: str) -> RawRoute:
    """Normalise one OSRM route object."""
    geometry = route.get("geometry") or {}
    path = tuple(GeoPoint(lat=lat, lng=lng) for lng, lat in geometry.get("coordinates", []))
    legs = route.get("legs") or []
    summary = legs[0].get("summary", "") if legs else ""

    return RawRoute(
        path=path,
        duration_s=float(route.get("duration", 0.0)),
        distance_m=float(route.get("distance", 0.0)),
        start_address=start_address,
        end_address=end_address,
        summary=summary,
        geometry=geometry
    )


class DirectionsClient(ServiceClient):
    service_name = "osrm"

    async def fetch_alternatives(self, origin: GeoPoint, destination: GeoPoint,
                                 origin_label: Optional[str] = None,
                                 destination_label: Optional[str] = None) -> List[RawRoute]:
        """
        Fetch driving route alternatives, fastest first as ordered by OSRM.

        Args:
            origin: Start coordinate
            destination: End coordinate
            origin_label: Human-readable start, used when OSRM gives no street name
            destination_label: Human-readable end, same fallback

        Raises:
            DirectionsUnavailableError: If no route geometry can be obtained
        """
        url = f"{self.config.osrm_base_url}/route/v1/driving/{format_coordinates(origin, destination)}"
        params = {
            "alternatives": "true",
            "overview": "full",
            "geometries": "geojson",
            "steps": "false"
        }

        try:
            data = await self._request_json("GET", url, params=params)
        except ExternalServiceError as e:
            raise DirectionsUnavailableError(f"Directions provider unavailable: {e}") from e

        if not isinstance(data, dict) or data.get("code") != "Ok":
            message = data.get("message", "Unknown error") if isinstance(data, dict) else "malformed payload"
            raise DirectionsUnavailableError(f"OSRM error: {message}")

        waypoints = data.get("waypoints") or []
        start_address = (waypoints[0].get("name") if waypoints else "") or origin_label or "Start"
        end_address = (waypoints[-1].get("name") if waypoints else "") or destination_label or "End"

        try:
            routes = [parse_route(r, start_address, end_address) for r in data.get("routes", [])]
        except (AttributeError, TypeError, ValueError) as e:
            raise DirectionsUnavailableError(f"OSRM returned malformed routes: {e}") from e

        logger.info(f"Directions provider returned {len(routes)} alternatives")
        return routes
