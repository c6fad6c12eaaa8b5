"""
Nominatim geocoding client (place name -> coordinate, coordinate -> address).
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .base import ServiceClient
from ..data.models import GeoPoint
from ..exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeocodedPlace:
    point: GeoPoint
    display_name: str


class GeocodingClient(ServiceClient):
    service_name = "nominatim"

    async def geocode(self, query: str) -> Optional[GeocodedPlace]:
        """Resolve a free-text place. Returns None when nothing is found or the lookup fails."""
        if not query or not query.strip():
            return None

        try:
            results = await self._request_json(
                "GET", f"{self.config.nominatim_url}/search",
                params={"q": query, "format": "json", "limit": 1}
            )
        except ExternalServiceError as e:
            logger.error(f"Geocoding failed for '{query}': {e}")
            return None

        if not results:
            logger.warning(f"Geocoding found no results for '{query}'")
            return None

        first = results[0]
        try:
            return GeocodedPlace(
                point=GeoPoint.from_any(first),
                display_name=first.get("display_name", query)
            )
        except (ValueError, TypeError) as e:
            logger.error(f"Geocoding returned an unusable result for '{query}': {e}")
            return None

    async def reverse(self, point: GeoPoint) -> Optional[str]:
        """Address for a coordinate, or None."""
        try:
            data = await self._request_json(
                "GET", f"{self.config.nominatim_url}/reverse",
                params={"format": "json", "lat": point.lat, "lon": point.lng,
                        "zoom": 18, "addressdetails": 1}
            )
        except ExternalServiceError as e:
            logger.error(f"Reverse geocoding failed for {point.as_tuple()}: {e}")
            return None

        if isinstance(data, dict) and data.get("display_name"):
            return data["display_name"]
        return None
