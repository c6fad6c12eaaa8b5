"""
Open-Meteo client for point weather, either current or for a given hour of a day.
"""

import logging
from typing import Any, Dict, Optional

from .base import ServiceClient
from ..data.models import GeoPoint, WeatherPoint
from ..exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

# WMO weather interpretation codes
WMO_CODES: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail"
}


def describe_weather_code(code: int) -> str:
    return WMO_CODES.get(code, "Unknown")


def parse_hour(time: str) -> int:
    """Hour component of an 'HH:MM' string."""
    return int(time.split(':')[0])


def select_hourly_entry(hourly: Dict[str, Any], time: Optional[str]) -> int:
    """
    Index of the hourly entry to use.

    The entry whose hour matches `time` wins; with no match, or no time,
    the first entry is used.
    """
    times = hourly.get("time") or []
    if not times:
        raise ValueError("hourly forecast has no entries")
    if time:
        target_hour = parse_hour(time)
        for index, stamp in enumerate(times):
            # Open-Meteo stamps look like '2024-12-25T14:00'
            if int(stamp.split('T')[1][:2]) == target_hour:
                return index
    return 0


class WeatherClient(ServiceClient):
    service_name = "open-meteo"

    async def fetch_point(self, point: GeoPoint,
                          date: Optional[str] = None,
                          time: Optional[str] = None) -> WeatherPoint:
        """
        Fetch weather at a coordinate.

        Args:
            point: Where to look up weather
            date: 'YYYY-MM-DD' to request the hourly forecast of that day
            time: 'HH:MM' selecting the hour within the day

        Raises:
            ExternalServiceError: On any transport, status or payload problem
        """
        params: Dict[str, Any] = {"latitude": point.lat, "longitude": point.lng}
        if date:
            params.update({
                "hourly": "temperature_2m,weathercode",
                "start_date": date,
                "end_date": date,
                "timezone": "auto"
            })
        else:
            params["current_weather"] = "true"

        data = await self._request_json("GET", self.config.weather_url, params=params)

        try:
            if date:
                hourly = data["hourly"]
                index = select_hourly_entry(hourly, time)
                temperature = hourly["temperature_2m"][index]
                code = hourly["weathercode"][index]
            else:
                current = data["current_weather"]
                temperature = current["temperature"]
                code = current["weathercode"]
            code = int(code)
            return WeatherPoint(
                temperature_celsius=float(temperature),
                wmo_code=code,
                description=describe_weather_code(code)
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise ExternalServiceError(self.service_name, f"unexpected payload: {e}")
