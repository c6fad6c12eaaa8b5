"""
Concurrent weather lookups for a route's origin, destination and waypoint cities.
"""

import asyncio
import logging
from typing import Optional, Sequence

from .city_finder import CityFinder
from ..clients.weather_client import WeatherClient
from ..data.models import GeoPoint, RouteWeather, WaypointWeather, WeatherPoint

logger = logging.getLogger(__name__)


class WeatherAggregator:
    """
    Builds a RouteWeather for one route.

    Every point is looked up concurrently; a point whose lookup fails gets
    the 'Unavailable' sentinel and the others are unaffected.
    """

    def __init__(self, weather_client: WeatherClient, city_finder: Optional[CityFinder] = None):
        self.weather_client = weather_client
        self.city_finder = city_finder

    async def fetch_point_weather(self, point: GeoPoint,
                                  date: Optional[str] = None,
                                  time: Optional[str] = None) -> WeatherPoint:
        """Weather at one point, or the sentinel on any failure."""
        try:
            return await self.weather_client.fetch_point(point, date, time)
        except Exception as e:
            logger.warning(f"Failed to fetch weather for point ({point.lat}, {point.lng}): {e}")
            return WeatherPoint.unavailable()

    async def aggregate(self, origin: GeoPoint, destination: GeoPoint,
                        path: Optional[Sequence[GeoPoint]] = None,
                        date: Optional[str] = None,
                        time: Optional[str] = None) -> RouteWeather:
        """
        Weather for origin, destination and up to three cities along `path`.

        Args:
            origin: Route start
            destination: Route end
            path: Route geometry; cities are only searched when given
            date: 'YYYY-MM-DD' for a forecast, current weather otherwise
            time: 'HH:MM' selecting the forecast hour

        Returns:
            A fully populated RouteWeather; never raises
        """
        try:
            cities = []
            if path and self.city_finder is not None:
                cities = await self.city_finder.find(path)

            results = await asyncio.gather(
                self.fetch_point_weather(origin, date, time),
                self.fetch_point_weather(destination, date, time),
                *[self.fetch_point_weather(city.point, date, time) for city in cities]
            )
        except Exception as e:
            logger.error(f"Error fetching route weather: {e}")
            return RouteWeather.unavailable()

        origin_weather, destination_weather, *city_weather = results
        return RouteWeather(
            origin=origin_weather,
            destination=destination_weather,
            waypoints=tuple(
                WaypointWeather(name=city.name, weather=weather)
                for city, weather in zip(cities, city_weather)
            )
        )
