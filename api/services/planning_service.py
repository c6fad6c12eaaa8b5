"""
Service layer for the SmartDrive routing API.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import geojson

from smartdrive_routing import __version__
from smartdrive_routing.algorithms.ranking.ranking_engine import RankingEngine
from smartdrive_routing.clients.geocoding_client import GeocodingClient
from smartdrive_routing.config import RoutingConfig, get_profile_from_string, list_profiles
from smartdrive_routing.data.models import (
    DrivingProfile,
    EnrichedRoute,
    GeoPoint,
    RankedRoute,
    RoadType,
    RouteWeather,
    WaypointWeather,
    WeatherPoint
)
from smartdrive_routing.mapping.cache.lighting_cache import LightingCache
from smartdrive_routing.planner import PlanResult, RoutePlanner
from api.schemas.routing import (
    HealthResponse,
    LocationRequest,
    PlanRequest,
    PlanResponse,
    ProfileSchema,
    ProfileWeightsSchema,
    RankedRouteSchema,
    RerankRequest,
    RouteSchema,
    RouteWeatherSchema,
    WaypointWeatherSchema,
    WeatherSchema
)

logger = logging.getLogger(__name__)


class PlanningService:
    """
    Service class that provides route planning functionality for the API.

    The lighting cache lives as long as the service, so repeated searches
    over the same roads reuse earlier lighting lookups.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        """Initialize the planning service."""
        self.config = config or RoutingConfig.from_env()
        self.config.validate()
        self.lighting_cache = LightingCache()
        self.ranking = RankingEngine(self.config)
        logger.info("Planning service initialized")

    def get_health_status(self) -> HealthResponse:
        """Get the health status of the planning service."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            lighting_cache_entries=len(self.lighting_cache)
        )

    def get_profiles(self) -> List[ProfileSchema]:
        return [self._profile_to_schema(p) for p in list_profiles()]

    async def plan_routes(self, request: PlanRequest) -> PlanResponse:
        """
        Plan and rank routes for a request.

        Raises:
            ValueError: If a location query cannot be geocoded
            DirectionsUnavailableError: If the directions provider fails
        """
        async with RoutePlanner(self.config, self.lighting_cache) as planner:
            geocoder = GeocodingClient(planner.http_client, self.config)
            origin, origin_label = await self._resolve_location(request.origin, geocoder)
            destination, destination_label = await self._resolve_location(request.destination, geocoder)

            result = await planner.plan(
                origin, destination, request.profile,
                date=request.travel_date,
                time=request.travel_time,
                origin_label=origin_label,
                destination_label=destination_label
            )

        return self._convert_to_response(result)

    def rerank_routes(self, request: RerankRequest) -> PlanResponse:
        """Rank client-supplied routes again for another profile or time."""
        geometries = {route.id: route.route_geojson for route in request.routes}
        routes = [self._schema_to_route(route) for route in request.routes]

        profile = get_profile_from_string(request.profile)
        ranked = self.ranking.rank_with_reasons(routes, profile, request.travel_time)
        result = PlanResult(profile=profile, travel_time=request.travel_time, routes=ranked)
        return self._convert_to_response(result, geometries)

    async def _resolve_location(self, location: LocationRequest,
                                geocoder: GeocodingClient) -> Tuple[GeoPoint, Optional[str]]:
        """Coordinates and display label for a requested location."""
        if location.latitude is not None and location.longitude is not None:
            point = GeoPoint(location.latitude, location.longitude)
            label = location.label or location.query
            if not label:
                label = await geocoder.reverse(point)
            return point, label

        place = await geocoder.geocode(location.query)
        if place is None:
            raise ValueError(f"Could not find location '{location.query}'")
        return place.point, location.label or place.display_name

    def _convert_to_response(self, result: PlanResult,
                             geometries: Optional[Dict[str, Any]] = None) -> PlanResponse:
        if not result.routes:
            return PlanResponse(
                success=False,
                message="No routes found",
                profile=self._profile_to_schema(result.profile),
                travel_time=result.travel_time
            )

        return PlanResponse(
            success=True,
            message=f"Ranked {len(result.routes)} routes",
            profile=self._profile_to_schema(result.profile),
            travel_time=result.travel_time,
            routes=[self._ranked_to_schema(r, geometries) for r in result.routes]
        )

    def _ranked_to_schema(self, ranked: RankedRoute,
                          geometries: Optional[Dict[str, Any]] = None) -> RankedRouteSchema:
        route = ranked.route
        if geometries is not None:
            route_geojson = geometries.get(route.id)
        else:
            route_geojson = self._route_to_geojson(route)

        return RankedRouteSchema(
            rank=ranked.rank,
            reason=ranked.reason,
            route=RouteSchema(
                id=route.id,
                source=route.source,
                destination=route.destination,
                eta_minutes=route.eta_minutes,
                distance_km=route.distance_km,
                activity_score=route.activity_score,
                lighting_score=route.lighting_score,
                road_type=route.road_type.value,
                description=route.description,
                weather=self._weather_to_schema(route.weather),
                route_geojson=route_geojson
            )
        )

    def _route_to_geojson(self, route: EnrichedRoute) -> Optional[Dict[str, Any]]:
        """
        Convert the provider geometry of a route to a GeoJSON FeatureCollection.

        Returns None when the route has no usable geometry.
        """
        geometry = route.raw_geometry or {}
        coordinates = geometry.get('coordinates') if isinstance(geometry, dict) else None
        if not coordinates:
            return None

        line_feature = geojson.Feature(
            geometry=geojson.LineString(coordinates),
            properties={
                "route_id": route.id,
                "road_type": route.road_type.value,
                "eta_minutes": route.eta_minutes,
                "distance_km": route.distance_km
            }
        )
        start_feature = geojson.Feature(
            geometry=geojson.Point(coordinates[0]),
            properties={"type": "start", "name": route.source}
        )
        end_feature = geojson.Feature(
            geometry=geojson.Point(coordinates[-1]),
            properties={"type": "end", "name": route.destination}
        )
        return geojson.FeatureCollection([line_feature, start_feature, end_feature])

    @staticmethod
    def _profile_to_schema(profile: DrivingProfile) -> ProfileSchema:
        return ProfileSchema(
            id=profile.id,
            name=profile.name,
            description=profile.description,
            weights=ProfileWeightsSchema(
                eta=profile.weights.eta,
                activity=profile.weights.activity,
                lighting=profile.weights.lighting
            )
        )

    @staticmethod
    def _point_weather_to_schema(weather: WeatherPoint) -> WeatherSchema:
        return WeatherSchema(
            temperature_celsius=weather.temperature_celsius,
            wmo_code=weather.wmo_code,
            description=weather.description
        )

    def _weather_to_schema(self, weather: Optional[RouteWeather]) -> Optional[RouteWeatherSchema]:
        if weather is None:
            return None
        return RouteWeatherSchema(
            origin=self._point_weather_to_schema(weather.origin),
            destination=self._point_weather_to_schema(weather.destination),
            waypoints=[
                WaypointWeatherSchema(name=w.name, weather=self._point_weather_to_schema(w.weather))
                for w in weather.waypoints
            ]
        )

    @staticmethod
    def _schema_to_weather(schema: WeatherSchema) -> WeatherPoint:
        return WeatherPoint(
            temperature_celsius=schema.temperature_celsius,
            wmo_code=schema.wmo_code,
            description=schema.description
        )

    def _schema_to_route(self, schema: RouteSchema) -> EnrichedRoute:
        weather = None
        if schema.weather is not None:
            weather = RouteWeather(
                origin=self._schema_to_weather(schema.weather.origin),
                destination=self._schema_to_weather(schema.weather.destination),
                waypoints=tuple(
                    WaypointWeather(name=w.name, weather=self._schema_to_weather(w.weather))
                    for w in schema.weather.waypoints
                )
            )
        return EnrichedRoute(
            id=schema.id,
            source=schema.source,
            destination=schema.destination,
            eta_minutes=schema.eta_minutes,
            distance_km=schema.distance_km,
            activity_score=schema.activity_score,
            lighting_score=schema.lighting_score,
            road_type=RoadType(schema.road_type),
            description=schema.description,
            weather=weather
        )


# Global service instance
planning_service = PlanningService()
