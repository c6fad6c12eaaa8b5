"""
Tests for road classification and the enrichment pipeline.
"""

import asyncio

from smartdrive_routing.data import GeoPoint, RawRoute, RoadType, RouteWeather, WeatherPoint
from smartdrive_routing.enrichment import RouteEnrichmentPipeline, build_route_id, classify_road_type

from conftest import straight_path

ORIGIN = GeoPoint(43.65, -79.38)
DESTINATION = GeoPoint(43.25, -79.87)


class FakeLighting:
    def __init__(self, score=8):
        self.score = score
        self.paths = []

    async def estimate(self, path):
        self.paths.append(path)
        return self.score


class FakeWeather:
    def __init__(self):
        self.calls = []

    async def aggregate(self, origin, destination, path=None, date=None, time=None):
        self.calls.append((origin, destination, date, time))
        clear = WeatherPoint(12.0, 0, "Clear sky")
        return RouteWeather(origin=clear, destination=clear)


def raw_route(minutes, distance_m=42000.0, summary="", path=None):
    return RawRoute(
        path=tuple(straight_path(20) if path is None else path),
        duration_s=minutes * 60.0,
        distance_m=distance_m,
        start_address="Toronto",
        end_address="Hamilton",
        summary=summary,
        geometry={"type": "LineString", "coordinates": [[-79.38, 43.65], [-79.87, 43.25]]}
    )


def enrich_all(routes, config, lighting=None, weather=None, date=None, time=None):
    pipeline = RouteEnrichmentPipeline(lighting or FakeLighting(), weather or FakeWeather(), config)
    return asyncio.run(pipeline.enrich_all(routes, ORIGIN, DESTINATION, date, time))


def test_classify_road_type():
    assert classify_road_type(0, 3000, 3000) is RoadType.HIGHWAY
    assert classify_road_type(1, 3500, 3000) is RoadType.BACKROADS
    assert classify_road_type(1, 3700, 3000) is RoadType.SCENIC


def test_first_alternative_is_highway_even_if_slower():
    assert classify_road_type(0, 9000, 3000) is RoadType.HIGHWAY


def test_route_id_uses_address_prefixes():
    assert build_route_id("Toronto", "Hamilton", 2) == "route-Tor-Ham-2"
    assert build_route_id("A", "", 0) == "route-A--0"


def test_road_types_and_activity_for_alternatives(offline_config):
    routes = [raw_route(50), raw_route(56), raw_route(65)]

    enriched = enrich_all(routes, offline_config)

    assert [r.road_type for r in enriched] == [RoadType.HIGHWAY, RoadType.BACKROADS, RoadType.SCENIC]
    assert [r.activity_score for r in enriched] == [4, 6, 8]
    assert [r.eta_minutes for r in enriched] == [50, 56, 65]
    assert [r.id for r in enriched] == ["route-Tor-Ham-0", "route-Tor-Ham-1", "route-Tor-Ham-2"]


def test_route_fields(offline_config):
    route = RawRoute(path=tuple(straight_path(5)), duration_s=89.0, distance_m=12345.0,
                     start_address="Queen St", end_address="King St", summary="Gardiner Expressway")
    lighting = FakeLighting(score=9)
    weather = FakeWeather()

    enriched = enrich_all([route], offline_config, lighting, weather, "2026-10-20", "21:00")[0]

    assert enriched.eta_minutes == 1
    assert enriched.distance_km == 12.3
    assert enriched.lighting_score == 9
    assert enriched.description == "Gardiner Expressway"
    assert enriched.source == "Queen St"
    assert enriched.weather.origin.description == "Clear sky"
    assert weather.calls == [(ORIGIN, DESTINATION, "2026-10-20", "21:00")]


def test_description_falls_back_to_start_address(offline_config):
    enriched = enrich_all([raw_route(30)], offline_config)[0]
    assert enriched.description == "Toronto"


def test_ids_are_stable_across_refetches(offline_config):
    first = enrich_all([raw_route(50), raw_route(56)], offline_config)
    second = enrich_all([raw_route(50), raw_route(56)], offline_config)
    assert [r.id for r in first] == [r.id for r in second]


def test_route_without_geometry_skips_lookups(offline_config):
    lighting = FakeLighting()
    weather = FakeWeather()

    enriched = enrich_all([raw_route(20, path=[])], offline_config, lighting, weather)[0]

    assert enriched.lighting_score == 5
    assert enriched.weather is None
    assert lighting.paths == []
    assert weather.calls == []


def test_no_routes_gives_empty_list(offline_config):
    assert enrich_all([], offline_config) == []
