"""
Tests for waypoint city discovery.
"""

import asyncio

from smartdrive_routing.clients import OverpassClient
from smartdrive_routing.enrichment import CityFinder
from smartdrive_routing.enrichment.city_finder import extract_cities, interior_samples

from conftest import json_response, make_client, overpass_query, straight_path


def place(name, lat, lon, name_en=None):
    tags = {"place": "town", "name": name}
    if name_en:
        tags["name:en"] = name_en
    return {"type": "node", "id": len(name), "lat": lat, "lon": lon, "tags": tags}


def run_find(handler, config, path):
    async def scenario():
        client, transport = make_client(handler)
        async with client:
            cities = await CityFinder(OverpassClient(client, config), config).find(path)
        return cities, transport

    return asyncio.run(scenario())


def test_interior_samples_drop_endpoints():
    path = straight_path(50)
    samples = interior_samples(path, 7)
    assert len(samples) == 5
    assert path[0] not in samples
    assert path[-1] not in samples


def test_extract_cities_prefers_english_and_dedups():
    elements = [
        place("München", 48.13, 11.58, name_en="Munich"),
        place("Munich", 48.2, 11.6),
        place("Augsburg", 48.37, 10.89),
        {"id": 5, "lat": 1.0, "lon": 2.0, "tags": {"place": "town"}},
    ]
    cities = extract_cities(elements, 3)

    assert [c.name for c in cities] == ["Munich", "Augsburg"]
    assert (cities[0].lat, cities[0].lng) == (48.13, 11.58)


def test_extract_cities_skips_bad_coordinates():
    elements = [{"id": 1, "tags": {"name": "Nowhere"}}, place("Ulm", 48.4, 9.99)]
    assert [c.name for c in extract_cities(elements, 3)] == ["Ulm"]


def test_find_returns_at_most_three_distinct_cities(offline_config):
    def handler(request):
        return json_response({"elements": [
            place("Oakville", 43.45, -79.68),
            place("Burlington", 43.33, -79.8),
            place("Oakville", 43.46, -79.69),
            place("Milton", 43.51, -79.88),
            place("Grimsby", 43.19, -79.56),
        ]})

    cities, transport = run_find(handler, offline_config, straight_path(60))

    assert [c.name for c in cities] == ["Oakville", "Burlington", "Milton"]
    query = overpass_query(transport.requests[0])
    assert query.count('node["place"~"city|town"](around:10000,') == 5


def test_find_swallows_failures(offline_config):
    def handler(request):
        return json_response({}, status_code=500)

    cities, _ = run_find(handler, offline_config, straight_path(60))
    assert cities == []


def test_find_on_empty_path_makes_no_request(offline_config):
    def handler(request):
        raise AssertionError("no request expected")

    cities, transport = run_find(handler, offline_config, [])
    assert cities == []
    assert transport.requests == []
