"""
Tests for the OSRM directions client.
"""

import asyncio

import pytest

from smartdrive_routing.clients import DirectionsClient
from smartdrive_routing.clients.directions_client import format_coordinates
from smartdrive_routing.data import GeoPoint
from smartdrive_routing.exceptions import DirectionsUnavailableError

from conftest import json_response, make_client

ORIGIN = GeoPoint(43.65, -79.38)
DESTINATION = GeoPoint(43.25, -79.87)


def osrm_payload(names=("Front Street", "King Street")):
    return {
        "code": "Ok",
        "waypoints": [{"name": names[0]}, {"name": names[1]}],
        "routes": [
            {
                "duration": 3000.0,
                "distance": 68000.0,
                "geometry": {"type": "LineString", "coordinates": [[-79.38, 43.65], [-79.6, 43.5], [-79.87, 43.25]]},
                "legs": [{"summary": "QEW"}]
            },
            {
                "duration": 3400.0,
                "distance": 70500.0,
                "geometry": {"type": "LineString", "coordinates": [[-79.38, 43.65], [-79.87, 43.25]]},
                "legs": []
            }
        ]
    }


def fetch(handler, config, **labels):
    async def scenario():
        client, transport = make_client(handler)
        async with client:
            routes = await DirectionsClient(client, config).fetch_alternatives(ORIGIN, DESTINATION, **labels)
        return routes, transport

    return asyncio.run(scenario())


def test_coordinates_are_lng_lat():
    assert format_coordinates(ORIGIN, DESTINATION) == "-79.38,43.65;-79.87,43.25"


def test_alternatives_are_parsed(offline_config):
    routes, transport = fetch(lambda request: json_response(osrm_payload()), offline_config)

    request = transport.requests[0]
    assert request.url.path == "/route/v1/driving/-79.38,43.65;-79.87,43.25"
    assert request.url.params["alternatives"] == "true"
    assert request.url.params["geometries"] == "geojson"

    assert len(routes) == 2
    first = routes[0]
    assert first.path[0] == GeoPoint(43.65, -79.38)
    assert first.duration_s == 3000.0
    assert first.summary == "QEW"
    assert first.start_address == "Front Street"
    assert first.end_address == "King Street"
    assert routes[1].summary == ""


def test_labels_fill_missing_street_names(offline_config):
    routes, _ = fetch(lambda request: json_response(osrm_payload(names=("", ""))), offline_config,
                      origin_label="Toronto")
    assert routes[0].start_address == "Toronto"
    assert routes[0].end_address == "End"


def test_provider_error_code(offline_config):
    def handler(request):
        return json_response({"code": "NoRoute", "message": "Impossible route between points"})

    with pytest.raises(DirectionsUnavailableError, match="Impossible route"):
        fetch(handler, offline_config)


def test_http_failure(offline_config):
    with pytest.raises(DirectionsUnavailableError):
        fetch(lambda request: json_response({}, status_code=502), offline_config)


def test_non_object_route_entry(offline_config):
    def handler(request):
        return json_response({"code": "Ok", "waypoints": [], "routes": [None]})

    with pytest.raises(DirectionsUnavailableError, match="malformed routes"):
        fetch(handler, offline_config)
