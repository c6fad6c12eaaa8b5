"""
Shared fixtures: offline configuration and fake HTTP transports.
"""

import json
from typing import Callable, List

import httpx
import pytest

from smartdrive_routing.config import RoutingConfig
from smartdrive_routing.data import GeoPoint


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


def make_client(handler: Callable[[httpx.Request], httpx.Response]):
    """Async client and its transport for a request handler."""
    transport = RecordingTransport(handler)
    return httpx.AsyncClient(transport=transport), transport


def overpass_query(request: httpx.Request) -> str:
    """Decoded Overpass QL sent in a form-encoded POST body."""
    form = httpx.QueryParams(request.content.decode())
    return form.get("data", "")


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode(),
                          headers={"Content-Type": "application/json"})


def straight_path(count: int, start=(43.65, -79.38), step=0.001) -> List[GeoPoint]:
    """A simple north-east running path of `count` points."""
    return [GeoPoint(start[0] + i * step, start[1] + i * step) for i in range(count)]


@pytest.fixture
def offline_config():
    return RoutingConfig.create_offline_test_config()
