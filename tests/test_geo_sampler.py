"""
Tests for path sampling, fingerprinting and travel time validation.
"""

import json

import pytest

from smartdrive_routing.data import (
    GeoPoint,
    path_fingerprint,
    round_half_up,
    sample_path,
    validate_travel_date,
    validate_travel_time
)
from smartdrive_routing.exceptions import InvalidTravelTimeError

from conftest import straight_path


def test_round_half_up_rounds_halves_away_from_even():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(56.0) == 56


def test_sample_path_is_deterministic():
    path = straight_path(100)
    assert sample_path(path, 15) == sample_path(path, 15)


def test_sample_path_keeps_endpoints_and_count():
    path = straight_path(100)
    samples = sample_path(path, 15)

    assert len(samples) == 15
    assert samples[0] == path[0]
    assert samples[-1] == path[-1]


def test_sample_path_uses_evenly_spaced_indices():
    path = straight_path(11)
    samples = sample_path(path, 3)
    assert samples == [path[0], path[5], path[10]]


def test_short_path_is_returned_whole():
    path = straight_path(4)
    samples = sample_path(path, 15)
    assert samples == path
    assert samples is not path


def test_single_sample_is_first_point():
    path = straight_path(10)
    assert sample_path(path, 1) == [path[0]]


def test_sample_path_rejects_zero_count():
    with pytest.raises(ValueError):
        sample_path(straight_path(5), 0)


def test_sample_path_accepts_coordinate_pairs():
    samples = sample_path([(1.0, 2.0), {"lat": 3.0, "lon": 4.0}], 5)
    assert samples == [GeoPoint(1.0, 2.0), GeoPoint(3.0, 4.0)]


def test_fingerprint_formats_four_decimals():
    fingerprint = path_fingerprint([GeoPoint(43.123456, -79.987654)])
    assert json.loads(fingerprint) == ["43.1235,-79.9877"]


def test_nearby_paths_share_a_fingerprint():
    a = [GeoPoint(43.65001, -79.38001), GeoPoint(43.66001, -79.39001)]
    b = [GeoPoint(43.65002, -79.38002), GeoPoint(43.66002, -79.39002)]
    assert path_fingerprint(a) == path_fingerprint(b)


def test_geopoint_from_any_rejects_garbage():
    with pytest.raises(ValueError):
        GeoPoint.from_any("43.6,-79.3")
    with pytest.raises(ValueError):
        GeoPoint.from_any({"latitude": 1, "longitude": 2})


def test_travel_time_is_normalised():
    assert validate_travel_time("9:05") == "09:05"
    assert validate_travel_time(None) is None
    assert validate_travel_time("") is None


@pytest.mark.parametrize("value", ["25:00", "noon", "12-30"])
def test_invalid_travel_time_is_rejected(value):
    with pytest.raises(InvalidTravelTimeError):
        validate_travel_time(value)


def test_travel_date_validation():
    assert validate_travel_date("2026-10-20") == "2026-10-20"
    with pytest.raises(InvalidTravelTimeError):
        validate_travel_date("20/10/2026")
