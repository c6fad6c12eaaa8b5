"""
Tests for the command line interface argument handling.
"""

import argparse

import pytest

from smartdrive_routing.data import GeoPoint
from smartdrive_routing.main import build_parser, parse_coordinates


def test_parse_coordinates():
    assert parse_coordinates("43.65,-79.38") == GeoPoint(43.65, -79.38)


@pytest.mark.parametrize("value", ["43.65", "north,west", "1,2,3"])
def test_parse_coordinates_rejects_bad_input(value):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coordinates(value)


def test_parser_defaults():
    args = build_parser().parse_args(["--origin", "43.65,-79.38", "--destination", "43.25,-79.87"])
    assert args.profile == "safe"
    assert args.time is None
    assert args.destination == GeoPoint(43.25, -79.87)


def test_parser_rejects_unknown_profile():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--origin", "1,2", "--destination", "3,4", "--profile", "reckless"])
