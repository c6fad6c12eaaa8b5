"""
Tests for OSM tag to lighting score tables.
"""

import pytest

from smartdrive_routing.algorithms.lighting import LitTag, RoadClass, score_segment


@pytest.mark.parametrize("lit,expected", [
    ("yes", 10), ("24/7", 10), ("automatic", 10), ("stay_on", 10),
    ("limited", 6), ("interval", 6),
    ("sunset-sunrise", 7), ("dusk-dawn", 7),
    ("no", 2), ("disused", 2),
])
def test_lit_tag_wins_over_road_class(lit, expected):
    assert score_segment({"lit": lit, "highway": "track"}) == expected


@pytest.mark.parametrize("highway,expected", [
    ("motorway", 9), ("trunk_link", 9), ("primary", 9),
    ("secondary", 8), ("tertiary", 7),
    ("residential", 6), ("living_street", 6), ("pedestrian", 6),
    ("service", 3), ("track", 3),
    ("footway", 5),
])
def test_road_class_scores(highway, expected):
    assert score_segment({"highway": highway}) == expected


def test_unknown_lit_value_falls_back_to_road_class():
    assert score_segment({"lit": "sometimes", "highway": "secondary"}) == 8


def test_no_tags_scores_neutral():
    assert score_segment({}) == 5


def test_parse_defaults():
    assert LitTag.parse(None) is LitTag.UNSPECIFIED
    assert RoadClass.parse("bridleway") is RoadClass.UNKNOWN
