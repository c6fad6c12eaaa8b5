"""
Lookup tables that turn OSM road tags into lighting scores.

Both tag vocabularies are closed enums with an explicit default member,
so every raw tag value maps to exactly one table row.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional


class LitTag(Enum):
    """Values of the OSM `lit` tag that carry lighting information."""
    YES = "yes"
    ALWAYS = "24/7"
    AUTOMATIC = "automatic"
    STAY_ON = "stay_on"
    LIMITED = "limited"
    INTERVAL = "interval"
    SUNSET_SUNRISE = "sunset-sunrise"
    DUSK_DAWN = "dusk-dawn"
    NO = "no"
    DISUSED = "disused"
    UNSPECIFIED = "unspecified"  # absent or unrecognised

    @classmethod
    def parse(cls, value: Optional[str]) -> 'LitTag':
        try:
            return cls(value)
        except ValueError:
            return cls.UNSPECIFIED


class RoadClass(Enum):
    """Values of the OSM `highway` tag, grouped only where the score table needs them."""
    MOTORWAY = "motorway"
    MOTORWAY_LINK = "motorway_link"
    TRUNK = "trunk"
    TRUNK_LINK = "trunk_link"
    PRIMARY = "primary"
    PRIMARY_LINK = "primary_link"
    SECONDARY = "secondary"
    SECONDARY_LINK = "secondary_link"
    TERTIARY = "tertiary"
    TERTIARY_LINK = "tertiary_link"
    RESIDENTIAL = "residential"
    LIVING_STREET = "living_street"
    PEDESTRIAN = "pedestrian"
    SERVICE = "service"
    TRACK = "track"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> 'RoadClass':
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


# None: the tag says nothing, fall back to the road class
LIT_TAG_SCORES: Dict[LitTag, Optional[int]] = {
    LitTag.YES: 10,
    LitTag.ALWAYS: 10,
    LitTag.AUTOMATIC: 10,
    LitTag.STAY_ON: 10,
    LitTag.LIMITED: 6,
    LitTag.INTERVAL: 6,
    LitTag.SUNSET_SUNRISE: 7,
    LitTag.DUSK_DAWN: 7,
    LitTag.NO: 2,
    LitTag.DISUSED: 2,
    LitTag.UNSPECIFIED: None,
}

ROAD_CLASS_SCORES: Dict[RoadClass, int] = {
    RoadClass.MOTORWAY: 9,
    RoadClass.MOTORWAY_LINK: 9,
    RoadClass.TRUNK: 9,
    RoadClass.TRUNK_LINK: 9,
    RoadClass.PRIMARY: 9,
    RoadClass.PRIMARY_LINK: 9,
    RoadClass.SECONDARY: 8,
    RoadClass.SECONDARY_LINK: 8,
    RoadClass.TERTIARY: 7,
    RoadClass.TERTIARY_LINK: 7,
    RoadClass.RESIDENTIAL: 6,
    RoadClass.LIVING_STREET: 6,
    RoadClass.PEDESTRIAN: 6,
    RoadClass.SERVICE: 3,
    RoadClass.TRACK: 3,
    RoadClass.UNKNOWN: 5,
}


def score_segment(tags: Mapping[str, Any]) -> int:
    """
    Lighting score of one road segment from its OSM tags.

    An explicit `lit` value wins; otherwise the `highway` class decides.
    """
    lit_score = LIT_TAG_SCORES[LitTag.parse(tags.get('lit'))]
    if lit_score is not None:
        return lit_score
    return ROAD_CLASS_SCORES[RoadClass.parse(tags.get('highway'))]
