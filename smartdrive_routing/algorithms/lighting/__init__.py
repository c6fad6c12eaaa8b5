"""
Lighting estimation from OSM road attributes.
"""

from .lighting_estimator import LightingEstimator, LightingEstimate
from .road_tables import LitTag, RoadClass, LIT_TAG_SCORES, ROAD_CLASS_SCORES, score_segment

__all__ = [
    'LightingEstimator',
    'LightingEstimate',
    'LitTag',
    'RoadClass',
    'LIT_TAG_SCORES',
    'ROAD_CLASS_SCORES',
    'score_segment'
]
