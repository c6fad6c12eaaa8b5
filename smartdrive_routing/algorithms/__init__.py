"""
Scoring and ranking algorithms.

This module contains:
- Lighting estimation from OSM road attributes
- Profile-weighted route ranking
- Retry policy for external lookups
"""

from .lighting.lighting_estimator import LightingEstimator, LightingEstimate
from .ranking.ranking_engine import RankingEngine
from .retry.backoff import RetryOutcome, RetryResult, backoff_delay, retry_async

__all__ = [
    'LightingEstimator',
    'LightingEstimate',
    'RankingEngine',
    'RetryOutcome',
    'RetryResult',
    'backoff_delay',
    'retry_async'
]
