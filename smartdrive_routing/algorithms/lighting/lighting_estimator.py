"""
Ambient lighting estimation for a route path from OSM road data.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .road_tables import score_segment
from ..retry.backoff import RetryOutcome, retry_async
from ...clients.overpass_client import OverpassClient
from ...config.routing_config import RoutingConfig
from ...data.geo_sampler import path_fingerprint, round_half_up, sample_path
from ...data.models import GeoPoint
from ...mapping.cache.lighting_cache import LightingCache

logger = logging.getLogger(__name__)

MIN_LIGHTING_SCORE = 2
MAX_LIGHTING_SCORE = 10


@dataclass(frozen=True)
class LightingEstimate:
    """A lighting score together with how it was obtained."""

    score: int
    segment_count: int = 0
    from_cache: bool = False
    attempts_made: int = 0
    outcome: Optional[RetryOutcome] = None


def deduplicate_segments(elements: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Keep one element per OSM id; a road near several samples is returned once per sample."""
    unique: Dict[Any, Dict[str, Any]] = {}
    for element in elements:
        element_id = element.get('id')
        if element_id:
            unique[element_id] = element
    return list(unique.values())


def aggregate_segment_scores(scores: Sequence[int]) -> int:
    """Rounded mean clamped to the valid lighting range."""
    average = round_half_up(sum(scores) / len(scores))
    return max(MIN_LIGHTING_SCORE, min(MAX_LIGHTING_SCORE, average))


class LightingEstimator:
    """
    Estimates how well lit a route is, on a 2-10 scale.

    Results for successful lookups are cached by path fingerprint, so the
    same geometry always yields the same score within a process. Failed
    lookups return the default score without caching.
    """

    def __init__(self, overpass: OverpassClient,
                 cache: Optional[LightingCache] = None,
                 config: Optional[RoutingConfig] = None):
        self.overpass = overpass
        self.cache = cache if cache is not None else LightingCache()
        self.config = config or RoutingConfig()

    async def estimate(self, path: Sequence[GeoPoint]) -> int:
        """Lighting score for a path. Never raises."""
        return (await self.estimate_detailed(path)).score

    async def estimate_detailed(self, path: Sequence[GeoPoint]) -> LightingEstimate:
        if not path:
            logger.warning("Empty path provided to lighting estimator")
            return LightingEstimate(score=self.config.lighting_default_score)

        try:
            samples = sample_path(path, self.config.lighting_sample_count)
            fingerprint = path_fingerprint(samples)
        except (ValueError, TypeError) as e:
            logger.error(f"Could not sample path for lighting: {e}")
            return LightingEstimate(score=self.config.lighting_default_score)

        cached = self.cache.get(fingerprint)
        if cached is not None:
            logger.debug(f"Lighting cache hit ({len(samples)} samples)")
            return LightingEstimate(score=cached, from_cache=True)

        result = await retry_async(
            lambda: self.overpass.fetch_road_segments(samples, self.config.lighting_search_radius_m),
            max_attempts=self.config.retry_max_attempts,
            base_delay_s=self.config.retry_base_delay_s,
            factor=self.config.retry_backoff_factor
        )

        if not result.succeeded:
            logger.warning(f"OSM lighting lookup failed after {result.attempts_made} attempt(s): {result.error}")
            return LightingEstimate(
                score=self.config.lighting_default_score,
                attempts_made=result.attempts_made,
                outcome=result.outcome
            )

        segments = deduplicate_segments(result.value or [])
        if not segments:
            logger.warning("No OSM highway data found for route")
            self.cache.set(fingerprint, self.config.lighting_no_data_score)
            return LightingEstimate(
                score=self.config.lighting_no_data_score,
                attempts_made=result.attempts_made,
                outcome=result.outcome
            )

        score = aggregate_segment_scores([score_segment(s.get('tags') or {}) for s in segments])
        self.cache.set(fingerprint, score)
        logger.info(f"Lighting score calculated: {score} (from {len(segments)} road segments)")

        return LightingEstimate(
            score=score,
            segment_count=len(segments),
            attempts_made=result.attempts_made,
            outcome=result.outcome
        )
