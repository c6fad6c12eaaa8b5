"""
Profile-weighted ranking of enriched route alternatives.
"""

import logging
from typing import List, Optional, Sequence

from ...config.driving_profiles import ProfileId
from ...config.routing_config import RoutingConfig
from ...data.models import DrivingProfile, EnrichedRoute, ProfileWeights, RankedRoute

logger = logging.getLogger(__name__)


class RankingEngine:
    """
    Orders route alternatives for a driving profile and explains each position.

    - fast: shortest ETA first
    - scenic: longest ETA first
    - safe: activity (plus lighting at night), ties broken by shorter ETA
    - any other profile: weighted composite of ETA, activity and lighting

    Lighting only counts at night. All orderings are stable.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        self.config = config or RoutingConfig()

    def is_daytime(self, time: Optional[str]) -> bool:
        """
        Whether an 'HH:MM' time falls in the daytime window.

        Empty or unparsable times count as night.
        """
        if not time:
            return False
        try:
            hour = int(time.split(':')[0])
        except ValueError:
            logger.warning(f"Unparsable travel time '{time}', treating as night")
            return False
        return self.config.daytime_start_hour <= hour < self.config.daytime_end_hour

    def effective_weights(self, profile: DrivingProfile, time: Optional[str]) -> ProfileWeights:
        """Profile weights with lighting zeroed during the day."""
        weights = profile.weights
        if self.is_daytime(self._resolve_time(time)):
            return ProfileWeights(eta=weights.eta, activity=weights.activity, lighting=0)
        return weights

    def safety_score(self, route: EnrichedRoute, weights: ProfileWeights) -> int:
        return route.activity_score * weights.activity + route.lighting_score * weights.lighting

    def composite_score(self, route: EnrichedRoute, weights: ProfileWeights) -> float:
        """Generic weighted score; `weights.lighting` is already zero by day."""
        eta_score = (self.config.eta_score_ceiling - route.eta_minutes) * weights.eta
        activity_score = route.activity_score * 10 * weights.activity
        lighting_score = route.lighting_score * 10 * weights.lighting
        return eta_score + activity_score + lighting_score

    def rank(self, routes: Sequence[EnrichedRoute], profile: DrivingProfile,
             time: Optional[str] = None) -> List[EnrichedRoute]:
        """
        Rank routes for a profile.

        Args:
            routes: Enriched alternatives, in any order
            profile: Driving profile to rank for
            time: 'HH:MM' travel time; defaults to the configured evening time

        Returns:
            A new list in ranked order; the input is not modified
        """
        weights = self.effective_weights(profile, time)

        if profile.id == ProfileId.FAST.value:
            ranked = sorted(routes, key=lambda r: r.eta_minutes)
        elif profile.id == ProfileId.SCENIC.value:
            ranked = sorted(routes, key=lambda r: -r.eta_minutes)
        elif profile.id == ProfileId.SAFE.value:
            ranked = sorted(routes, key=lambda r: (-self.safety_score(r, weights), r.eta_minutes))
        else:
            ranked = sorted(routes, key=lambda r: -self.composite_score(r, weights))

        period = 'day' if self.is_daytime(self._resolve_time(time)) else 'night'
        logger.info(f"Ranked {len(ranked)} routes for profile '{profile.id}' ({period})")
        return ranked

    def explain(self, route: EnrichedRoute, profile: DrivingProfile,
                time: Optional[str] = None) -> str:
        """One-line reason consistent with the ranking branch used for the profile."""
        if profile.id == ProfileId.FAST.value:
            return f"Shortest route: {route.eta_minutes} mins."
        if profile.id == ProfileId.SCENIC.value:
            return f"Longest scenic drive: {route.eta_minutes} mins."
        if profile.id == ProfileId.SAFE.value:
            if self.is_daytime(self._resolve_time(time)):
                return "High activity score (Daytime safety)."
            total_safety = route.activity_score + route.lighting_score
            return f"High safety score ({total_safety}/20)."
        return "Balanced choice."

    def rank_with_reasons(self, routes: Sequence[EnrichedRoute], profile: DrivingProfile,
                          time: Optional[str] = None) -> List[RankedRoute]:
        return [
            RankedRoute(rank=position, route=route, reason=self.explain(route, profile, time))
            for position, route in enumerate(self.rank(routes, profile, time), start=1)
        ]

    def _resolve_time(self, time: Optional[str]) -> str:
        return self.config.default_travel_time if time is None else time
