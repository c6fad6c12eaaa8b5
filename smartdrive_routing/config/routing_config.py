"""
Configuration management for route enrichment and ranking parameters.
"""

import os
from dataclasses import dataclass, field
from typing import Dict

from dotenv import load_dotenv

from ..data.models import RoadType


@dataclass
class RoutingConfig:
    """Configuration parameters for route enrichment and ranking."""

    # External Services
    osrm_base_url: str = "https://router.project-osrm.org"
    overpass_url: str = "https://overpass-api.de/api/interpreter"
    weather_url: str = "https://api.open-meteo.com/v1/forecast"
    nominatim_url: str = "https://nominatim.openstreetmap.org"
    user_agent: str = "SmartDrive-App/1.0"
    http_timeout_s: float = 15.0  # per external call

    # Lighting Estimation
    lighting_sample_count: int = 15
    lighting_search_radius_m: int = 100  # meters around each sample point
    lighting_default_score: int = 5  # lookup failed, not cached
    lighting_no_data_score: int = 4  # lookup succeeded but found no roads
    retry_max_attempts: int = 3
    retry_base_delay_s: float = 1.0
    retry_backoff_factor: float = 2.0

    # Waypoint Cities
    city_sample_count: int = 7
    city_search_radius_m: int = 10000
    max_waypoint_cities: int = 3

    # Road Classification
    scenic_duration_threshold: float = 1.2  # > 120% of the fastest alternative
    activity_baselines: Dict[RoadType, int] = field(default_factory=lambda: {
        RoadType.HIGHWAY: 4,
        RoadType.SCENIC: 8,
        RoadType.BACKROADS: 6
    })

    # Ranking
    daytime_start_hour: int = 6   # inclusive
    daytime_end_hour: int = 19    # exclusive
    default_travel_time: str = "20:00"
    eta_score_ceiling: int = 200

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.http_timeout_s <= 0:
            raise ValueError("http_timeout_s must be positive")
        if self.lighting_sample_count < 1:
            raise ValueError("lighting_sample_count must be at least 1")
        if not 2 <= self.lighting_default_score <= 10:
            raise ValueError("lighting_default_score must be between 2 and 10")
        if not 2 <= self.lighting_no_data_score <= 10:
            raise ValueError("lighting_no_data_score must be between 2 and 10")
        if self.lighting_no_data_score == self.lighting_default_score:
            raise ValueError("lighting_no_data_score must differ from lighting_default_score")
        if self.retry_max_attempts < 1:
            raise ValueError("retry_max_attempts must be at least 1")
        if self.retry_base_delay_s < 0 or self.retry_backoff_factor < 1:
            raise ValueError("retry delay must be >= 0 and backoff factor >= 1")
        if self.city_sample_count < 3:
            raise ValueError("city_sample_count must be at least 3 to leave interior samples")
        if self.scenic_duration_threshold < 1.0:
            raise ValueError("scenic_duration_threshold must be >= 1.0")
        if not 0 <= self.daytime_start_hour < self.daytime_end_hour <= 24:
            raise ValueError("daytime hours must satisfy 0 <= start < end <= 24")

    @classmethod
    def create_default_config(cls) -> 'RoutingConfig':
        """Create the default configuration against the public endpoints."""
        return cls()

    @classmethod
    def create_offline_test_config(cls) -> 'RoutingConfig':
        """
        Create configuration for tests with faked transports.

        Backoff delays are zero so retry paths run instantly.
        """
        return cls(
            retry_base_delay_s=0.0,
            http_timeout_s=1.0
        )

    @classmethod
    def from_env(cls) -> 'RoutingConfig':
        """
        Create configuration from SMARTDRIVE_* environment variables.

        A .env file in the working directory is loaded first if present.
        """
        load_dotenv()
        config = cls()
        config.osrm_base_url = os.getenv("SMARTDRIVE_OSRM_URL", config.osrm_base_url)
        config.overpass_url = os.getenv("SMARTDRIVE_OVERPASS_URL", config.overpass_url)
        config.weather_url = os.getenv("SMARTDRIVE_WEATHER_URL", config.weather_url)
        config.nominatim_url = os.getenv("SMARTDRIVE_NOMINATIM_URL", config.nominatim_url)
        config.user_agent = os.getenv("SMARTDRIVE_USER_AGENT", config.user_agent)
        timeout = os.getenv("SMARTDRIVE_HTTP_TIMEOUT")
        if timeout:
            config.http_timeout_s = float(timeout)
        return config
