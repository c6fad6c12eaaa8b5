"""
SmartDrive Routing

Recommends driving routes by enriching route alternatives with lighting,
activity and weather signals and ranking them for a driving profile.

## Quick Start

```python
import asyncio
from smartdrive_routing import RoutePlanner, GeoPoint

async def main():
    async with RoutePlanner() as planner:
        result = await planner.plan(
            GeoPoint(51.2562, 7.1508),   # Wuppertal
            GeoPoint(51.2277, 6.7735),   # Duesseldorf
            profile_id="safe",
            time="21:30"
        )
    for ranked in result.routes:
        print(ranked.rank, ranked.route.id, ranked.reason)

asyncio.run(main())
```

## Main Components

- **RoutePlanner**: Main interface for a route search
- **RouteEnrichmentPipeline**: Per-route lighting, activity and weather
- **LightingEstimator**: OSM-based lighting score with caching and retries
- **WeatherAggregator**: Concurrent weather for endpoints and waypoint cities
- **RankingEngine**: Profile-weighted ranking and explanations

## Architecture

- `algorithms/`: Lighting scoring, ranking and retry policy
- `enrichment/`: City discovery, weather aggregation, route enrichment
- `clients/`: Async clients for OSRM, Overpass, Open-Meteo and Nominatim
- `mapping/`: Process-scoped caches
- `data/`: Value types and path sampling
- `config/`: Configuration and the driving profile catalog
"""

from .algorithms import LightingEstimator, RankingEngine
from .config import RoutingConfig, get_profile_from_string, list_profiles
from .data import GeoPoint, EnrichedRoute, RankedRoute, RouteWeather, WeatherPoint
from .enrichment import CityFinder, WeatherAggregator, RouteEnrichmentPipeline
from .exceptions import (
    SmartDriveError,
    ExternalServiceError,
    DirectionsUnavailableError,
    UnknownProfileError,
    InvalidTravelTimeError
)
from .mapping import LightingCache
from .planner import RoutePlanner, PlanResult

# Version information
__version__ = "1.0.0"
__author__ = "SmartDrive Routing Team"

# Public API
__all__ = [
    # Main interfaces
    'RoutePlanner',
    'PlanResult',
    'RoutingConfig',

    # Pipeline components
    'RouteEnrichmentPipeline',
    'LightingEstimator',
    'CityFinder',
    'WeatherAggregator',
    'RankingEngine',
    'LightingCache',

    # Data types
    'GeoPoint',
    'EnrichedRoute',
    'RankedRoute',
    'RouteWeather',
    'WeatherPoint',

    # Profiles
    'get_profile_from_string',
    'list_profiles',

    # Errors
    'SmartDriveError',
    'ExternalServiceError',
    'DirectionsUnavailableError',
    'UnknownProfileError',
    'InvalidTravelTimeError',

    # Metadata
    '__version__',
    '__author__'
]
