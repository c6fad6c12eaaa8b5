"""
Core value types shared across the enrichment and ranking pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class GeoPoint:
    """A geographic point in floating-point degrees."""

    lat: float
    lng: float

    @classmethod
    def from_any(cls, value: Any) -> 'GeoPoint':
        """
        Normalise an external coordinate representation into a GeoPoint.

        Accepts a GeoPoint, a (lat, lng) pair, or a mapping with
        'lat'/'lng' or 'lat'/'lon' keys.

        Raises:
            ValueError: If the value cannot be interpreted as a coordinate
        """
        if isinstance(value, GeoPoint):
            return value
        if isinstance(value, Mapping):
            lng = value.get('lng', value.get('lon'))
            if 'lat' not in value or lng is None:
                raise ValueError(f"Mapping is not a coordinate: {value!r}")
            return cls(float(value['lat']), float(lng))
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(float(value[0]), float(value[1]))
        raise ValueError(f"Cannot convert {type(value).__name__} to GeoPoint")

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lng)


# Ordered start -> end polyline of a route
Path = Sequence[GeoPoint]


@dataclass(frozen=True)
class WeatherPoint:
    """Weather at a single coordinate. wmo_code -1 marks the unavailable sentinel."""

    temperature_celsius: float
    wmo_code: int
    description: str

    @classmethod
    def unavailable(cls) -> 'WeatherPoint':
        return cls(temperature_celsius=0.0, wmo_code=-1, description="Unavailable")

    @property
    def is_available(self) -> bool:
        return self.wmo_code != -1


@dataclass(frozen=True)
class CityWaypoint:
    """A named settlement found near the route."""

    name: str
    lat: float
    lng: float

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)


@dataclass(frozen=True)
class WaypointWeather:
    name: str
    weather: WeatherPoint


@dataclass(frozen=True)
class RouteWeather:
    """Weather along a route: both endpoints plus any waypoint cities."""

    origin: WeatherPoint
    destination: WeatherPoint
    waypoints: Tuple[WaypointWeather, ...] = ()

    @classmethod
    def unavailable(cls) -> 'RouteWeather':
        return cls(
            origin=WeatherPoint.unavailable(),
            destination=WeatherPoint.unavailable(),
            waypoints=()
        )


@dataclass(frozen=True)
class ProfileWeights:
    """Non-negative integer multipliers for the ranking criteria."""

    eta: int
    activity: int
    lighting: int

    def __post_init__(self):
        for name in ('eta', 'activity', 'lighting'):
            if getattr(self, name) < 0:
                raise ValueError(f"Profile weight '{name}' must be non-negative")


@dataclass(frozen=True)
class DrivingProfile:
    id: str
    name: str
    description: str
    weights: ProfileWeights


class RoadType(Enum):
    """Coarse classification of a route alternative."""
    HIGHWAY = "Highway"
    SCENIC = "Scenic"
    BACKROADS = "Backroads"


@dataclass(frozen=True)
class RawRoute:
    """
    One alternative returned by the directions provider, normalised at ingestion.

    `geometry` is the provider's own representation and is passed through untouched.
    """

    path: Tuple[GeoPoint, ...]
    duration_s: float
    distance_m: float
    start_address: str = ""
    end_address: str = ""
    summary: str = ""
    geometry: Optional[Any] = field(default=None, compare=False)


@dataclass(frozen=True)
class EnrichedRoute:
    """A route alternative with its derived safety and comfort signals."""

    id: str
    source: str
    destination: str
    eta_minutes: int
    distance_km: float
    activity_score: int
    lighting_score: int
    road_type: RoadType
    description: str
    weather: Optional[RouteWeather] = None
    raw_geometry: Optional[Any] = field(default=None, compare=False)

    def get_summary(self) -> dict:
        """Flat summary used for logging and the CLI."""
        return {
            'id': self.id,
            'road_type': self.road_type.value,
            'eta_minutes': self.eta_minutes,
            'distance_km': self.distance_km,
            'activity_score': self.activity_score,
            'lighting_score': self.lighting_score,
        }


@dataclass(frozen=True)
class RankedRoute:
    """A route at its position in a ranking, with the one-line reason shown to the user."""

    rank: int
    route: EnrichedRoute
    reason: str
