"""
Pydantic schemas for the SmartDrive routing API.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator, model_validator

from smartdrive_routing.config import get_profile_from_string
from smartdrive_routing.data import validate_travel_date, validate_travel_time


class LocationRequest(BaseModel):
    """A location given either as coordinates or as a free-text query."""
    latitude: Optional[float] = Field(default=None, ge=-90, le=90, description="Latitude coordinate")
    longitude: Optional[float] = Field(default=None, ge=-180, le=180, description="Longitude coordinate")
    label: Optional[str] = Field(default=None, description="Display name used when the provider gives none")
    query: Optional[str] = Field(default=None, description="Place name to geocode instead of coordinates")

    @model_validator(mode='after')
    def validate_coordinates_or_query(self):
        """Require a full coordinate pair or a query."""
        has_coordinates = self.latitude is not None and self.longitude is not None
        if not has_coordinates and not (self.query and self.query.strip()):
            raise ValueError('Provide latitude and longitude, or a query to geocode')
        return self


class PlanRequest(BaseModel):
    """Request model for planning and ranking routes."""
    origin: LocationRequest = Field(..., description="Starting location")
    destination: LocationRequest = Field(..., description="Destination location")
    profile: str = Field(default="safe", description="Driving profile: 'fast', 'safe' or 'scenic'")
    travel_date: Optional[str] = Field(default=None, description="Travel date YYYY-MM-DD for forecast weather")
    travel_time: Optional[str] = Field(default=None, description="Travel time HH:MM")

    @field_validator('profile')
    @classmethod
    def validate_profile(cls, v):
        """Only catalog profiles are accepted."""
        return get_profile_from_string(v).id

    @field_validator('travel_time')
    @classmethod
    def validate_time(cls, v):
        return validate_travel_time(v)

    @field_validator('travel_date')
    @classmethod
    def validate_date(cls, v):
        return validate_travel_date(v)


class ProfileWeightsSchema(BaseModel):
    eta: int = Field(..., ge=0)
    activity: int = Field(..., ge=0)
    lighting: int = Field(..., ge=0)


class ProfileSchema(BaseModel):
    """A driving profile from the catalog."""
    id: str
    name: str
    description: str
    weights: ProfileWeightsSchema


class WeatherSchema(BaseModel):
    temperature_celsius: float = Field(..., description="Temperature in degrees Celsius")
    wmo_code: int = Field(..., description="WMO weather code, -1 when unavailable")
    description: str = Field(..., description="Human readable weather")


class WaypointWeatherSchema(BaseModel):
    name: str
    weather: WeatherSchema


class RouteWeatherSchema(BaseModel):
    origin: WeatherSchema
    destination: WeatherSchema
    waypoints: List[WaypointWeatherSchema] = Field(default_factory=list)


class RouteSchema(BaseModel):
    """An enriched route alternative."""
    id: str = Field(..., description="Stable route id")
    source: str
    destination: str
    eta_minutes: int = Field(..., ge=0)
    distance_km: float = Field(..., ge=0)
    activity_score: int = Field(..., ge=0, le=10)
    lighting_score: int = Field(..., ge=2, le=10)
    road_type: str = Field(..., description="Highway, Scenic or Backroads")
    description: str
    weather: Optional[RouteWeatherSchema] = None
    route_geojson: Optional[Dict[str, Any]] = Field(default=None, description="Route as GeoJSON FeatureCollection")

    @field_validator('road_type')
    @classmethod
    def validate_road_type(cls, v):
        if v not in ('Highway', 'Scenic', 'Backroads'):
            raise ValueError("road_type must be 'Highway', 'Scenic' or 'Backroads'")
        return v


class RankedRouteSchema(BaseModel):
    rank: int = Field(..., ge=1)
    reason: str = Field(..., description="Why the route holds this position")
    route: RouteSchema


class PlanResponse(BaseModel):
    """Response model for a route search."""
    success: bool = Field(..., description="Whether planning succeeded")
    message: str = Field(..., description="Status message")
    profile: Optional[ProfileSchema] = None
    travel_time: Optional[str] = None
    routes: List[RankedRouteSchema] = Field(default_factory=list)


class RerankRequest(BaseModel):
    """Re-rank already enriched routes without contacting external services."""
    routes: List[RouteSchema] = Field(..., description="Routes as returned by /plan")
    profile: str = Field(default="safe")
    travel_time: Optional[str] = None

    @field_validator('profile')
    @classmethod
    def validate_profile(cls, v):
        return get_profile_from_string(v).id

    @field_validator('travel_time')
    @classmethod
    def validate_time(cls, v):
        return validate_travel_time(v)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    lighting_cache_entries: int = Field(..., description="Cached lighting scores")


class ErrorResponse(BaseModel):
    """Error response model."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Detailed error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
