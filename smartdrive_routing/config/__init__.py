"""
Configuration management for SmartDrive routing.
"""

from .routing_config import RoutingConfig
from .driving_profiles import (
    ProfileId,
    PROFILES,
    DEFAULT_PROFILE_ID,
    get_profile,
    get_profile_from_string,
    get_available_profiles,
    list_profiles
)

__all__ = [
    'RoutingConfig',
    'ProfileId',
    'PROFILES',
    'DEFAULT_PROFILE_ID',
    'get_profile',
    'get_profile_from_string',
    'get_available_profiles',
    'list_profiles'
]
