"""
Map data caching for SmartDrive routing.

This module contains:
- Process-scoped lighting score cache
"""

from .cache.lighting_cache import LightingCache

__all__ = [
    'LightingCache'
]
