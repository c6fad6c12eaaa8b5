"""
In-memory caches.
"""

from .lighting_cache import LightingCache

__all__ = [
    'LightingCache'
]
