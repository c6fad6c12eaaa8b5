"""
Path sampling utilities used to keep external queries small.
"""

import json
import math
from typing import List, Sequence

from .models import GeoPoint


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def sample_path(path: Sequence[GeoPoint], count: int) -> List[GeoPoint]:
    """
    Pick `count` evenly spaced points from a path.

    Deterministic: the same path and count always give the same samples.
    The first and last points of the path are always included when count > 1.

    Args:
        path: Ordered route points
        count: Number of samples wanted

    Returns:
        The whole path (as a new list) if it has at most `count` points,
        otherwise exactly `count` points in path order.
    """
    if count < 1:
        raise ValueError("count must be at least 1")

    points = [GeoPoint.from_any(p) for p in path]
    if len(points) <= count:
        return points

    if count == 1:
        return [points[0]]

    step = (len(points) - 1) / (count - 1)
    return [points[round_half_up(i * step)] for i in range(count)]


def path_fingerprint(samples: Sequence[GeoPoint], precision: int = 4) -> str:
    """
    Build a coarse cache key from sampled coordinates.

    Coordinates are formatted to `precision` decimals (4 decimals is ~11 m),
    so near-identical paths share a key.
    """
    return json.dumps([f"{p.lat:.{precision}f},{p.lng:.{precision}f}" for p in samples])
