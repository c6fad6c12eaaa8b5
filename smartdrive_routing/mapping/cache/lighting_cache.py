"""
Process-scoped cache of lighting scores keyed by path fingerprint.
"""

import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LightingCache:
    """
    In-memory mapping from path fingerprint to lighting score.

    The lock is held for a single read or write only, never across an
    external call. Concurrent misses for one fingerprint may both query and
    both write; the last write wins and both values are identical.
    """

    def __init__(self):
        self._scores: Dict[str, int] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, fingerprint: str) -> Optional[int]:
        with self._lock:
            score = self._scores.get(fingerprint)
            if score is None:
                self.misses += 1
            else:
                self.hits += 1
            return score

    def set(self, fingerprint: str, score: int) -> None:
        with self._lock:
            self._scores[fingerprint] = score

    def clear(self) -> None:
        """Drop all entries, e.g. between independent search sessions."""
        with self._lock:
            self._scores.clear()
            self.hits = 0
            self.misses = 0
        logger.info("Lighting cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._scores)

    def __contains__(self, fingerprint: str) -> bool:
        with self._lock:
            return fingerprint in self._scores

    def get_cache_stats(self) -> Dict[str, int]:
        with self._lock:
            return {
                'entries': len(self._scores),
                'hits': self.hits,
                'misses': self.misses
            }
