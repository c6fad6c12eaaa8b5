"""
Route ranking by driving profile.
"""

from .ranking_engine import RankingEngine

__all__ = [
    'RankingEngine'
]
