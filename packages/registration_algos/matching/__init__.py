"""
Overlap search between a placed scanner and an unplaced one.
"""

from .overlap import OverlapMatcher, OverlapMatch, all_beacon_orientations, MATCH_THRESHOLD

__all__ = ['OverlapMatcher', 'OverlapMatch', 'all_beacon_orientations', 'MATCH_THRESHOLD']
