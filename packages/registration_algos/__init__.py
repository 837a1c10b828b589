"""
Core registration algorithms package.
"""

from .orientation.rotations import orient, ORIENTATIONS, ORIENTATION_MATRICES
from .matching.overlap import OverlapMatcher, OverlapMatch, MATCH_THRESHOLD
from .propagation.propagator import RegistrationPropagator, RegistrationResult
from .mapping.global_map import GlobalMap, build_global_map

__all__ = [
    'orient',
    'ORIENTATIONS',
    'ORIENTATION_MATRICES',
    'OverlapMatcher',
    'OverlapMatch',
    'MATCH_THRESHOLD',
    'RegistrationPropagator',
    'RegistrationResult',
    'GlobalMap',
    'build_global_map',
]
