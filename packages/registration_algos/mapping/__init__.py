"""
Global beacon map assembly.
"""

from .global_map import GlobalMap, build_global_map

__all__ = ['GlobalMap', 'build_global_map']
