"""
The 24 axis-aligned orientations of a scanner.
"""

from .rotations import (
    rotate_around_x_axis,
    rotate_around_y_axis,
    orient,
    rotation_matrix,
    ORIENTATIONS,
    ORIENTATION_MATRICES,
)

__all__ = [
    'rotate_around_x_axis',
    'rotate_around_y_axis',
    'orient',
    'rotation_matrix',
    'ORIENTATIONS',
    'ORIENTATION_MATRICES',
]
