"""
Pure functions for reorienting integer positions.

An orientation is a (face, spin) pair. `face` picks which cube face now points
along +x, `spin` is the number of extra quarter turns about the y-axis:
    0. Original facing.
    1. One rotation around the x-axis.
    2. Two rotations around the x-axis.
    3. Three rotations around the x-axis.
    4. One rotation around the y-axis, then one around the x-axis.
    5. Three rotations around the y-axis, then one around the x-axis.
"""

from typing import Dict, List, Tuple

import numpy as np

from packages.datatypes.datatypes import Position

N_FACES = 6
N_SPINS = 4


def rotate_around_x_axis(p: Position, rotations: int) -> Position:
    """Quarter turns about x: (x, y, z) -> (x, z, -y)."""
    y, z = p.y, p.z
    for _ in range(rotations):
        y, z = z, -y
    return Position(p.x, y, z)


def rotate_around_y_axis(p: Position, rotations: int) -> Position:
    """Quarter turns about y: (x, y, z) -> (z, y, -x)."""
    x, z = p.x, p.z
    for _ in range(rotations):
        x, z = z, -x
    return Position(x, p.y, z)


# face -> (y rotations, x rotations) applied before the spin
_FACE_PRELUDE: Dict[int, Tuple[int, int]] = {
    0: (0, 0),
    1: (0, 1),
    2: (0, 2),
    3: (0, 3),
    4: (1, 1),
    5: (3, 1),
}


def orient(p: Position, face: int, spin: int) -> Position:
    """
    Reorient `p` to one of the 24 orientations.

    Raises:
        ValueError: If face is not in 0..5 or spin is not in 0..3
    """
    if face not in _FACE_PRELUDE:
        raise ValueError(f"Invalid face: {face}. Must be 0-{N_FACES - 1}.")
    if not 0 <= spin < N_SPINS:
        raise ValueError(f"Invalid spin: {spin}. Must be 0-{N_SPINS - 1}.")

    y_turns, x_turns = _FACE_PRELUDE[face]
    faced = rotate_around_x_axis(rotate_around_y_axis(p, y_turns), x_turns)
    return rotate_around_y_axis(faced, spin)


ORIENTATIONS: List[Tuple[int, int]] = [
    (face, spin) for face in range(N_FACES) for spin in range(N_SPINS)
]


def rotation_matrix(face: int, spin: int) -> np.ndarray:
    """
    Integer matrix R such that orient(p, face, spin) == R @ p.
    Columns are the oriented basis vectors.
    """
    basis = [Position(1, 0, 0), Position(0, 1, 0), Position(0, 0, 1)]
    columns = [orient(e, face, spin).as_array() for e in basis]
    return np.stack(columns, axis=1)


ORIENTATION_MATRICES: Dict[Tuple[int, int], np.ndarray] = {
    o: rotation_matrix(*o) for o in ORIENTATIONS
}
