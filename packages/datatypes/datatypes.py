"""
Core datatypes for scanner registration.
Positions are frozen; a Scanner's local data is frozen and its absolute
fields are written exactly once.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional

import numpy as np

from .errors import RegistrationError


@dataclass(frozen=True)
class Position:
    """Integer point in 3D space. Used for beacons and scanner positions."""
    x: int
    y: int
    z: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Position") -> "Position":
        """Vector to move from `other` to `self`."""
        return Position(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Position":
        return Position(-self.x, -self.y, -self.z)

    def manhattan_distance(self, other: "Position") -> int:
        """Sum of absolute per-axis differences."""
        d = self - other
        return abs(d.x) + abs(d.y) + abs(d.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.int64)

    @classmethod
    def from_array(cls, arr) -> "Position":
        """Build from any length-3 sequence or numpy vector."""
        if len(arr) != 3:
            raise ValueError(f"Position needs 3 components, got {len(arr)}")
        return cls(int(arr[0]), int(arr[1]), int(arr[2]))

    @classmethod
    def from_string(cls, s: str) -> "Position":
        """Build from a comma-separated triple such as '11,-22,-33'."""
        tokens = s.split(',')
        if len(tokens) != 3:
            raise ValueError(f"Cannot create a Position from string '{s}'")
        return cls(*(int(t) for t in tokens))


ORIGIN = Position(0, 0, 0)

_WRITE_ONCE_FIELDS = frozenset({'local_beacons', 'absolute_position', 'absolute_beacons', 'orientation'})


@dataclass
class Scanner:
    """
    One sensor and the beacons it reports in its own frame.

    `absolute_position` and `absolute_beacons` stay None until the scanner is
    placed in the global frame, then never change.
    """
    id: int
    local_beacons: FrozenSet[Position]
    absolute_position: Optional[Position] = None
    absolute_beacons: Optional[FrozenSet[Position]] = None
    orientation: Optional[tuple] = field(default=None, compare=False)  # (face, spin)

    def __post_init__(self):
        object.__setattr__(self, 'local_beacons', frozenset(self.local_beacons))

    def __setattr__(self, name, value):
        # Local data and placement are write-once; placement goes through set_absolute
        if name in _WRITE_ONCE_FIELDS and name in self.__dict__:
            raise AttributeError(f"Scanner.{name} cannot be reassigned")
        object.__setattr__(self, name, value)

    @property
    def is_resolved(self) -> bool:
        return self.absolute_beacons is not None

    def set_absolute(
        self,
        position: Position,
        beacons: Iterable[Position],
        orientation: Optional[tuple] = None
    ) -> None:
        """
        Commit the scanner's placement in the global frame.

        Raises:
            RegistrationError: If the scanner is already resolved
        """
        if self.is_resolved:
            raise RegistrationError(f"Scanner {self.id} is already resolved")
        absolute_beacons = frozenset(beacons)
        object.__setattr__(self, 'absolute_position', position)
        object.__setattr__(self, 'orientation', orientation)
        object.__setattr__(self, 'absolute_beacons', absolute_beacons)

    def local_array(self) -> np.ndarray:
        """Local beacons as an (n, 3) int64 array."""
        if not self.local_beacons:
            return np.zeros((0, 3), dtype=np.int64)
        return np.array([[b.x, b.y, b.z] for b in self.local_beacons], dtype=np.int64)

    def absolute_array(self) -> np.ndarray:
        """Absolute beacons as an (n, 3) int64 array."""
        if self.absolute_beacons is None:
            raise RegistrationError(f"Scanner {self.id} has no absolute beacons")
        if not self.absolute_beacons:
            return np.zeros((0, 3), dtype=np.int64)
        return np.array([[b.x, b.y, b.z] for b in self.absolute_beacons], dtype=np.int64)
