"""
Pure functions for merging resolved scanners into one beacon map.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Dict, FrozenSet, List

from packages.datatypes.datatypes import Position, Scanner
from packages.datatypes.errors import UnresolvableScannersError


@dataclass(frozen=True)
class GlobalMap:
    """Deduplicated beacons and scanner positions in the reference frame."""
    beacons: FrozenSet[Position]
    scanner_positions: Dict[int, Position]  # scanner id -> position

    @property
    def beacon_count(self) -> int:
        return len(self.beacons)

    def largest_scanner_distance(self) -> int:
        """Largest Manhattan distance between any two scanners (0 if fewer than two)."""
        return max(
            (a.manhattan_distance(b) for a, b in combinations(self.scanner_positions.values(), 2)),
            default=0
        )


def build_global_map(scanners: List[Scanner]) -> GlobalMap:
    """
    Union every scanner's absolute beacons.

    Raises:
        UnresolvableScannersError: If any scanner has not been placed
    """
    unresolved = [s.id for s in scanners if not s.is_resolved]
    if unresolved:
        raise UnresolvableScannersError(unresolved)

    beacons = frozenset().union(*(s.absolute_beacons for s in scanners))
    return GlobalMap(
        beacons=beacons,
        scanner_positions={s.id: s.absolute_position for s in scanners}
    )
