"""
Overlap matcher.
Finds the orientation and translation under which an unplaced scanner's
beacons coincide with a placed scanner's absolute beacons, by voting over
every candidate translation.
"""

import json
import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

import numpy as np

from packages.datatypes.datatypes import Position, Scanner
from packages.datatypes.errors import AmbiguousMatchError, RegistrationError
from ..orientation.rotations import ORIENTATIONS, ORIENTATION_MATRICES

logger = logging.getLogger(__name__)

MATCH_THRESHOLD = 12


@dataclass(frozen=True)
class OverlapMatch:
    """Placement of a candidate scanner found by the matcher."""
    scanner_position: Position
    absolute_beacons: FrozenSet[Position]
    orientation: Tuple[int, int]  # (face, spin)
    votes: int                    # beacon pairs agreeing on scanner_position


def _reorient(local: np.ndarray, orientation: Tuple[int, int]) -> np.ndarray:
    """Apply one orientation to every row of an (n, 3) array."""
    return local @ ORIENTATION_MATRICES[orientation].T


def all_beacon_orientations(scanner: Scanner) -> List[FrozenSet[Position]]:
    """The scanner's local beacons in each of the 24 orientations, in ORIENTATIONS order."""
    local = scanner.local_array()
    return [
        frozenset(Position.from_array(row) for row in _reorient(local, o))
        for o in ORIENTATIONS
    ]


class OverlapMatcher:
    """
    Matches an unplaced scanner against a placed one.
    Stateless apart from its threshold; never mutates the scanners it is given.
    """

    def __init__(self, match_threshold: int = MATCH_THRESHOLD):
        """
        Args:
            match_threshold: Minimum number of coinciding beacons to accept a placement
        """
        if match_threshold < 1:
            raise ValueError(f"match_threshold must be positive, got {match_threshold}")
        self.match_threshold = match_threshold

    def find_overlap(self, known: Scanner, candidate: Scanner) -> Optional[OverlapMatch]:
        """
        Search all orientations of `candidate` for a translation shared by at
        least `match_threshold` beacon pairs.

        Args:
            known: Scanner with absolute beacons
            candidate: Scanner to place

        Returns:
            OverlapMatch on success. None when the scanners do not overlap, or
            when `candidate` is already resolved.

        Raises:
            RegistrationError: If `known` has no absolute beacons
            AmbiguousMatchError: If one orientation yields several qualifying translations
        """
        if not known.is_resolved:
            raise RegistrationError(f"Scanner {known.id} must be resolved before matching")

        if candidate.is_resolved:
            logger.debug(json.dumps({
                "event": "overlap_skipped",
                "known": known.id,
                "candidate": candidate.id
            }))
            return None

        known_beacons = known.absolute_array()
        local = candidate.local_array()
        if len(known_beacons) < self.match_threshold or len(local) < self.match_threshold:
            return None

        for orientation in ORIENTATIONS:
            oriented = _reorient(local, orientation)

            # Every (known, oriented) pair votes for known - oriented
            diffs = (known_beacons[:, None, :] - oriented[None, :, :]).reshape(-1, 3)
            vectors, counts = np.unique(diffs, axis=0, return_counts=True)
            qualifying = counts >= self.match_threshold
            n_qualifying = int(np.count_nonzero(qualifying))

            if n_qualifying == 0:
                continue
            if n_qualifying > 1:
                raise AmbiguousMatchError(
                    known.id,
                    candidate.id,
                    orientation,
                    [Position.from_array(v) for v in vectors[qualifying]]
                )

            idx = int(np.flatnonzero(qualifying)[0])
            translation = vectors[idx]
            absolute = oriented + translation

            match = OverlapMatch(
                scanner_position=Position.from_array(translation),
                absolute_beacons=frozenset(Position.from_array(row) for row in absolute),
                orientation=orientation,
                votes=int(counts[idx])
            )

            logger.info(json.dumps({
                "event": "overlap_found",
                "known": known.id,
                "candidate": candidate.id,
                "orientation": list(orientation),
                "position": [int(c) for c in translation],
                "votes": match.votes
            }))
            return match

        return None
