"""
Registration propagator.
Grows the set of placed scanners outward from a reference scanner by sweeping
every placed x unplaced pair through the overlap matcher until no scanner is
left, or a sweep places nothing.
"""

import json
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from packages.datatypes.datatypes import ORIGIN, Position, Scanner
from packages.datatypes.errors import RegistrationError, UnresolvableScannersError
from ..matching.overlap import OverlapMatch, OverlapMatcher

logger = logging.getLogger(__name__)

IDENTITY_ORIENTATION = (0, 0)


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of a full registration run."""
    scanner_positions: Dict[int, Position]            # scanner id -> absolute position
    scanner_orientations: Dict[int, Tuple[int, int]]  # scanner id -> (face, spin)
    sweeps: int
    match_attempts: int
    memoized_skips: int


class RegistrationPropagator:
    """
    Places every scanner in the frame of a reference scanner.

    Scanners are addressed by their index in the list handed to `register`;
    placements are committed through `Scanner.set_absolute`, once per scanner.
    """

    def __init__(
        self,
        matcher: Optional[OverlapMatcher] = None,
        reference_id: Optional[int] = None,
        max_workers: int = 1,
        memoize_rejections: bool = True
    ):
        """
        Args:
            matcher: Overlap matcher to use (default threshold if omitted)
            reference_id: Scanner fixed at the origin; first scanner if None
            max_workers: Threads used for matcher calls within a sweep
            memoize_rejections: Skip pairs already found not to overlap
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.matcher = matcher or OverlapMatcher()
        self.reference_id = reference_id
        self.max_workers = max_workers
        self.memoize_rejections = memoize_rejections
        self._commit_lock = threading.Lock()

    def register(self, scanners: List[Scanner]) -> RegistrationResult:
        """
        Resolve every scanner's absolute position and beacons in place.

        Returns:
            RegistrationResult with positions, orientations and search counters

        Raises:
            RegistrationError: If reference_id is not among the scanners, or another
                scanner is resolved before the reference
            UnresolvableScannersError: If a sweep makes no progress with scanners left
            AmbiguousMatchError: Propagated from the matcher
        """
        if not scanners:
            return RegistrationResult({}, {}, sweeps=0, match_attempts=0, memoized_skips=0)

        ref_idx = self._reference_index(scanners)
        reference = scanners[ref_idx]
        if not reference.is_resolved:
            premature = [s.id for s in scanners if s.is_resolved]
            if premature:
                raise RegistrationError(
                    f"Scanners {premature} are resolved before reference scanner {reference.id}"
                )
            reference.set_absolute(ORIGIN, reference.local_beacons, IDENTITY_ORIENTATION)

        rejected: Set[Tuple[int, int]] = set()
        sweeps = 0
        attempts = 0
        skips = 0

        while True:
            unresolved = [i for i, s in enumerate(scanners) if not s.is_resolved]
            if not unresolved:
                break

            resolved = [i for i, s in enumerate(scanners) if s.is_resolved]
            sweeps += 1
            placed_this_sweep = 0

            for known_idx in resolved:
                pending = []
                for cand_idx in unresolved:
                    if scanners[cand_idx].is_resolved:
                        continue
                    if self.memoize_rejections and (known_idx, cand_idx) in rejected:
                        skips += 1
                        continue
                    pending.append(cand_idx)

                attempts += len(pending)
                for cand_idx, match in self._match_all(scanners, known_idx, pending):
                    if match is None:
                        rejected.add((known_idx, cand_idx))
                    elif self._commit(scanners[cand_idx], match):
                        placed_this_sweep += 1

            logger.info(json.dumps({
                "event": "sweep_complete",
                "sweep": sweeps,
                "placed": placed_this_sweep,
                "remaining": sum(1 for s in scanners if not s.is_resolved)
            }))

            if placed_this_sweep == 0:
                stuck = [scanners[i].id for i in unresolved]
                logger.error(json.dumps({
                    "event": "registration_stalled",
                    "unresolved": stuck
                }))
                raise UnresolvableScannersError(stuck)

        logger.info(json.dumps({
            "event": "registration_complete",
            "n_scanners": len(scanners),
            "sweeps": sweeps,
            "match_attempts": attempts,
            "memoized_skips": skips
        }))

        return RegistrationResult(
            scanner_positions={s.id: s.absolute_position for s in scanners},
            scanner_orientations={s.id: s.orientation for s in scanners},
            sweeps=sweeps,
            match_attempts=attempts,
            memoized_skips=skips
        )

    def _reference_index(self, scanners: List[Scanner]) -> int:
        if self.reference_id is None:
            return 0
        for idx, scanner in enumerate(scanners):
            if scanner.id == self.reference_id:
                return idx
        raise RegistrationError(f"Reference scanner {self.reference_id} not found")

    def _match_all(
        self,
        scanners: List[Scanner],
        known_idx: int,
        candidates: List[int]
    ) -> List[Tuple[int, Optional[OverlapMatch]]]:
        """Run the matcher for one known scanner against each candidate index."""
        known = scanners[known_idx]
        if self.max_workers == 1 or len(candidates) < 2:
            return [(c, self.matcher.find_overlap(known, scanners[c])) for c in candidates]

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [
                (c, pool.submit(self.matcher.find_overlap, known, scanners[c]))
                for c in candidates
            ]
            return [(c, f.result()) for c, f in futures]

    def _commit(self, scanner: Scanner, match: OverlapMatch) -> bool:
        """Write a match into the scanner unless it was placed already."""
        with self._commit_lock:
            if scanner.is_resolved:
                return False
            scanner.set_absolute(match.scanner_position, match.absolute_beacons, match.orientation)
            return True
