"""
Registration bring-up script that coordinates parsing, overlap matching,
propagation and map assembly for one scanner report.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from packages.datatypes.datatypes import Scanner
from packages.datatypes.errors import RegistrationError
from packages.registration_algos.matching.overlap import OverlapMatcher
from packages.registration_algos.propagation.propagator import RegistrationPropagator, RegistrationResult
from packages.registration_algos.mapping.global_map import GlobalMap, build_global_map
from packages.scanner_io.config import RegistrationConfig
from packages.scanner_io.parser import parse_scanner_report
from packages.scanner_io.export import write_map_csv
from packages.viz_map.map_plot import plot_global_map

# Setup JSON logging
logging.basicConfig(
    format='{"timestamp": "%(asctime)s", "level": "%(levelname)s", "message": %(message)s}',
    level=logging.INFO
)
logger = logging.getLogger(__name__)


class RegistrationBringUp:
    """
    Runs the full pipeline:
    1. Parse the scanner report
    2. Register every scanner against the reference
    3. Merge beacons into the global map
    """

    def __init__(self, config: Optional[RegistrationConfig] = None):
        self.config = config or RegistrationConfig()
        self.scanners: List[Scanner] = []
        self.result: Optional[RegistrationResult] = None

        self._propagator = RegistrationPropagator(
            matcher=OverlapMatcher(match_threshold=self.config.match_threshold),
            reference_id=self.config.reference_scanner_id,
            max_workers=self.config.max_workers,
            memoize_rejections=self.config.memoize_rejections
        )

        logger.info(json.dumps({
            "event": "bring_up_initialized",
            "match_threshold": self.config.match_threshold,
            "reference": self.config.reference_scanner_id,
            "max_workers": self.config.max_workers,
            "memoize_rejections": self.config.memoize_rejections
        }))

    def run(self, report_text: str) -> GlobalMap:
        """Parse, register and merge. Raises RegistrationError subclasses on failure."""
        self.scanners = parse_scanner_report(report_text)
        self.result = self._propagator.register(self.scanners)
        global_map = build_global_map(self.scanners)

        logger.info(json.dumps({
            "event": "map_built",
            "n_scanners": len(self.scanners),
            "n_beacons": global_map.beacon_count
        }))
        return global_map


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Scanner registration')
    parser.add_argument('input', type=str,
                        help='Scanner report file')
    parser.add_argument('--threshold', type=int, default=12,
                        help='Coinciding beacons needed for an overlap')
    parser.add_argument('--reference', type=int, default=None,
                        help='Scanner id fixed at the origin (default: first scanner)')
    parser.add_argument('--workers', type=int, default=1,
                        help='Matcher threads per sweep')
    parser.add_argument('--no-memo', action='store_true',
                        help='Retry pairs already found not to overlap')
    parser.add_argument('--csv', type=str, default=None,
                        help='Write the beacon map to this CSV file')
    parser.add_argument('--plot', type=str, default=None,
                        help='Write a 3D plot of the map to this PNG file')
    parser.add_argument('--max-distance', action='store_true',
                        help='Also print the largest Manhattan distance between scanners')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.getLogger().setLevel(args.log_level)

    try:
        config = RegistrationConfig(
            match_threshold=args.threshold,
            reference_scanner_id=args.reference,
            max_workers=args.workers,
            memoize_rejections=not args.no_memo
        )
        report_text = Path(args.input).read_text(encoding='utf-8')
        global_map = RegistrationBringUp(config).run(report_text)

        if args.csv:
            write_map_csv(global_map, args.csv)
        if args.plot:
            plot_global_map(global_map, args.plot)
    except (RegistrationError, ValueError, OSError) as e:
        logger.error(json.dumps({
            "event": "registration_failed",
            "error_type": type(e).__name__,
            "error": str(e)
        }))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    distance = global_map.largest_scanner_distance()
    logger.info(json.dumps({
        "event": "largest_scanner_distance",
        "distance": distance
    }))

    print(global_map.beacon_count)
    if args.max_distance:
        print(distance)
    return 0


if __name__ == "__main__":
    sys.exit(main())
