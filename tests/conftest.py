"""
Shared test fixtures for registration tests.
"""
import sys
from pathlib import Path

import pytest

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from packages.datatypes.datatypes import Position, Scanner
from packages.scanner_io.parser import parse_scanner_report

DATA_DIR = Path(__file__).parent / "data"

# Generic points: pairwise distinct coordinates, no symmetry under any rotation
GENERIC_POINTS = [
    Position(3 * i * i + 17 * i - 401, 29 * i - 2 * i * i + 113, i * i * i - 40 * i + 7)
    for i in range(1, 21)
]


@pytest.fixture
def canonical_report_path() -> Path:
    return DATA_DIR / "canonical_report.txt"


@pytest.fixture
def canonical_report(canonical_report_path) -> str:
    return canonical_report_path.read_text()


@pytest.fixture
def canonical_scanners(canonical_report):
    return parse_scanner_report(canonical_report)


@pytest.fixture
def generic_points():
    return list(GENERIC_POINTS)


def make_scanner(scanner_id, beacons, resolved=False):
    """Build a scanner, optionally already placed at the origin."""
    scanner = Scanner(id=scanner_id, local_beacons=frozenset(beacons))
    if resolved:
        scanner.set_absolute(Position(0, 0, 0), scanner.local_beacons, (0, 0))
    return scanner
