"""
Parser for scanner reports.

Format:
    --- scanner 0 ---
    404,-588,-901
    528,-643,409

    --- scanner 1 ---
    ...
"""

import json
import logging
import re
from pathlib import Path
from typing import List, Optional, Set, Union

from packages.datatypes.datatypes import Position, Scanner
from packages.datatypes.errors import MalformedInputError

logger = logging.getLogger(__name__)

HEADER_RE = re.compile(r'^---\s+scanner\s+(\d+)\s+---$', re.ASCII)
COORDINATE_RE = re.compile(r'^-?\d+$', re.ASCII)

# Coordinates must fit a signed 32-bit integer
COORDINATE_LIMIT = 2 ** 31


def _parse_coordinate(token: str, line: str, line_number: int) -> int:
    if COORDINATE_RE.match(token) is None:
        raise MalformedInputError(f"non-integer coordinate '{token}' in '{line}'", line_number)
    value = int(token)
    if not -COORDINATE_LIMIT <= value < COORDINATE_LIMIT:
        raise MalformedInputError(f"coordinate {value} out of range in '{line}'", line_number)
    return value


def _parse_beacon(line: str, line_number: int) -> Position:
    tokens = line.split(',')
    if len(tokens) != 3:
        raise MalformedInputError(
            f"expected 3 comma-separated coordinates, got {len(tokens)}: '{line}'",
            line_number
        )
    return Position(*(_parse_coordinate(t, line, line_number) for t in tokens))


def parse_scanner_report(text: str) -> List[Scanner]:
    """
    Parse a scanner report into Scanners, in input order.

    Raises:
        MalformedInputError: On a bad header or coordinate line, a beacon line
            outside a scanner block, a duplicate scanner id, or no scanners
    """
    scanners: List[Scanner] = []
    seen_ids: Set[int] = set()
    current_id: Optional[int] = None
    current_beacons: Set[Position] = set()
    in_block = False

    def close_block():
        if current_id is None:
            return
        if not current_beacons:
            logger.warning(json.dumps({
                "event": "empty_scanner",
                "scanner_id": current_id
            }))
        scanners.append(Scanner(id=current_id, local_beacons=frozenset(current_beacons)))

    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()

        if not line:
            in_block = False
            continue

        if line.startswith('---'):
            match = HEADER_RE.match(line)
            if match is None:
                raise MalformedInputError(f"bad scanner header '{line}'", line_number)
            close_block()
            current_id = int(match.group(1))
            if current_id in seen_ids:
                raise MalformedInputError(f"duplicate scanner id {current_id}", line_number)
            seen_ids.add(current_id)
            current_beacons = set()
            in_block = True
            continue

        if not in_block:
            raise MalformedInputError(f"expected scanner header, found '{line}'", line_number)

        current_beacons.add(_parse_beacon(line, line_number))

    close_block()

    if not scanners:
        raise MalformedInputError("no scanners found in input")

    logger.info(json.dumps({
        "event": "report_parsed",
        "n_scanners": len(scanners),
        "n_beacons": sum(len(s.local_beacons) for s in scanners)
    }))
    return scanners


def read_scanner_report(path: Union[str, Path]) -> List[Scanner]:
    """Read and parse a scanner report file."""
    return parse_scanner_report(Path(path).read_text(encoding='utf-8'))
