"""Tests for global map assembly."""
import pytest

from conftest import make_scanner
from packages.datatypes import Position, UnresolvableScannersError
from packages.registration_algos.mapping import GlobalMap, build_global_map
from packages.registration_algos.propagation import RegistrationPropagator


class TestBuildGlobalMap:

    def test_canonical_map_has_79_beacons(self, canonical_scanners):
        RegistrationPropagator().register(canonical_scanners)
        global_map = build_global_map(canonical_scanners)

        assert global_map.beacon_count == 79
        for s in ["-892,524,684", "459,-707,401", "-739,-1745,668", "1889,-1729,1762"]:
            assert Position.from_string(s) in global_map.beacons

    def test_largest_scanner_distance(self, canonical_scanners):
        RegistrationPropagator().register(canonical_scanners)
        assert build_global_map(canonical_scanners).largest_scanner_distance() == 3621

    def test_union_deduplicates(self):
        a = make_scanner(0, [Position(1, 1, 1), Position(2, 2, 2)], resolved=True)
        b = make_scanner(1, [Position(2, 2, 2), Position(3, 3, 3)], resolved=True)
        global_map = build_global_map([a, b])
        assert global_map.beacons == frozenset({Position(1, 1, 1), Position(2, 2, 2), Position(3, 3, 3)})

    def test_unresolved_scanner_rejected(self, generic_points):
        a = make_scanner(0, generic_points, resolved=True)
        b = make_scanner(1, generic_points)
        with pytest.raises(UnresolvableScannersError) as exc_info:
            build_global_map([a, b])
        assert exc_info.value.unresolved_ids == [1]

    def test_empty_map(self):
        global_map = build_global_map([])
        assert global_map.beacon_count == 0
        assert global_map.largest_scanner_distance() == 0

    def test_distance_with_single_scanner(self):
        assert GlobalMap(frozenset(), {0: Position(5, 5, 5)}).largest_scanner_distance() == 0
