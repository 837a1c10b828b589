"""Tests for the registration bring-up script."""
import pandas as pd
import pytest

from Registration_bring_up import RegistrationBringUp, main
from packages.datatypes import Position, UnresolvableScannersError
from packages.scanner_io.config import RegistrationConfig


class TestRegistrationBringUp:

    def test_run_canonical(self, canonical_report):
        bring_up = RegistrationBringUp()
        global_map = bring_up.run(canonical_report)

        assert global_map.beacon_count == 79
        assert global_map.scanner_positions[2] == Position(1105, -1205, 1229)
        assert bring_up.result.sweeps >= 1

    def test_run_disconnected(self):
        text = "--- scanner 0 ---\n1,2,3\n\n--- scanner 1 ---\n4,5,6\n"
        with pytest.raises(UnresolvableScannersError):
            RegistrationBringUp().run(text)


class TestConfig:

    def test_defaults(self):
        config = RegistrationConfig()
        assert config.match_threshold == 12
        assert config.reference_scanner_id is None

    @pytest.mark.parametrize("kwargs", [{"match_threshold": 0}, {"max_workers": 0}])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            RegistrationConfig(**kwargs)


class TestMain:

    def test_prints_beacon_count(self, canonical_report_path, capsys):
        assert main([str(canonical_report_path)]) == 0
        out = capsys.readouterr().out.split()
        assert out == ["79"]

    def test_max_distance_flag(self, canonical_report_path, capsys):
        assert main([str(canonical_report_path), "--max-distance"]) == 0
        out = capsys.readouterr().out.split()
        assert out == ["79", "3621"]

    def test_unwritable_output_exits_nonzero(self, canonical_report_path, tmp_path, capsys):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        assert main([str(canonical_report_path), "--csv", str(blocker / "map.csv")]) == 1
        assert capsys.readouterr().out == ""

    def test_huge_coordinate_exits_nonzero(self, tmp_path, capsys):
        lines = ["--- scanner 0 ---"] + [f"{10 ** 20 + i},{i},{i}" for i in range(12)]
        lines += ["", "--- scanner 1 ---"] + [f"{i},{i},{i}" for i in range(12)]
        report = tmp_path / "huge.txt"
        report.write_text("\n".join(lines) + "\n")
        assert main([str(report)]) == 1
        assert "out of range" in capsys.readouterr().err

    def test_writes_outputs(self, canonical_report_path, tmp_path, capsys):
        csv_path = tmp_path / "map.csv"
        png_path = tmp_path / "map.png"
        rc = main([str(canonical_report_path), "--csv", str(csv_path), "--plot", str(png_path),
                   "--workers", "2", "--no-memo", "--log-level", "WARNING"])

        assert rc == 0
        assert len(pd.read_csv(csv_path)) == 79
        assert png_path.exists()

    def test_malformed_input_exits_nonzero(self, tmp_path, capsys):
        bad = tmp_path / "bad.txt"
        bad.write_text("--- scanner 0 ---\n1,2\n")
        assert main([str(bad)]) == 1
        assert "line 2" in capsys.readouterr().err

    def test_missing_file_exits_nonzero(self, tmp_path):
        assert main([str(tmp_path / "missing.txt")]) == 1
