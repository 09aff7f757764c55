"""Tests for the hwmon-sensors command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from hwmon_sensors.cli import main, parse_args


class TestParseArgs:
    """Tests for parse_args()."""

    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.root is None
        assert args.sensor_type is None
        assert args.verbose is False

    def test_options(self, tmp_path: Path) -> None:
        args = parse_args(["--root", str(tmp_path), "--type", "fan", "-v"])
        assert args.root == tmp_path
        assert args.sensor_type == "fan"
        assert args.verbose is True

    def test_unknown_type(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--type", "volts"])


class TestMain:
    """Tests for main()."""

    def test_prints_readings(self, fake_hwmon: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--root", str(fake_hwmon)])
        out = capsys.readouterr().out
        assert "hwmon0 (coretemp)" in out
        assert "  Package id 0: 45.0°C" in out
        assert "  temp2: 47.5°C" in out
        assert "hwmon2 (nct6775)" in out
        assert "  fan1: 1200rpm" in out
        assert "  Vcore: 1.104V" in out

    def test_type_filter(self, fake_hwmon: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--root", str(fake_hwmon), "--type", "temp"])
        out = capsys.readouterr().out
        assert "Package id 0" in out
        assert "fan1" not in out

    def test_read_failure_exit_code(
        self, fake_hwmon: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (fake_hwmon / "hwmon0" / "temp2_input").write_text("N/A\n")
        with pytest.raises(SystemExit) as excinfo:
            main(["--root", str(fake_hwmon)])
        assert excinfo.value.code == 2
        assert "temp2: error:" in capsys.readouterr().out

    def test_missing_root(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--root", str(tmp_path / "nonexistent")])
        assert excinfo.value.code == 1
        assert "hwmon-sensors:" in capsys.readouterr().err

    def test_undecodable_file_is_reported(
        self, fake_hwmon: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (fake_hwmon / "hwmon0" / "temp2_input").write_bytes(b"4\xff500\n")
        with pytest.raises(SystemExit) as excinfo:
            main(["--root", str(fake_hwmon)])
        assert excinfo.value.code == 2
        out = capsys.readouterr().out
        assert "temp2: error:" in out
        assert "hwmon2 (nct6775)" in out

    def test_bad_environment_flag(
        self,
        fake_hwmon: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("HWMON_SENSORS_WRITEABLE", "maybe")
        with pytest.raises(SystemExit) as excinfo:
            main(["--root", str(fake_hwmon)])
        assert excinfo.value.code == 1
        assert "HWMON_SENSORS_WRITEABLE" in capsys.readouterr().err
