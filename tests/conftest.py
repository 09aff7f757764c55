"""Shared fixtures: fake /sys/class/hwmon trees built under tmp_path."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from pathlib import Path

import pytest

from hwmon_sensors.config import HwmonConfig, set_default_config

ChipFactory = Callable[..., Path]


def write_chip(
    root: Path, index: int, name: str | None, files: Mapping[str, str]
) -> Path:
    """Create ``root/hwmon<index>`` with a ``name`` file and attribute files."""
    chip = root / f"hwmon{index}"
    chip.mkdir(parents=True)
    if name is not None:
        (chip / "name").write_text(f"{name}\n")
    for file_name, contents in files.items():
        (chip / file_name).write_text(contents)
    return chip


@pytest.fixture()
def make_chip(tmp_path: Path) -> ChipFactory:
    """Factory for chips under ``tmp_path``."""

    def factory(
        index: int, name: str | None = "test", files: Mapping[str, str] | None = None
    ) -> Path:
        return write_chip(tmp_path, index, name, files or {})

    return factory


@pytest.fixture()
def config() -> HwmonConfig:
    """Config that lets discovery walk tmp_path trees."""
    return HwmonConfig(unrestricted_parsing=True)


@pytest.fixture(autouse=True)
def _reset_default_config() -> Iterator[None]:
    yield
    set_default_config(None)


@pytest.fixture()
def fake_hwmon(tmp_path: Path) -> Path:
    """A two-chip tree covering a temperature chip and a fan controller."""
    write_chip(
        tmp_path,
        0,
        "coretemp",
        {
            "temp1_input": "45000\n",
            "temp1_label": "Package id 0\n",
            "temp1_max": "80000\n",
            "temp1_crit": "100000\n",
            "temp1_crit_alarm": "0\n",
            "temp2_input": "47500\n",
            "uevent": "",
        },
    )
    write_chip(
        tmp_path,
        2,
        "nct6775",
        {
            "fan1_input": "1200\n",
            "fan1_min": "300\n",
            "fan1_div": "8\n",
            "pwm1": "128\n",
            "pwm1_enable": "2\n",
            "pwm1_mode": "1\n",
            "in0_input": "1104\n",
            "in0_label": "Vcore\n",
            "temp7_max": "90000\n",
            "update_interval": "1000\n",
            "beep_enable": "0\n",
        },
    )
    return tmp_path
