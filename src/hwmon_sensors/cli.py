"""Command-line interface: print every chip and its current sensor readings."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import TextIO

from .attributes import SensorType
from .config import HWMON_ROOT, default_config
from .errors import HwmonError
from .hwmon import Hwmons


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="hwmon-sensors",
        description="Print hwmon chips and their current sensor readings",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help=f"Directory laid out like {HWMON_ROOT} to parse instead of it",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="sensor_type",
        choices=[t.prefix for t in SensorType],
        default=None,
        help="Only show sensors of this type (default: all)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery details to stderr",
    )
    return parser.parse_args(argv)


def load_hwmons(root: Path | None) -> Hwmons:
    """Parse the canonical root, or ``root`` if one was given."""
    if root is None:
        return Hwmons.parse()
    # Naming a root on the command line is an explicit opt-in.
    config = dataclasses.replace(default_config(), unrestricted_parsing=True)
    return Hwmons.parse_unrestricted(root, config)


def print_sensors(
    hwmons: Hwmons, sensor_type: SensorType | None = None, out: TextIO | None = None
) -> int:
    """Print one block per chip; return the number of sensors that failed."""
    out = out or sys.stdout
    failures = 0
    for hwmon in hwmons:
        print(f"hwmon{hwmon.index} ({hwmon.name or 'unnamed'})", file=out)
        types = [sensor_type] if sensor_type is not None else list(SensorType)
        for t in types:
            for sensor in hwmon.sensors_of(t).values():
                try:
                    line = f"  {sensor.read_name()}: {sensor.read_input()}"
                except HwmonError as exc:
                    failures += 1
                    line = f"  {sensor.descriptor}: error: {exc}"
                print(line, file=out)
    return failures


def main(argv: list[str] | None = None) -> None:
    """Entry point for the hwmon-sensors CLI."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        hwmons = load_hwmons(args.root)
    except HwmonError as exc:
        print(f"hwmon-sensors: {exc}", file=sys.stderr)
        sys.exit(1)

    sensor_type = SensorType(args.sensor_type) if args.sensor_type else None
    if print_sensors(hwmons, sensor_type):
        sys.exit(2)
