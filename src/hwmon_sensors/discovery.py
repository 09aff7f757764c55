"""Backend-independent part of hwmon discovery.

Every file-system call (listing, realpath, access) is made by the sync or
async Hwmons through their backend.  This module only works on the
results: it checks the base path, recognises chip directories and turns a
chip's entry names into sensor descriptions.
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .attributes import (
    PRIMARY_ATTRIBUTES,
    WRITABLE_ATTRIBUTES,
    SensorType,
    attribute_file_name,
    parse_attribute_name,
)
from .backends import StrPath
from .config import HWMON_ROOT, HwmonConfig
from .errors import PathNotAllowedError

log = logging.getLogger(__name__)

_CHIP_RE = re.compile(r"hwmon(0|[1-9][0-9]*)")


class ParsingMode(Enum):
    RESTRICTED = "restricted"  # only /sys/class/hwmon
    UNRESTRICTED = "unrestricted"  # any directory, if the config allows it


@dataclass(frozen=True)
class SensorSpec:
    """Everything needed to build one sensor, independent of the backend."""

    sensor_type: SensorType
    index: int
    capabilities: frozenset[str]
    writable: frozenset[str]


def check_base_path(
    path: StrPath,
    mode: ParsingMode,
    config: HwmonConfig,
    real_path: str,
    real_root: str,
) -> Path:
    """Return ``path`` as a Path if discovery may walk it.

    ``real_path`` and ``real_root`` are the resolved forms of ``path`` and
    of the canonical hwmon root, as returned by the backend's realpath.

    Raises:
        PathNotAllowedError: In restricted mode when ``path`` is not the
            canonical hwmon root, in unrestricted mode when the config does
            not allow unrestricted parsing.
    """
    path = Path(path)
    if mode is ParsingMode.RESTRICTED:
        if real_path != real_root:
            raise PathNotAllowedError(path, f"only {HWMON_ROOT} may be parsed")
    elif not config.unrestricted_parsing:
        raise PathNotAllowedError(path, "unrestricted parsing is disabled")
    return path


def chip_index(entry: str) -> int | None:
    """Return N for a ``hwmonN`` directory entry, else None."""
    match = _CHIP_RE.fullmatch(entry)
    return int(match[1]) if match else None


def group_attributes(names: Iterable[str]) -> dict[tuple[SensorType, int], set[str]]:
    """Group attribute file names by ``(sensor type, index)``.

    Entries that are not sensor attributes (``name``, ``uevent``,
    ``device``, ...) are ignored.
    """
    groups: dict[tuple[SensorType, int], set[str]] = defaultdict(set)
    for name in names:
        parsed = parse_attribute_name(name)
        if parsed is not None:
            groups[(parsed.sensor_type, parsed.index)].add(parsed.suffix)
    return groups


def write_candidates(names: Iterable[str], config: HwmonConfig) -> list[str]:
    """Return the entries that may be writable, to be checked for W_OK.

    Only attributes the kernel defines as writable qualify, and none do
    when the config disables writes.
    """
    if not config.writeable:
        return []
    candidates = []
    for name in names:
        parsed = parse_attribute_name(name)
        if parsed is not None and parsed.suffix in WRITABLE_ATTRIBUTES:
            candidates.append(name)
    return candidates


def build_sensor_specs(
    chip_path: Path, names: Iterable[str], writable_names: Collection[str]
) -> list[SensorSpec]:
    """Describe every complete sensor among a chip's entries.

    A group only becomes a sensor if its primary attribute exists; the
    others are dropped.  ``writable_names`` holds the entries from
    :func:`write_candidates` that the process may actually write.
    """
    specs: list[SensorSpec] = []
    for (sensor_type, index), suffixes in sorted(
        group_attributes(names).items(), key=lambda item: (item[0][0].value, item[0][1])
    ):
        primary = PRIMARY_ATTRIBUTES[sensor_type]
        if primary not in suffixes:
            log.debug(
                "%s: dropping %s%d, no %s file",
                chip_path,
                sensor_type.prefix,
                index,
                primary.value or "value",
            )
            continue

        writable = frozenset(
            suffix
            for suffix in suffixes
            if suffix in WRITABLE_ATTRIBUTES
            and attribute_file_name(sensor_type, index, suffix) in writable_names
        )
        specs.append(SensorSpec(sensor_type, index, frozenset(suffixes), writable))
    return specs
