"""Chips (``Hwmon``) and the parsed hwmon tree (``Hwmons``), sync flavour.

Walks /sys/class/hwmon/hwmon*/ once, groups each chip's attribute files
into typed sensors and freezes the result.  Nothing is rescanned later;
every sensor read goes straight to its file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from types import MappingProxyType
from typing import Any

from . import units
from .attributes import SensorType
from .backends import StrPath, SyncBackend
from .config import HWMON_ROOT, HwmonConfig, default_config
from .discovery import (
    ParsingMode,
    build_sensor_specs,
    check_base_path,
    chip_index,
    write_candidates,
)
from .errors import (
    ParseError,
    UnsupportedError,
    translate_decode_error,
    translate_os_error,
)
from .sensors.sync_sensors import SENSOR_CLASSES

log = logging.getLogger(__name__)

UPDATE_INTERVAL = "update_interval"
BEEP_ENABLE = "beep_enable"


@dataclass(frozen=True, eq=False)
class HwmonBase:
    """One hwmon chip directory and the sensors found in it."""

    index: int
    name: str  # Contents of the chip's "name" file, "" if it has none
    path: Path
    device_path: Path  # Resolved "device" link, taken at discovery
    sensors: Mapping[tuple[SensorType, int], Any]
    writeable: bool = True  # Chip-level attributes may be written

    @property
    def descriptor(self) -> str:
        return f"hwmon{self.index}"

    def sensors_of(self, sensor_type: SensorType) -> dict[int, Any]:
        """Return this chip's sensors of one type, keyed by kernel index."""
        return {
            index: sensor
            for (t, index), sensor in sorted(
                self.sensors.items(), key=lambda item: item[0][1]
            )
            if t is sensor_type
        }

    def sensor(self, sensor_type: SensorType, index: int) -> Any | None:
        return self.sensors.get((sensor_type, index))

    def temps(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.TEMPERATURE)

    def fans(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.FAN)

    def pwms(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.PWM)

    def voltages(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.VOLTAGE)

    def currents(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.CURRENT)

    def powers(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.POWER)

    def energies(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.ENERGY)

    def humidities(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.HUMIDITY)

    def intrusions(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.INTRUSION)

    def frequencies(self) -> dict[int, Any]:
        return self.sensors_of(SensorType.FREQUENCY)

    # -- Chip-level attributes ---------------------------------------------

    def _chip_error(
        self, attribute: str, exc: OSError, *, write: bool = False
    ) -> Exception:
        if isinstance(exc, FileNotFoundError):
            return UnsupportedError(self.descriptor, attribute, write=write)
        return translate_os_error(exc, self.path / attribute)

    def _writable_chip_path(self, attribute: str) -> Path:
        if not self.writeable:
            raise UnsupportedError(self.descriptor, attribute, write=True)
        return self.path / attribute

    def _decode_chip(self, codec: units.Codec, attribute: str, raw: str) -> Any:
        try:
            return codec.decode(raw.strip())
        except ParseError as exc:
            raise exc.with_path(self.path / attribute) from None

    def __str__(self) -> str:
        return f"{self.descriptor} ({self.name or 'unnamed'}) at {self.path}"


@dataclass(frozen=True, eq=False)
class Hwmon(HwmonBase):
    backend: SyncBackend = field(default_factory=SyncBackend, repr=False)

    def _read_chip(self, attribute: str) -> str:
        try:
            return self.backend.read_to_string(self.path / attribute)
        except OSError as exc:
            raise self._chip_error(attribute, exc) from exc
        except UnicodeDecodeError as exc:
            raise translate_decode_error(exc, self.path / attribute) from exc

    def _write_chip(self, attribute: str, raw: str) -> None:
        path = self._writable_chip_path(attribute)
        if not self.backend.is_file(path):
            raise UnsupportedError(self.descriptor, attribute, write=True)
        try:
            self.backend.write_string(path, raw)
        except OSError as exc:
            raise self._chip_error(attribute, exc, write=True) from exc

    def read_update_interval(self) -> timedelta:
        """Interval at which the chip refreshes its readings."""
        raw = self._read_chip(UPDATE_INTERVAL)
        return self._decode_chip(units.DURATION, UPDATE_INTERVAL, raw)

    def write_update_interval(self, interval: timedelta) -> None:
        self._write_chip(UPDATE_INTERVAL, units.DURATION.encode(interval))

    def read_beep_enable(self) -> bool:
        raw = self._read_chip(BEEP_ENABLE)
        return self._decode_chip(units.BOOL, BEEP_ENABLE, raw)

    def write_beep_enable(self, enable: bool) -> None:
        self._write_chip(BEEP_ENABLE, units.BOOL.encode(enable))


@dataclass(frozen=True, eq=False)
class HwmonsBase:
    """Immutable, index-ordered collection of parsed chips."""

    path: Path
    hwmons: Mapping[int, Any]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.hwmons.values())

    def __len__(self) -> int:
        return len(self.hwmons)

    def __getitem__(self, index: int) -> Any:
        return self.hwmons[index]

    def __contains__(self, index: object) -> bool:
        return index in self.hwmons

    def hwmon_by_index(self, index: int) -> Any | None:
        return self.hwmons.get(index)

    def hwmons_by_name(self, name: str) -> list[Any]:
        """Return every chip called ``name``; several chips may share one."""
        return [hwmon for hwmon in self if hwmon.name == name]

    def _hwmon_by_real_path(self, real_path: str) -> Any | None:
        wanted = Path(real_path)
        for hwmon in self:
            if hwmon.device_path == wanted:
                return hwmon
        return None


def freeze_hwmons(hwmons: dict[int, Any]) -> Mapping[int, Any]:
    return MappingProxyType(dict(sorted(hwmons.items())))


def build_sensors(
    classes: Mapping[SensorType, type],
    path: Path,
    entries: list[str],
    writable_names: Collection[str],
    backend: Any,
) -> Mapping[tuple[SensorType, int], Any]:
    """Instantiate the sensors described by a chip's directory entries."""
    sensors = {}
    for spec in build_sensor_specs(path, entries, writable_names):
        sensors[(spec.sensor_type, spec.index)] = classes[spec.sensor_type](
            index=spec.index,
            hwmon_path=path,
            capabilities=spec.capabilities,
            writable=spec.writable,
            backend=backend,
        )
    return MappingProxyType(sensors)


def _parse_chip(
    path: Path, index: int, backend: SyncBackend, config: HwmonConfig
) -> Hwmon | None:
    if not backend.is_dir(path):
        log.debug("Ignoring %s: not a directory", path)
        return None

    try:
        name = backend.read_to_string(path / "name").strip()
    except FileNotFoundError:
        name = ""
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Skipping %s: cannot read its name: %s", path, exc)
        return None

    try:
        entries = backend.list_dir(path)
    except OSError as exc:
        log.warning("Skipping %s: cannot list it: %s", path, exc)
        return None

    writable = {
        entry
        for entry in write_candidates(entries, config)
        if backend.access(path / entry, os.W_OK)
    }
    sensors = build_sensors(SENSOR_CLASSES, path, entries, writable, backend)
    log.debug("%s: %r with %d sensors", path, name, len(sensors))
    return Hwmon(
        index=index,
        name=name,
        path=path,
        device_path=Path(backend.realpath(path / "device")),
        sensors=sensors,
        writeable=config.writeable,
        backend=backend,
    )


@dataclass(frozen=True, eq=False)
class Hwmons(HwmonsBase):
    """All chips under one hwmon root, parsed synchronously."""

    backend: SyncBackend = field(default_factory=SyncBackend, repr=False)

    @classmethod
    def parse(cls, config: HwmonConfig | None = None) -> Hwmons:
        """Parse the canonical root, /sys/class/hwmon."""
        return cls.parse_path(HWMON_ROOT, ParsingMode.RESTRICTED, config)

    @classmethod
    def parse_unrestricted(
        cls, path: StrPath, config: HwmonConfig | None = None
    ) -> Hwmons:
        """Parse any directory laid out like /sys/class/hwmon.

        Only allowed when ``config.unrestricted_parsing`` is set.
        """
        return cls.parse_path(path, ParsingMode.UNRESTRICTED, config)

    @classmethod
    def parse_path(
        cls,
        path: StrPath,
        mode: ParsingMode = ParsingMode.RESTRICTED,
        config: HwmonConfig | None = None,
        backend: SyncBackend | None = None,
    ) -> Hwmons:
        """Discover every ``hwmonN`` chip under ``path``.

        Raises:
            PathNotAllowedError: ``path`` is not allowed in ``mode``.
            HwmonIOError: ``path`` cannot be listed.  Chips that cannot be
                read are skipped with a warning instead.
        """
        config = config or default_config()
        backend = backend or SyncBackend()
        base = check_base_path(
            path, mode, config, backend.realpath(path), backend.realpath(HWMON_ROOT)
        )
        try:
            entries = backend.list_dir(base)
        except OSError as exc:
            raise translate_os_error(exc, base) from exc

        hwmons: dict[int, Hwmon] = {}
        for entry in entries:
            index = chip_index(entry)
            if index is None:
                continue
            hwmon = _parse_chip(base / entry, index, backend, config)
            if hwmon is not None:
                hwmons[index] = hwmon

        log.debug("Parsed %d hwmon chips under %s", len(hwmons), base)
        return cls(base, freeze_hwmons(hwmons), backend)

    def hwmon_by_device_path(self, device_path: StrPath) -> Hwmon | None:
        """Return the chip whose ``device`` link resolves to ``device_path``."""
        return self._hwmon_by_real_path(self.backend.realpath(device_path))
