"""Sensors whose reads and writes block the calling thread."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..attributes import Attribute, SensorType
from ..backends import SyncBackend
from ..errors import UnsupportedError, translate_decode_error, translate_os_error
from .base import SensorBase, SensorState
from .kinds import (
    CurrentCapabilities,
    EnergyCapabilities,
    FanCapabilities,
    FrequencyCapabilities,
    HumidityCapabilities,
    IntrusionCapabilities,
    PowerCapabilities,
    PwmCapabilities,
    TempCapabilities,
    VoltageCapabilities,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncSensor(SensorBase):
    """Sensor reading and writing through a :class:`SyncBackend`."""

    backend: SyncBackend = field(default_factory=SyncBackend, compare=False, repr=False)

    def _read_path(self, path: Path) -> str:
        try:
            return self.backend.read_to_string(path).strip()
        except OSError as exc:
            raise translate_os_error(exc, path) from exc
        except UnicodeDecodeError as exc:
            raise translate_decode_error(exc, path) from exc

    def _write_path(self, path: Path, raw: str) -> None:
        log.debug("Writing %r to %s", raw, path)
        try:
            self.backend.write_string(path, raw)
        except OSError as exc:
            raise translate_os_error(exc, path) from exc

    def read_raw(self, attribute: str) -> str:
        """Return the trimmed text of ``attribute`` without decoding it."""
        return self._read_path(self._readable_path(attribute))

    def read(self, attribute: str) -> Any:
        """Read ``attribute`` and decode it into its typed value."""
        path = self._readable_path(attribute)
        return self._decode(attribute, self._read_path(path))

    def write_raw(self, attribute: str, raw: str) -> None:
        self._write_path(self._writable_path(attribute), raw)

    def write(self, attribute: str, value: Any) -> None:
        """Encode ``value`` and write it to ``attribute``.

        The value is validated before the file is opened, so an
        InvalidValueError leaves the file untouched.
        """
        path = self._writable_path(attribute)
        self._write_path(path, self._encode(attribute, value))

    def read_name(self) -> str:
        """Return the label if the sensor has one, else e.g. ``temp1``."""
        if self.supports(Attribute.LABEL):
            return self.read(Attribute.LABEL)
        return self.descriptor

    def state(self) -> SensorState:
        """Snapshot the raw contents of every read-write attribute."""
        return SensorState({a: self.read_raw(a) for a in self._state_attributes()})

    def write_state(self, state: SensorState) -> None:
        """Write back a snapshot; every attribute in it must be writable here."""
        for attribute in state.states:
            if not self.supports_write(attribute):
                raise UnsupportedError(self.descriptor, attribute, write=True)
        for attribute, raw in state.states.items():
            self.write_raw(attribute, raw)

    def write_state_lossy(self, state: SensorState) -> None:
        """Like write_state, but skip attributes this sensor cannot write."""
        for attribute, raw in state.states.items():
            if self.supports_write(attribute):
                self.write_raw(attribute, raw)
            else:
                log.debug("%s: skipping unwritable %r", self.descriptor, attribute)


class TempSensor(TempCapabilities, SyncSensor):
    pass


class FanSensor(FanCapabilities, SyncSensor):
    pass


class PwmSensor(PwmCapabilities, SyncSensor):
    pass


class VoltageSensor(VoltageCapabilities, SyncSensor):
    pass


class CurrentSensor(CurrentCapabilities, SyncSensor):
    pass


class PowerSensor(PowerCapabilities, SyncSensor):
    pass


class EnergySensor(EnergyCapabilities, SyncSensor):
    pass


class HumiditySensor(HumidityCapabilities, SyncSensor):
    pass


class IntrusionSensor(IntrusionCapabilities, SyncSensor):
    pass


class FrequencySensor(FrequencyCapabilities, SyncSensor):
    pass


SENSOR_CLASSES: dict[SensorType, type[SyncSensor]] = {
    cls.sensor_type: cls
    for cls in (
        TempSensor,
        FanSensor,
        PwmSensor,
        VoltageSensor,
        CurrentSensor,
        PowerSensor,
        EnergySensor,
        HumiditySensor,
        IntrusionSensor,
        FrequencySensor,
    )
}
