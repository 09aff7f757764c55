"""Sensors whose reads and writes are awaitable.

Same operations as the sync flavour; every method returns a coroutine that
suspends only in the backend call.  Capability checks and value validation
happen when the coroutine starts, before any file is opened.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..attributes import Attribute, SensorType
from ..backends import AsyncBackend
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
class AsyncSensor(SensorBase):
    """Sensor reading and writing through an :class:`AsyncBackend`."""

    backend: AsyncBackend = field(default_factory=AsyncBackend, compare=False, repr=False)

    async def _read_path(self, path: Path) -> str:
        try:
            raw = await self.backend.read_to_string(path)
        except OSError as exc:
            raise translate_os_error(exc, path) from exc
        except UnicodeDecodeError as exc:
            raise translate_decode_error(exc, path) from exc
        return raw.strip()

    async def _write_path(self, path: Path, raw: str) -> None:
        log.debug("Writing %r to %s", raw, path)
        try:
            await self.backend.write_string(path, raw)
        except OSError as exc:
            raise translate_os_error(exc, path) from exc

    async def read_raw(self, attribute: str) -> str:
        return await self._read_path(self._readable_path(attribute))

    async def read(self, attribute: str) -> Any:
        path = self._readable_path(attribute)
        return self._decode(attribute, await self._read_path(path))

    async def write_raw(self, attribute: str, raw: str) -> None:
        await self._write_path(self._writable_path(attribute), raw)

    async def write(self, attribute: str, value: Any) -> None:
        path = self._writable_path(attribute)
        await self._write_path(path, self._encode(attribute, value))

    async def read_name(self) -> str:
        if self.supports(Attribute.LABEL):
            return await self.read(Attribute.LABEL)
        return self.descriptor

    async def state(self) -> SensorState:
        states = {}
        for attribute in self._state_attributes():
            states[attribute] = await self.read_raw(attribute)
        return SensorState(states)

    async def write_state(self, state: SensorState) -> None:
        for attribute in state.states:
            if not self.supports_write(attribute):
                raise UnsupportedError(self.descriptor, attribute, write=True)
        for attribute, raw in state.states.items():
            await self.write_raw(attribute, raw)

    async def write_state_lossy(self, state: SensorState) -> None:
        for attribute, raw in state.states.items():
            if self.supports_write(attribute):
                await self.write_raw(attribute, raw)
            else:
                log.debug("%s: skipping unwritable %r", self.descriptor, attribute)


class AsyncTempSensor(TempCapabilities, AsyncSensor):
    pass


class AsyncFanSensor(FanCapabilities, AsyncSensor):
    pass


class AsyncPwmSensor(PwmCapabilities, AsyncSensor):
    pass


class AsyncVoltageSensor(VoltageCapabilities, AsyncSensor):
    pass


class AsyncCurrentSensor(CurrentCapabilities, AsyncSensor):
    pass


class AsyncPowerSensor(PowerCapabilities, AsyncSensor):
    pass


class AsyncEnergySensor(EnergyCapabilities, AsyncSensor):
    pass


class AsyncHumiditySensor(HumidityCapabilities, AsyncSensor):
    pass


class AsyncIntrusionSensor(IntrusionCapabilities, AsyncSensor):
    pass


class AsyncFrequencySensor(FrequencyCapabilities, AsyncSensor):
    pass


ASYNC_SENSOR_CLASSES: dict[SensorType, type[AsyncSensor]] = {
    cls.sensor_type: cls
    for cls in (
        AsyncTempSensor,
        AsyncFanSensor,
        AsyncPwmSensor,
        AsyncVoltageSensor,
        AsyncCurrentSensor,
        AsyncPowerSensor,
        AsyncEnergySensor,
        AsyncHumiditySensor,
        AsyncIntrusionSensor,
        AsyncFrequencySensor,
    )
}
