"""Typed sensor objects, in sync, async and virtual flavours."""

from __future__ import annotations

from .async_sensors import (
    ASYNC_SENSOR_CLASSES,
    AsyncCurrentSensor,
    AsyncEnergySensor,
    AsyncFanSensor,
    AsyncFrequencySensor,
    AsyncHumiditySensor,
    AsyncIntrusionSensor,
    AsyncPowerSensor,
    AsyncPwmSensor,
    AsyncSensor,
    AsyncTempSensor,
    AsyncVoltageSensor,
)
from .base import SensorBase, SensorState
from .sync_sensors import (
    SENSOR_CLASSES,
    CurrentSensor,
    EnergySensor,
    FanSensor,
    FrequencySensor,
    HumiditySensor,
    IntrusionSensor,
    PowerSensor,
    PwmSensor,
    SyncSensor,
    TempSensor,
    VoltageSensor,
)
from .virtual import (
    AsyncVirtualSensor,
    VirtualSensor,
    async_virtual_sensor_from_path,
    virtual_sensor_from_path,
)

__all__ = [
    "ASYNC_SENSOR_CLASSES",
    "SENSOR_CLASSES",
    "AsyncCurrentSensor",
    "AsyncEnergySensor",
    "AsyncFanSensor",
    "AsyncFrequencySensor",
    "AsyncHumiditySensor",
    "AsyncIntrusionSensor",
    "AsyncPowerSensor",
    "AsyncPwmSensor",
    "AsyncSensor",
    "AsyncTempSensor",
    "AsyncVirtualSensor",
    "AsyncVoltageSensor",
    "CurrentSensor",
    "EnergySensor",
    "FanSensor",
    "FrequencySensor",
    "HumiditySensor",
    "IntrusionSensor",
    "PowerSensor",
    "PwmSensor",
    "SensorBase",
    "SensorState",
    "SyncSensor",
    "TempSensor",
    "VirtualSensor",
    "VoltageSensor",
    "async_virtual_sensor_from_path",
    "virtual_sensor_from_path",
]
