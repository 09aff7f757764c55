"""Typed access to the Linux hwmon sysfs interface.

Example::

    hwmons = Hwmons.parse()
    for hwmon in hwmons:
        for temp in hwmon.temps().values():
            print(temp.read_name(), temp.read_input())
"""

from __future__ import annotations

from .async_hwmon import AsyncHwmon, AsyncHwmons
from .attributes import Attribute, SensorType, parse_attribute_name
from .config import HWMON_ROOT, HwmonConfig, default_config, set_default_config
from .discovery import ParsingMode
from .errors import (
    ConfigError,
    HwmonError,
    HwmonIOError,
    InsufficientRightsError,
    InvalidValueError,
    ParseError,
    PathNotAllowedError,
    UnsupportedError,
)
from .hwmon import Hwmon, Hwmons
from .sensors import (
    SensorState,
    async_virtual_sensor_from_path,
    virtual_sensor_from_path,
)
from .units import (
    Accuracy,
    AngularVelocity,
    Current,
    Energy,
    FanDivisor,
    Frequency,
    Humidity,
    Power,
    Pwm,
    PwmEnable,
    PwmMode,
    Temperature,
    TempType,
    Voltage,
)

__all__ = [
    "HWMON_ROOT",
    "Accuracy",
    "AngularVelocity",
    "AsyncHwmon",
    "AsyncHwmons",
    "Attribute",
    "ConfigError",
    "Current",
    "Energy",
    "FanDivisor",
    "Frequency",
    "Humidity",
    "Hwmon",
    "HwmonConfig",
    "HwmonError",
    "HwmonIOError",
    "Hwmons",
    "InsufficientRightsError",
    "InvalidValueError",
    "ParseError",
    "ParsingMode",
    "PathNotAllowedError",
    "Power",
    "Pwm",
    "PwmEnable",
    "PwmMode",
    "SensorState",
    "SensorType",
    "TempType",
    "Temperature",
    "UnsupportedError",
    "Voltage",
    "async_virtual_sensor_from_path",
    "default_config",
    "parse_attribute_name",
    "set_default_config",
    "virtual_sensor_from_path",
]
