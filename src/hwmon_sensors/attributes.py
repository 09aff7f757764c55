"""hwmon attribute naming: ``<type><index>[_<suffix>]``.

Maps directory entries such as ``temp1_input`` or ``pwm2`` to a
(SensorType, index, suffix) triple and knows, per sensor type, which suffix
is mandatory, which are writable and how each one is encoded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from . import units
from .units import Codec


class SensorType(Enum):
    """Closed set of hwmon sensor kinds, valued by their file-name prefix."""

    TEMPERATURE = "temp"
    FAN = "fan"
    PWM = "pwm"
    VOLTAGE = "in"
    CURRENT = "curr"
    POWER = "power"
    ENERGY = "energy"
    HUMIDITY = "humidity"
    INTRUSION = "intrusion"
    FREQUENCY = "freq"

    @property
    def prefix(self) -> str:
        return self.value


class Attribute(str, Enum):
    """Known attribute suffixes (without the leading underscore)."""

    VALUE = ""  # bare pwmN file
    INPUT = "input"
    LABEL = "label"
    ENABLE = "enable"
    FAULT = "fault"
    TYPE = "type"
    MIN = "min"
    MAX = "max"
    MIN_HYST = "min_hyst"
    MAX_HYST = "max_hyst"
    CRIT = "crit"
    CRIT_HYST = "crit_hyst"
    LCRIT = "lcrit"
    LCRIT_HYST = "lcrit_hyst"
    EMERGENCY = "emergency"
    EMERGENCY_HYST = "emergency_hyst"
    OFFSET = "offset"
    LOWEST = "lowest"
    HIGHEST = "highest"
    INPUT_LOWEST = "input_lowest"
    INPUT_HIGHEST = "input_highest"
    AVERAGE = "average"
    AVERAGE_INTERVAL = "average_interval"
    AVERAGE_INTERVAL_MIN = "average_interval_min"
    AVERAGE_INTERVAL_MAX = "average_interval_max"
    AVERAGE_HIGHEST = "average_highest"
    AVERAGE_LOWEST = "average_lowest"
    AVERAGE_MIN = "average_min"
    AVERAGE_MAX = "average_max"
    ACCURACY = "accuracy"
    CAP = "cap"
    CAP_HYST = "cap_hyst"
    CAP_MIN = "cap_min"
    CAP_MAX = "cap_max"
    DIV = "div"
    PULSES = "pulses"
    TARGET = "target"
    MODE = "mode"
    FREQ = "freq"
    AUTO_CHANNELS_TEMP = "auto_channels_temp"
    ALARM = "alarm"
    MIN_ALARM = "min_alarm"
    MAX_ALARM = "max_alarm"
    CRIT_ALARM = "crit_alarm"
    LCRIT_ALARM = "lcrit_alarm"
    CAP_ALARM = "cap_alarm"
    EMERGENCY_ALARM = "emergency_alarm"
    BEEP = "beep"
    RESET_HISTORY = "reset_history"

    def __str__(self) -> str:
        return self.value


# Attributes the kernel lets userspace change.
READ_WRITE_ATTRIBUTES: frozenset[str] = frozenset(
    {
        Attribute.VALUE,
        Attribute.ENABLE,
        Attribute.MIN,
        Attribute.MAX,
        Attribute.MIN_HYST,
        Attribute.MAX_HYST,
        Attribute.CRIT,
        Attribute.CRIT_HYST,
        Attribute.LCRIT,
        Attribute.LCRIT_HYST,
        Attribute.EMERGENCY,
        Attribute.EMERGENCY_HYST,
        Attribute.OFFSET,
        Attribute.DIV,
        Attribute.PULSES,
        Attribute.TARGET,
        Attribute.AVERAGE_INTERVAL,
        Attribute.AVERAGE_MIN,
        Attribute.AVERAGE_MAX,
        Attribute.CAP,
        Attribute.CAP_HYST,
        Attribute.MODE,
        Attribute.FREQ,
        Attribute.AUTO_CHANNELS_TEMP,
        Attribute.BEEP,
    }
)

WRITE_ONLY_ATTRIBUTES: frozenset[str] = frozenset({Attribute.RESET_HISTORY})

WRITABLE_ATTRIBUTES: frozenset[str] = READ_WRITE_ATTRIBUTES | WRITE_ONLY_ATTRIBUTES

# A group of files only becomes a sensor if this one exists.
PRIMARY_ATTRIBUTES: dict[SensorType, Attribute] = {
    SensorType.TEMPERATURE: Attribute.INPUT,
    SensorType.FAN: Attribute.INPUT,
    SensorType.PWM: Attribute.VALUE,
    SensorType.VOLTAGE: Attribute.INPUT,
    SensorType.CURRENT: Attribute.INPUT,
    SensorType.POWER: Attribute.INPUT,
    SensorType.ENERGY: Attribute.INPUT,
    SensorType.HUMIDITY: Attribute.INPUT,
    SensorType.INTRUSION: Attribute.ALARM,
    SensorType.FREQUENCY: Attribute.INPUT,
}

_VALUE_CODECS: dict[SensorType, Codec] = {
    SensorType.TEMPERATURE: units.TEMPERATURE,
    SensorType.FAN: units.ANGULAR_VELOCITY,
    SensorType.PWM: units.PWM,
    SensorType.VOLTAGE: units.VOLTAGE,
    SensorType.CURRENT: units.CURRENT,
    SensorType.POWER: units.POWER,
    SensorType.ENERGY: units.ENERGY,
    SensorType.HUMIDITY: units.HUMIDITY,
    SensorType.INTRUSION: units.BOOL,
    SensorType.FREQUENCY: units.FREQUENCY,
}

# Attributes carrying a measurement in the sensor's own unit.
_VALUE_ATTRIBUTES = frozenset(
    {
        Attribute.INPUT,
        Attribute.MIN,
        Attribute.MAX,
        Attribute.MIN_HYST,
        Attribute.MAX_HYST,
        Attribute.CRIT,
        Attribute.CRIT_HYST,
        Attribute.LCRIT,
        Attribute.LCRIT_HYST,
        Attribute.EMERGENCY,
        Attribute.EMERGENCY_HYST,
        Attribute.OFFSET,
        Attribute.LOWEST,
        Attribute.HIGHEST,
        Attribute.INPUT_LOWEST,
        Attribute.INPUT_HIGHEST,
        Attribute.AVERAGE,
        Attribute.AVERAGE_HIGHEST,
        Attribute.AVERAGE_LOWEST,
        Attribute.AVERAGE_MIN,
        Attribute.AVERAGE_MAX,
        Attribute.CAP,
        Attribute.CAP_HYST,
        Attribute.CAP_MIN,
        Attribute.CAP_MAX,
        Attribute.TARGET,
    }
)

_BOOL_ATTRIBUTES = frozenset(
    {
        Attribute.FAULT,
        Attribute.ALARM,
        Attribute.MIN_ALARM,
        Attribute.MAX_ALARM,
        Attribute.CRIT_ALARM,
        Attribute.LCRIT_ALARM,
        Attribute.CAP_ALARM,
        Attribute.EMERGENCY_ALARM,
        Attribute.BEEP,
        Attribute.RESET_HISTORY,
    }
)

_SPECIAL_CODECS: dict[tuple[SensorType | None, str], Codec] = {
    (None, Attribute.LABEL): units.STRING,
    (None, Attribute.ENABLE): units.BOOL,
    (SensorType.PWM, Attribute.VALUE): units.PWM,
    (SensorType.PWM, Attribute.ENABLE): units.PWM_ENABLE,
    (SensorType.PWM, Attribute.MODE): units.PWM_MODE,
    (SensorType.PWM, Attribute.FREQ): units.FREQUENCY,
    (SensorType.PWM, Attribute.AUTO_CHANNELS_TEMP): units.INTEGER,
    (SensorType.TEMPERATURE, Attribute.TYPE): units.TEMP_TYPE,
    (SensorType.FAN, Attribute.DIV): units.FAN_DIVISOR,
    (SensorType.FAN, Attribute.PULSES): units.INTEGER,
    (SensorType.POWER, Attribute.ACCURACY): units.ACCURACY,
    (SensorType.POWER, Attribute.AVERAGE_INTERVAL): units.DURATION,
    (SensorType.POWER, Attribute.AVERAGE_INTERVAL_MIN): units.DURATION,
    (SensorType.POWER, Attribute.AVERAGE_INTERVAL_MAX): units.DURATION,
}


def codec_for(sensor_type: SensorType, attribute: str) -> Codec:
    """Return the codec used for ``attribute`` of a ``sensor_type`` sensor.

    Suffixes this package does not know are treated as plain text.
    """
    codec = _SPECIAL_CODECS.get((sensor_type, attribute))
    if codec is None:
        codec = _SPECIAL_CODECS.get((None, attribute))
    if codec is not None:
        return codec
    if attribute in _BOOL_ATTRIBUTES:
        return units.BOOL
    if attribute in _VALUE_ATTRIBUTES:
        return _VALUE_CODECS[sensor_type]
    return units.STRING


@dataclass(frozen=True)
class ParsedAttribute:
    """One sensor attribute file name, split into its parts."""

    sensor_type: SensorType
    index: int
    suffix: str


_PREFIXES = sorted((t.prefix for t in SensorType), key=len, reverse=True)
_ATTRIBUTE_RE = re.compile(
    r"(?P<prefix>" + "|".join(_PREFIXES) + r")(?P<index>0|[1-9][0-9]*)(?:_(?P<suffix>\w+))?"
)
_BY_PREFIX = {t.prefix: t for t in SensorType}


def parse_attribute_name(name: str) -> ParsedAttribute | None:
    """Split a hwmon directory entry name, or return None if it is not one.

    >>> parse_attribute_name("temp1_input")
    ParsedAttribute(sensor_type=<SensorType.TEMPERATURE: 'temp'>, index=1, suffix='input')
    >>> parse_attribute_name("uevent") is None
    True
    """
    match = _ATTRIBUTE_RE.fullmatch(name)
    if match is None:
        return None
    return ParsedAttribute(
        sensor_type=_BY_PREFIX[match["prefix"]],
        index=int(match["index"]),
        suffix=match["suffix"] or "",
    )


def attribute_file_name(sensor_type: SensorType, index: int, suffix: str) -> str:
    """Inverse of :func:`parse_attribute_name`."""
    name = f"{sensor_type.prefix}{index}"
    if suffix:
        name += f"_{suffix}"
    return name
