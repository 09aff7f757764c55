"""Unit codec: raw sysfs text <-> typed physical quantities.

sysfs attribute files hold base-10 integers in fixed units (millidegrees,
millivolts, microwatts, ...) or small enumerated integers.  Every value class
here keeps that raw integer as-is, so decoding and re-encoding a value read
from a file yields the same text (minus surrounding whitespace).
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum
from typing import Any, ClassVar, TypeVar

from .errors import InvalidValueError, ParseError

_I32 = (-(2**31), 2**31 - 1)
_U32 = (0, 2**32 - 1)
_U64 = (0, 2**64 - 1)

_SIGNED_INT = re.compile(r"-?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")

M = TypeVar("M", bound="_Measurement")
E = TypeVar("E", bound=IntEnum)


def parse_int(raw: str, *, signed: bool = True) -> int:
    """Parse trimmed sysfs text as a base-10 integer.

    Only plain digits (with a leading ``-`` when signed) are accepted; Python
    extras such as ``+1``, ``1_000`` or ``0x10`` are rejected.
    """
    text = raw.strip()
    pattern = _SIGNED_INT if signed else _UNSIGNED_INT
    if not pattern.fullmatch(text):
        raise ParseError(raw, "signed integer" if signed else "unsigned integer")
    return int(text)


def _require_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(value, f"{what} needs an integer")
    return value


@dataclass(frozen=True, order=True)
class _Measurement:
    """An integer in the unit the kernel uses for this quantity."""

    raw: int

    BOUNDS: ClassVar[tuple[int, int]] = _I32
    SCALE: ClassVar[int] = 1
    SYMBOL: ClassVar[str] = ""

    def __post_init__(self) -> None:
        _require_int(self.raw, type(self).__name__)
        low, high = self.BOUNDS
        if not low <= self.raw <= high:
            raise InvalidValueError(
                self.raw, f"{type(self).__name__} must lie in [{low}, {high}]"
            )

    @classmethod
    def from_raw(cls: type[M], raw: str) -> M:
        """Decode the text of an attribute file."""
        value = parse_int(raw, signed=cls.BOUNDS[0] < 0)
        try:
            return cls(value)
        except InvalidValueError:
            raise ParseError(raw, cls.__name__) from None

    def to_raw(self) -> str:
        """Encode for writing back to an attribute file."""
        return str(self.raw)

    @classmethod
    def _from_scaled(cls: type[M], value: float) -> M:
        value = float(value)
        if not math.isfinite(value):
            raise InvalidValueError(value, f"{cls.__name__} must be finite")
        return cls(round(value * cls.SCALE))

    def _scaled(self) -> float:
        return self.raw / self.SCALE

    def __str__(self) -> str:
        return f"{self._scaled()}{self.SYMBOL}"

    def __add__(self: M, other: M) -> M:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.raw + other.raw)

    def __mul__(self: M, factor: int) -> M:
        return type(self)(self.raw * _require_int(factor, "factor"))


class Temperature(_Measurement):
    """Temperature, stored in millidegrees Celsius."""

    SCALE = 1000
    SYMBOL = "°C"

    @classmethod
    def from_millidegrees_celsius(cls, millidegrees: int) -> Temperature:
        return cls(millidegrees)

    @classmethod
    def from_degrees_celsius(cls, degrees: float) -> Temperature:
        """Raises InvalidValueError outside the signed 32 bit millidegree range."""
        return cls._from_scaled(degrees)

    @classmethod
    def from_degrees_fahrenheit(cls, degrees: float) -> Temperature:
        return cls.from_degrees_celsius((float(degrees) - 32.0) / 1.8)

    @property
    def millidegrees_celsius(self) -> int:
        return self.raw

    @property
    def degrees_celsius(self) -> float:
        return self._scaled()

    @property
    def degrees_fahrenheit(self) -> float:
        return self.degrees_celsius * 1.8 + 32.0


class Voltage(_Measurement):
    """Voltage, stored in millivolts."""

    SCALE = 1000
    SYMBOL = "V"

    @classmethod
    def from_millivolts(cls, millivolts: int) -> Voltage:
        return cls(millivolts)

    @classmethod
    def from_volts(cls, volts: float) -> Voltage:
        return cls._from_scaled(volts)

    @property
    def millivolts(self) -> int:
        return self.raw

    @property
    def volts(self) -> float:
        return self._scaled()


class Current(_Measurement):
    """Electrical current, stored in milliamperes."""

    SCALE = 1000
    SYMBOL = "A"

    @classmethod
    def from_milliamperes(cls, milliamperes: int) -> Current:
        return cls(milliamperes)

    @classmethod
    def from_amperes(cls, amperes: float) -> Current:
        return cls._from_scaled(amperes)

    @property
    def milliamperes(self) -> int:
        return self.raw

    @property
    def amperes(self) -> float:
        return self._scaled()


class Power(_Measurement):
    """Electrical power, stored in microwatts."""

    BOUNDS = _U32
    SCALE = 1_000_000
    SYMBOL = "W"

    @classmethod
    def from_microwatts(cls, microwatts: int) -> Power:
        return cls(microwatts)

    @classmethod
    def from_watts(cls, watts: float) -> Power:
        return cls._from_scaled(watts)

    @property
    def microwatts(self) -> int:
        return self.raw

    @property
    def watts(self) -> float:
        return self._scaled()


class Energy(_Measurement):
    """Cumulative energy, stored in microjoules."""

    BOUNDS = _U64
    SCALE = 1_000_000
    SYMBOL = "J"

    @classmethod
    def from_microjoules(cls, microjoules: int) -> Energy:
        return cls(microjoules)

    @classmethod
    def from_joules(cls, joules: float) -> Energy:
        return cls._from_scaled(joules)

    @property
    def microjoules(self) -> int:
        return self.raw

    @property
    def joules(self) -> float:
        return self._scaled()


class AngularVelocity(_Measurement):
    """Fan speed in revolutions per minute."""

    BOUNDS = _U32
    SYMBOL = "rpm"

    @classmethod
    def from_rpm(cls, rpm: int) -> AngularVelocity:
        return cls(rpm)

    @property
    def rpm(self) -> int:
        return self.raw

    def __str__(self) -> str:
        return f"{self.raw}rpm"


class Frequency(_Measurement):
    """Frequency in hertz (pwm base frequency, freq*_input)."""

    BOUNDS = _U32
    SYMBOL = "Hz"

    @classmethod
    def from_hertz(cls, hertz: int) -> Frequency:
        return cls(hertz)

    @property
    def hertz(self) -> int:
        return self.raw

    @property
    def megahertz(self) -> float:
        return self.raw / 1_000_000

    def __str__(self) -> str:
        return f"{self.raw}Hz"


class Humidity(_Measurement):
    """Relative humidity, stored in milli-percent."""

    BOUNDS = _U32
    SCALE = 1000
    SYMBOL = "%"

    @classmethod
    def from_milli_percent(cls, millis: int) -> Humidity:
        return cls(millis)

    @classmethod
    def from_percent(cls, percent: float) -> Humidity:
        return cls._from_scaled(percent)

    @property
    def milli_percent(self) -> int:
        return self.raw

    @property
    def percent(self) -> float:
        return self._scaled()


class Accuracy(_Measurement):
    """Accuracy of a power meter in percent."""

    BOUNDS = (0, 100)
    SYMBOL = "%"

    @property
    def percent(self) -> int:
        return self.raw

    def __str__(self) -> str:
        return f"{self.raw}%"


class Pwm(_Measurement):
    """Pwm duty cycle on the kernel's 0..255 scale."""

    BOUNDS = (0, 255)

    @classmethod
    def from_percent(cls, percent: float) -> Pwm:
        """Raises InvalidValueError unless 0 <= percent <= 100."""
        percent = float(percent)
        if math.isnan(percent) or not 0.0 <= percent <= 100.0:
            raise InvalidValueError(percent, "pwm percentage must lie in [0, 100]")
        return cls(round(percent * 2.55))

    @property
    def value(self) -> int:
        return self.raw

    @property
    def percent(self) -> float:
        return self.raw / 2.55

    def __str__(self) -> str:
        return f"{self.percent:.1f}%"


class FanDivisor(_Measurement):
    """Fan clock divisor; always a power of two."""

    BOUNDS = _U32

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.raw <= 0 or self.raw & (self.raw - 1):
            raise InvalidValueError(self.raw, "fan divisor must be a power of two")

    @classmethod
    def from_value(cls, value: int) -> FanDivisor:
        """Round ``value`` up to the next power of two."""
        value = _require_int(value, "FanDivisor")
        if value <= 1:
            return cls(1)
        return cls(1 << (value - 1).bit_length())

    def __str__(self) -> str:
        return str(self.raw)


def _enum_from_raw(cls: type[E], raw: str) -> E:
    value = parse_int(raw, signed=False)
    try:
        return cls(value)
    except ValueError:
        raise ParseError(raw, cls.__name__) from None


class PwmEnable(IntEnum):
    """Control state of a pwm output (``pwmN_enable``)."""

    OFF = 0  # no speed control, the fan runs at full speed
    MANUAL_CONTROL = 1
    AUTOMATIC_CONTROL = 2
    FULL_SPEED = 0

    @classmethod
    def from_raw(cls, raw: str) -> PwmEnable:
        # Drivers use 2..5 for their various automatic modes.
        value = parse_int(raw, signed=False)
        if value >= cls.AUTOMATIC_CONTROL:
            return cls.AUTOMATIC_CONTROL
        return cls(value)

    def to_raw(self) -> str:
        return str(int(self))


class PwmMode(IntEnum):
    """How a fan's speed is regulated (``pwmN_mode``)."""

    DC = 0
    PWM = 1
    AUTOMATIC = 2

    @classmethod
    def from_raw(cls, raw: str) -> PwmMode:
        return _enum_from_raw(cls, raw)

    def to_raw(self) -> str:
        return str(int(self))


class TempType(IntEnum):
    """Kind of temperature sensor (``tempN_type``)."""

    CPU_EMBEDDED_DIODE = 1
    TRANSISTOR = 2
    THERMAL_DIODE = 3
    THERMISTOR = 4
    AMD_AMDSI = 5
    INTEL_PECI = 6

    @classmethod
    def from_raw(cls, raw: str) -> TempType:
        return _enum_from_raw(cls, raw)

    def to_raw(self) -> str:
        return str(int(self))


# -- Codecs -------------------------------------------------------------------


@dataclass(frozen=True)
class Codec:
    """A decode/encode pair for one kind of attribute file."""

    name: str
    decode: Callable[[str], Any]
    encode: Callable[[Any], str]


def _bool_from_raw(raw: str) -> bool:
    text = raw.strip()
    if text == "1":
        return True
    if text == "0":
        return False
    raise ParseError(raw, "boolean")


def _bool_to_raw(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int) and value in (0, 1):
        return str(value)
    raise InvalidValueError(value, "expected a boolean")


def _str_to_raw(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidValueError(value, "expected a string")
    return value


def _int_to_raw(value: Any) -> str:
    return str(_require_int(value, "attribute"))


def _duration_from_raw(raw: str) -> timedelta:
    return timedelta(milliseconds=parse_int(raw, signed=False))


def _duration_to_raw(value: Any) -> str:
    if not isinstance(value, timedelta):
        raise InvalidValueError(value, "expected a timedelta")
    if value < timedelta(0):
        raise InvalidValueError(value, "duration must not be negative")
    return str(value // timedelta(milliseconds=1))


def _unit_codec(cls: type[Any]) -> Codec:
    def encode(value: Any) -> str:
        if isinstance(value, cls):
            return value.to_raw()
        if issubclass(cls, IntEnum):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidValueError(value, f"expected a {cls.__name__}")
            try:
                return cls(value).to_raw()
            except ValueError:
                reason = f"not a {cls.__name__} encoding"
                raise InvalidValueError(value, reason) from None
        if cls is Pwm and isinstance(value, int) and not isinstance(value, bool):
            return Pwm(value).to_raw()
        raise InvalidValueError(value, f"expected a {cls.__name__}")

    return Codec(cls.__name__, cls.from_raw, encode)


BOOL = Codec("bool", _bool_from_raw, _bool_to_raw)
STRING = Codec("str", lambda raw: raw.strip(), _str_to_raw)
INTEGER = Codec("int", parse_int, _int_to_raw)
DURATION = Codec("timedelta", _duration_from_raw, _duration_to_raw)

TEMPERATURE = _unit_codec(Temperature)
VOLTAGE = _unit_codec(Voltage)
CURRENT = _unit_codec(Current)
POWER = _unit_codec(Power)
ENERGY = _unit_codec(Energy)
ANGULAR_VELOCITY = _unit_codec(AngularVelocity)
FREQUENCY = _unit_codec(Frequency)
HUMIDITY = _unit_codec(Humidity)
ACCURACY = _unit_codec(Accuracy)
PWM = _unit_codec(Pwm)
FAN_DIVISOR = _unit_codec(FanDivisor)
PWM_ENABLE = _unit_codec(PwmEnable)
PWM_MODE = _unit_codec(PwmMode)
TEMP_TYPE = _unit_codec(TempType)
