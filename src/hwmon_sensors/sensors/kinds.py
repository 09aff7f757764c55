"""Per-type capability surfaces, one class per SensorType.

Values come back in the type's unit: ``Temperature`` for temp sensors,
``AngularVelocity`` for fans, ``Pwm``/``PwmEnable``/``PwmMode`` for pwm
outputs and so on (see ``attributes.codec_for``).
"""

from __future__ import annotations

from typing import Any

from ..attributes import Attribute, SensorType
from .capabilities import (
    Alarm,
    Average,
    Beep,
    Crit,
    Enable,
    Extremes,
    Fault,
    Input,
    Label,
    LowCrit,
    Max,
    Min,
)


class TempCapabilities(
    Input, Label, Enable, Min, Max, Crit, LowCrit, Extremes, Alarm, Beep, Fault
):
    sensor_type = SensorType.TEMPERATURE

    def read_type(self) -> Any:
        return self.read(Attribute.TYPE)

    def read_offset(self) -> Any:
        return self.read(Attribute.OFFSET)

    def write_offset(self, offset: Any) -> Any:
        return self.write(Attribute.OFFSET, offset)

    def read_max_hyst(self) -> Any:
        return self.read(Attribute.MAX_HYST)

    def write_max_hyst(self, value: Any) -> Any:
        return self.write(Attribute.MAX_HYST, value)

    def read_min_hyst(self) -> Any:
        return self.read(Attribute.MIN_HYST)

    def write_min_hyst(self, value: Any) -> Any:
        return self.write(Attribute.MIN_HYST, value)

    def read_crit_hyst(self) -> Any:
        return self.read(Attribute.CRIT_HYST)

    def write_crit_hyst(self, value: Any) -> Any:
        return self.write(Attribute.CRIT_HYST, value)

    def read_lcrit_hyst(self) -> Any:
        return self.read(Attribute.LCRIT_HYST)

    def write_lcrit_hyst(self, value: Any) -> Any:
        return self.write(Attribute.LCRIT_HYST, value)

    def read_emergency(self) -> Any:
        return self.read(Attribute.EMERGENCY)

    def write_emergency(self, value: Any) -> Any:
        return self.write(Attribute.EMERGENCY, value)

    def read_emergency_hyst(self) -> Any:
        return self.read(Attribute.EMERGENCY_HYST)

    def write_emergency_hyst(self, value: Any) -> Any:
        return self.write(Attribute.EMERGENCY_HYST, value)


class FanCapabilities(Input, Label, Enable, Min, Max, Alarm, Beep, Fault):
    sensor_type = SensorType.FAN

    def read_div(self) -> Any:
        return self.read(Attribute.DIV)

    def write_div(self, div: Any) -> Any:
        return self.write(Attribute.DIV, div)

    def read_target(self) -> Any:
        return self.read(Attribute.TARGET)

    def write_target(self, target: Any) -> Any:
        return self.write(Attribute.TARGET, target)

    def read_pulses(self) -> Any:
        return self.read(Attribute.PULSES)

    def write_pulses(self, pulses: Any) -> Any:
        return self.write(Attribute.PULSES, pulses)


class PwmCapabilities(Input, Label, Enable):
    """Pwm output.  ``read_enable``/``write_enable`` use ``PwmEnable``."""

    sensor_type = SensorType.PWM

    def read_pwm(self) -> Any:
        return self.read(Attribute.VALUE)

    def write_pwm(self, pwm: Any) -> Any:
        """Write a duty cycle; ints outside 0..255 raise InvalidValueError."""
        return self.write(Attribute.VALUE, pwm)

    def read_mode(self) -> Any:
        return self.read(Attribute.MODE)

    def write_mode(self, mode: Any) -> Any:
        return self.write(Attribute.MODE, mode)

    def read_frequency(self) -> Any:
        return self.read(Attribute.FREQ)

    def write_frequency(self, frequency: Any) -> Any:
        return self.write(Attribute.FREQ, frequency)

    def read_auto_channels_temp(self) -> Any:
        return self.read(Attribute.AUTO_CHANNELS_TEMP)

    def write_auto_channels_temp(self, channels: Any) -> Any:
        return self.write(Attribute.AUTO_CHANNELS_TEMP, channels)


class VoltageCapabilities(
    Input, Label, Enable, Min, Max, Crit, LowCrit, Average, Extremes, Alarm, Beep
):
    sensor_type = SensorType.VOLTAGE


class CurrentCapabilities(
    Input, Label, Enable, Min, Max, Crit, LowCrit, Average, Extremes, Alarm, Beep
):
    sensor_type = SensorType.CURRENT


class PowerCapabilities(Input, Label, Enable, Max, Crit, Average, Extremes, Alarm):
    sensor_type = SensorType.POWER

    def read_accuracy(self) -> Any:
        return self.read(Attribute.ACCURACY)

    def read_cap(self) -> Any:
        return self.read(Attribute.CAP)

    def write_cap(self, cap: Any) -> Any:
        return self.write(Attribute.CAP, cap)

    def read_cap_hyst(self) -> Any:
        return self.read(Attribute.CAP_HYST)

    def write_cap_hyst(self, cap_hyst: Any) -> Any:
        return self.write(Attribute.CAP_HYST, cap_hyst)

    def read_cap_min(self) -> Any:
        return self.read(Attribute.CAP_MIN)

    def read_cap_max(self) -> Any:
        return self.read(Attribute.CAP_MAX)

    def read_average_interval(self) -> Any:
        return self.read(Attribute.AVERAGE_INTERVAL)

    def write_average_interval(self, interval: Any) -> Any:
        return self.write(Attribute.AVERAGE_INTERVAL, interval)

    def read_average_interval_min(self) -> Any:
        return self.read(Attribute.AVERAGE_INTERVAL_MIN)

    def read_average_interval_max(self) -> Any:
        return self.read(Attribute.AVERAGE_INTERVAL_MAX)

    def read_average_highest(self) -> Any:
        return self.read(Attribute.AVERAGE_HIGHEST)

    def read_average_lowest(self) -> Any:
        return self.read(Attribute.AVERAGE_LOWEST)

    def read_average_min(self) -> Any:
        return self.read(Attribute.AVERAGE_MIN)

    def write_average_min(self, value: Any) -> Any:
        return self.write(Attribute.AVERAGE_MIN, value)

    def read_average_max(self) -> Any:
        return self.read(Attribute.AVERAGE_MAX)

    def write_average_max(self, value: Any) -> Any:
        return self.write(Attribute.AVERAGE_MAX, value)

    def read_input_highest(self) -> Any:
        return self.read(Attribute.INPUT_HIGHEST)

    def read_input_lowest(self) -> Any:
        return self.read(Attribute.INPUT_LOWEST)


class EnergyCapabilities(Input, Label, Enable):
    sensor_type = SensorType.ENERGY


class HumidityCapabilities(Input, Label, Enable, Min, Max, Alarm, Beep, Fault):
    sensor_type = SensorType.HUMIDITY


class IntrusionCapabilities(Input, Alarm, Beep):
    """Chassis intrusion detector; its input is the ``alarm`` flag."""

    sensor_type = SensorType.INTRUSION


class FrequencyCapabilities(Input, Label):
    sensor_type = SensorType.FREQUENCY


CAPABILITIES_BY_TYPE: dict[SensorType, type] = {
    cls.sensor_type: cls
    for cls in (
        TempCapabilities,
        FanCapabilities,
        PwmCapabilities,
        VoltageCapabilities,
        CurrentCapabilities,
        PowerCapabilities,
        EnergyCapabilities,
        HumidityCapabilities,
        IntrusionCapabilities,
        FrequencyCapabilities,
    )
}
