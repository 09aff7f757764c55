"""Capability mixins shared by the sync and async sensor flavours.

Each method is a thin, typed name for one attribute.  It delegates to the
flavour's ``read``/``write``, which return the value directly for sync
sensors and an awaitable for async ones.  The attribute's presence (and
writability) is checked there, before any file access.
"""

from __future__ import annotations

from typing import Any

from ..attributes import Attribute


class Input:
    def read_input(self) -> Any:
        """Read the sensor's main measurement.

        For pwm outputs that is the duty cycle file itself, for intrusion
        detectors the alarm flag.
        """
        return self.read(self.primary_attribute)


class Label:
    def read_label(self) -> Any:
        return self.read(Attribute.LABEL)


class Enable:
    def read_enable(self) -> Any:
        return self.read(Attribute.ENABLE)

    def write_enable(self, enable: Any) -> Any:
        return self.write(Attribute.ENABLE, enable)


class Min:
    def read_min(self) -> Any:
        return self.read(Attribute.MIN)

    def write_min(self, value: Any) -> Any:
        return self.write(Attribute.MIN, value)


class Max:
    def read_max(self) -> Any:
        return self.read(Attribute.MAX)

    def write_max(self, value: Any) -> Any:
        return self.write(Attribute.MAX, value)


class Crit:
    def read_crit(self) -> Any:
        return self.read(Attribute.CRIT)

    def write_crit(self, value: Any) -> Any:
        return self.write(Attribute.CRIT, value)


class LowCrit:
    def read_lcrit(self) -> Any:
        return self.read(Attribute.LCRIT)

    def write_lcrit(self, value: Any) -> Any:
        return self.write(Attribute.LCRIT, value)


class Average:
    def read_average(self) -> Any:
        return self.read(Attribute.AVERAGE)


class Extremes:
    """Historical lowest/highest values, cleared by ``reset_history``."""

    def read_lowest(self) -> Any:
        return self.read(Attribute.LOWEST)

    def read_highest(self) -> Any:
        return self.read(Attribute.HIGHEST)

    def reset_history(self) -> Any:
        return self.write(Attribute.RESET_HISTORY, True)


class Alarm:
    def read_alarm(self) -> Any:
        return self.read(Attribute.ALARM)

    def read_min_alarm(self) -> Any:
        return self.read(Attribute.MIN_ALARM)

    def read_max_alarm(self) -> Any:
        return self.read(Attribute.MAX_ALARM)

    def read_crit_alarm(self) -> Any:
        return self.read(Attribute.CRIT_ALARM)

    def read_lcrit_alarm(self) -> Any:
        return self.read(Attribute.LCRIT_ALARM)

    def read_emergency_alarm(self) -> Any:
        return self.read(Attribute.EMERGENCY_ALARM)

    def read_cap_alarm(self) -> Any:
        return self.read(Attribute.CAP_ALARM)


class Beep:
    def read_beep(self) -> Any:
        return self.read(Attribute.BEEP)

    def write_beep(self, beep: Any) -> Any:
        return self.write(Attribute.BEEP, beep)


class Fault:
    def read_fault(self) -> Any:
        return self.read(Attribute.FAULT)
