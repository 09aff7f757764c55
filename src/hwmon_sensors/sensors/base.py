"""Backend-independent part of every sensor.

A sensor is one ``(type, index)`` group of attribute files under one chip
directory.  Which attributes it has is fixed when it is built; every typed
operation checks that set before any file is touched and raises
``UnsupportedError`` otherwise.  Decoding and encoding are pure functions of
the already-read text, so the sync and async flavours share them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from ..attributes import (
    PRIMARY_ATTRIBUTES,
    READ_WRITE_ATTRIBUTES,
    Attribute,
    SensorType,
    attribute_file_name,
    codec_for,
)
from ..errors import ParseError, UnsupportedError


@dataclass(frozen=True)
class SensorState:
    """Raw contents of a sensor's read-write attributes.

    Captured with ``sensor.state()`` and written back with
    ``sensor.write_state()`` to restore a sensor or copy its settings.
    """

    states: dict[str, str] = field(default_factory=dict)

    @property
    def attributes(self) -> list[str]:
        return list(self.states)


@dataclass(frozen=True)
class SensorBase:
    """Identity, capability set and codec logic of one sensor."""

    sensor_type: ClassVar[SensorType]

    index: int
    hwmon_path: Path
    capabilities: frozenset[str]
    writable: frozenset[str] = frozenset()

    @property
    def prefix(self) -> str:
        """File-name prefix such as ``temp`` or ``fan``."""
        return self.sensor_type.prefix

    @property
    def descriptor(self) -> str:
        """Plain sensor name like ``temp1``, used when there is no label."""
        return f"{self.prefix}{self.index}"

    @property
    def primary_attribute(self) -> Attribute:
        return PRIMARY_ATTRIBUTES[self.sensor_type]

    def attribute_path(self, attribute: str) -> Path:
        """Path the file for ``attribute`` has (or would have)."""
        return self.hwmon_path / attribute_file_name(
            self.sensor_type, self.index, str(attribute)
        )

    def supports(self, attribute: str) -> bool:
        return attribute in self.capabilities

    def supports_write(self, attribute: str) -> bool:
        return attribute in self.writable

    def supported_read_attributes(self) -> list[str]:
        return sorted(str(a) for a in self.capabilities)

    def supported_write_attributes(self) -> list[str]:
        return sorted(str(a) for a in self.writable)

    def _state_attributes(self) -> list[str]:
        return sorted(
            str(a)
            for a in self.capabilities
            if a in READ_WRITE_ATTRIBUTES and a != Attribute.VALUE
        ) + ([""] if self.supports(Attribute.VALUE) else [])

    # -- Capability checks -------------------------------------------------

    def _readable_path(self, attribute: str) -> Path:
        if attribute not in self.capabilities:
            raise UnsupportedError(self.descriptor, str(attribute))
        return self.attribute_path(attribute)

    def _writable_path(self, attribute: str) -> Path:
        if attribute not in self.writable:
            raise UnsupportedError(self.descriptor, str(attribute), write=True)
        return self.attribute_path(attribute)

    # -- Codec -------------------------------------------------------------

    def _decode(self, attribute: str, raw: str) -> Any:
        try:
            return codec_for(self.sensor_type, attribute).decode(raw)
        except ParseError as exc:
            raise exc.with_path(self.attribute_path(attribute)) from None

    def _encode(self, attribute: str, value: Any) -> str:
        return codec_for(self.sensor_type, attribute).encode(value)

    def __str__(self) -> str:
        return f"{self.descriptor} at {self.hwmon_path}"
