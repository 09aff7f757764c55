"""Sensors backed by arbitrary files instead of a hwmon chip directory.

Useful for drivers that expose hwmon-style values elsewhere in sysfs, and
for tests.  A virtual sensor behaves like a discovered one of the same type
except that each attribute maps to a caller-supplied file.
"""

from __future__ import annotations

import errno
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ..attributes import PRIMARY_ATTRIBUTES, SensorType
from ..backends import AsyncBackend, StrPath, SyncBackend
from ..config import HwmonConfig, default_config
from ..errors import HwmonIOError, PathNotAllowedError
from .async_sensors import AsyncSensor
from .kinds import CAPABILITIES_BY_TYPE
from .sync_sensors import SyncSensor


def _file_path(sensor: SyncSensor | AsyncSensor, attribute: str) -> Path:
    files: dict[str, Path] = sensor.files  # type: ignore[union-attr]
    if attribute in files:
        return files[attribute]
    # Unmapped attributes are never read (not in capabilities); this only
    # names a plausible path for error messages.
    return sensor.hwmon_path / f"{sensor.descriptor}_{attribute}"


@dataclass(frozen=True)
class VirtualSensor(SyncSensor):
    files: dict[str, Path] = field(default_factory=dict, hash=False)

    def attribute_path(self, attribute: str) -> Path:
        return _file_path(self, attribute)


@dataclass(frozen=True)
class AsyncVirtualSensor(AsyncSensor):
    files: dict[str, Path] = field(default_factory=dict, hash=False)

    def attribute_path(self, attribute: str) -> Path:
        return _file_path(self, attribute)


def _concrete(base: type, sensor_type: SensorType) -> type:
    capabilities = CAPABILITIES_BY_TYPE[sensor_type]
    name = capabilities.__name__.replace("Capabilities", base.__name__)
    return type(name, (capabilities, base), {"__module__": __name__})


VIRTUAL_SENSOR_CLASSES: dict[SensorType, type[VirtualSensor]] = {
    t: _concrete(VirtualSensor, t) for t in SensorType
}
ASYNC_VIRTUAL_SENSOR_CLASSES: dict[SensorType, type[AsyncVirtualSensor]] = {
    t: _concrete(AsyncVirtualSensor, t) for t in SensorType
}


def _build_kwargs(
    path: StrPath,
    sensor_type: SensorType,
    attributes: Mapping[str, StrPath] | None,
    writeable: bool,
    index: int,
    config: HwmonConfig | None,
) -> dict:
    config = config or default_config()
    path = Path(path)
    if not config.virtual_sensors:
        raise PathNotAllowedError(path, "virtual sensors are disabled")

    files = {str(PRIMARY_ATTRIBUTES[sensor_type]): path}
    for attribute, file in (attributes or {}).items():
        files[str(attribute)] = Path(file)

    capabilities = frozenset(files)
    return dict(
        index=index,
        hwmon_path=path.parent,
        capabilities=capabilities,
        writable=capabilities if writeable and config.writeable else frozenset(),
        files=files,
    )


def _not_found(path: Path) -> HwmonIOError:
    return HwmonIOError(
        path, FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
    )


def virtual_sensor_from_path(
    path: StrPath,
    sensor_type: SensorType,
    *,
    attributes: Mapping[str, StrPath] | None = None,
    writeable: bool = False,
    index: int = 1,
    config: HwmonConfig | None = None,
) -> VirtualSensor:
    """Create a sync sensor of ``sensor_type`` whose primary value is ``path``.

    Args:
        path: File holding the primary value (``input``, or the bare value
            for pwm, or ``alarm`` for intrusion).
        sensor_type: Decides the codec and the typed operations available.
        attributes: Extra attribute files, keyed by suffix (e.g. ``"max"``).
        writeable: Allow writing the supplied files.
        index: Index used in the sensor's descriptor.
        config: Overrides the process-wide config.

    Raises:
        HwmonIOError: One of the files does not exist.
        PathNotAllowedError: Virtual sensors are disabled in the config.
    """
    kwargs = _build_kwargs(path, sensor_type, attributes, writeable, index, config)
    backend = SyncBackend()
    for file in kwargs["files"].values():
        if not backend.is_file(file):
            raise _not_found(file)
    return VIRTUAL_SENSOR_CLASSES[sensor_type](backend=backend, **kwargs)


async def async_virtual_sensor_from_path(
    path: StrPath,
    sensor_type: SensorType,
    *,
    attributes: Mapping[str, StrPath] | None = None,
    writeable: bool = False,
    index: int = 1,
    config: HwmonConfig | None = None,
) -> AsyncVirtualSensor:
    """Awaitable counterpart of :func:`virtual_sensor_from_path`."""
    kwargs = _build_kwargs(path, sensor_type, attributes, writeable, index, config)
    backend = AsyncBackend()
    for file in kwargs["files"].values():
        if not await backend.is_file(file):
            raise _not_found(file)
    return ASYNC_VIRTUAL_SENSOR_CLASSES[sensor_type](backend=backend, **kwargs)
