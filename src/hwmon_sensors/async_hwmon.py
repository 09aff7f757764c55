"""Awaitable counterparts of ``Hwmon`` and ``Hwmons``.

Discovery follows the same rules as the sync flavour, but every
file-system call it makes (listings, reads, access checks and link
resolution) is awaited through aiofiles.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from . import units
from .backends import AsyncBackend, StrPath
from .config import HWMON_ROOT, HwmonConfig, default_config
from .discovery import ParsingMode, check_base_path, chip_index, write_candidates
from .errors import UnsupportedError, translate_decode_error, translate_os_error
from .hwmon import (
    BEEP_ENABLE,
    UPDATE_INTERVAL,
    HwmonBase,
    HwmonsBase,
    build_sensors,
    freeze_hwmons,
)
from .sensors.async_sensors import ASYNC_SENSOR_CLASSES

log = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class AsyncHwmon(HwmonBase):
    backend: AsyncBackend = field(default_factory=AsyncBackend, repr=False)

    async def _read_chip(self, attribute: str) -> str:
        try:
            return await self.backend.read_to_string(self.path / attribute)
        except OSError as exc:
            raise self._chip_error(attribute, exc) from exc
        except UnicodeDecodeError as exc:
            raise translate_decode_error(exc, self.path / attribute) from exc

    async def _write_chip(self, attribute: str, raw: str) -> None:
        path = self._writable_chip_path(attribute)
        if not await self.backend.is_file(path):
            raise UnsupportedError(self.descriptor, attribute, write=True)
        try:
            await self.backend.write_string(path, raw)
        except OSError as exc:
            raise self._chip_error(attribute, exc, write=True) from exc

    async def read_update_interval(self) -> timedelta:
        raw = await self._read_chip(UPDATE_INTERVAL)
        return self._decode_chip(units.DURATION, UPDATE_INTERVAL, raw)

    async def write_update_interval(self, interval: timedelta) -> None:
        await self._write_chip(UPDATE_INTERVAL, units.DURATION.encode(interval))

    async def read_beep_enable(self) -> bool:
        raw = await self._read_chip(BEEP_ENABLE)
        return self._decode_chip(units.BOOL, BEEP_ENABLE, raw)

    async def write_beep_enable(self, enable: bool) -> None:
        await self._write_chip(BEEP_ENABLE, units.BOOL.encode(enable))


async def _parse_chip(
    path: Path, index: int, backend: AsyncBackend, config: HwmonConfig
) -> AsyncHwmon | None:
    if not await backend.is_dir(path):
        log.debug("Ignoring %s: not a directory", path)
        return None

    try:
        name = (await backend.read_to_string(path / "name")).strip()
    except FileNotFoundError:
        name = ""
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Skipping %s: cannot read its name: %s", path, exc)
        return None

    try:
        entries = await backend.list_dir(path)
    except OSError as exc:
        log.warning("Skipping %s: cannot list it: %s", path, exc)
        return None

    writable: set[str] = set()
    for entry in write_candidates(entries, config):
        if await backend.access(path / entry, os.W_OK):
            writable.add(entry)
    sensors = build_sensors(ASYNC_SENSOR_CLASSES, path, entries, writable, backend)
    log.debug("%s: %r with %d sensors", path, name, len(sensors))
    return AsyncHwmon(
        index=index,
        name=name,
        path=path,
        device_path=Path(await backend.realpath(path / "device")),
        sensors=sensors,
        writeable=config.writeable,
        backend=backend,
    )


@dataclass(frozen=True, eq=False)
class AsyncHwmons(HwmonsBase):
    """All chips under one hwmon root, parsed with awaitable I/O."""

    backend: AsyncBackend = field(default_factory=AsyncBackend, repr=False)

    @classmethod
    async def parse(cls, config: HwmonConfig | None = None) -> AsyncHwmons:
        return await cls.parse_path(HWMON_ROOT, ParsingMode.RESTRICTED, config)

    @classmethod
    async def parse_unrestricted(
        cls, path: StrPath, config: HwmonConfig | None = None
    ) -> AsyncHwmons:
        return await cls.parse_path(path, ParsingMode.UNRESTRICTED, config)

    @classmethod
    async def parse_path(
        cls,
        path: StrPath,
        mode: ParsingMode = ParsingMode.RESTRICTED,
        config: HwmonConfig | None = None,
        backend: AsyncBackend | None = None,
    ) -> AsyncHwmons:
        """Discover every ``hwmonN`` chip under ``path``; see Hwmons.parse_path."""
        config = config or default_config()
        backend = backend or AsyncBackend()
        real_path = await backend.realpath(path)
        real_root = await backend.realpath(HWMON_ROOT)
        base = check_base_path(path, mode, config, real_path, real_root)
        try:
            entries = await backend.list_dir(base)
        except OSError as exc:
            raise translate_os_error(exc, base) from exc

        hwmons: dict[int, AsyncHwmon] = {}
        for entry in entries:
            index = chip_index(entry)
            if index is None:
                continue
            hwmon = await _parse_chip(base / entry, index, backend, config)
            if hwmon is not None:
                hwmons[index] = hwmon

        log.debug("Parsed %d hwmon chips under %s", len(hwmons), base)
        return cls(base, freeze_hwmons(hwmons), backend)

    async def hwmon_by_device_path(self, device_path: StrPath) -> AsyncHwmon | None:
        return self._hwmon_by_real_path(await self.backend.realpath(device_path))
