"""Tests for the aiofiles-backed flavour: same results as the sync one."""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path

import pytest

from hwmon_sensors.async_hwmon import AsyncHwmon, AsyncHwmons
from hwmon_sensors.attributes import SensorType
from hwmon_sensors.backends import AsyncBackend, StrPath
from hwmon_sensors.config import HwmonConfig
from hwmon_sensors.discovery import ParsingMode
from hwmon_sensors.errors import (
    HwmonIOError,
    InvalidValueError,
    ParseError,
    PathNotAllowedError,
    UnsupportedError,
)
from hwmon_sensors.hwmon import Hwmons
from hwmon_sensors.sensors import (
    AsyncPwmSensor,
    AsyncTempSensor,
    AsyncVirtualSensor,
    async_virtual_sensor_from_path,
)
from hwmon_sensors.units import Pwm, PwmEnable, Temperature


class RecordingAsyncBackend(AsyncBackend):
    """AsyncBackend that remembers every write, access check and realpath."""

    def __init__(self) -> None:
        self.writes: list[tuple[str, str]] = []
        self.checked: list[str] = []
        self.resolved: list[str] = []

    async def write_string(self, path: StrPath, contents: str) -> None:
        self.writes.append((Path(path).name, contents))
        await super().write_string(path, contents)

    async def access(self, path: StrPath, mode: int) -> bool:
        self.checked.append(Path(path).name)
        return await super().access(path, mode)

    async def realpath(self, path: StrPath) -> str:
        self.resolved.append(Path(path).name)
        return await super().realpath(path)


class TestAsyncDiscovery:
    """Tests for AsyncHwmons.parse_*()."""

    @pytest.mark.asyncio
    async def test_matches_sync_discovery(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        sync = Hwmons.parse_unrestricted(fake_hwmon, config)
        hwmons = await AsyncHwmons.parse_unrestricted(fake_hwmon, config)

        assert [(h.index, h.name) for h in hwmons] == [(h.index, h.name) for h in sync]
        for async_chip, sync_chip in zip(hwmons, sync):
            assert isinstance(async_chip, AsyncHwmon)
            assert set(async_chip.sensors) == set(sync_chip.sensors)
            for key, sensor in async_chip.sensors.items():
                assert sensor.capabilities == sync_chip.sensors[key].capabilities
                assert sensor.writable == sync_chip.sensors[key].writable

    @pytest.mark.asyncio
    async def test_sensor_classes(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        hwmons = await AsyncHwmons.parse_unrestricted(fake_hwmon, config)
        assert isinstance(hwmons[0].temps()[1], AsyncTempSensor)
        assert isinstance(hwmons[2].pwms()[1], AsyncPwmSensor)

    @pytest.mark.asyncio
    async def test_skips_broken_chip(self, make_chip, tmp_path: Path, config: HwmonConfig) -> None:
        make_chip(0, files={"temp1_input": "1000\n"})
        broken = make_chip(1, name=None)
        (broken / "name").mkdir()
        hwmons = await AsyncHwmons.parse_unrestricted(tmp_path, config)
        assert [h.index for h in hwmons] == [0]

    @pytest.mark.asyncio
    async def test_missing_root(self, tmp_path: Path, config: HwmonConfig) -> None:
        with pytest.raises(HwmonIOError):
            await AsyncHwmons.parse_unrestricted(tmp_path / "nonexistent", config)

    @pytest.mark.asyncio
    async def test_path_restriction(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        with pytest.raises(PathNotAllowedError):
            await AsyncHwmons.parse_path(fake_hwmon, ParsingMode.RESTRICTED, config)
        with pytest.raises(PathNotAllowedError):
            await AsyncHwmons.parse_unrestricted(fake_hwmon, HwmonConfig())

    @pytest.mark.asyncio
    async def test_chip_attributes(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        nct = (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[2]
        assert await nct.read_update_interval() == timedelta(seconds=1)
        await nct.write_beep_enable(True)
        assert await nct.read_beep_enable() is True
        with pytest.raises(UnsupportedError):
            await (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[0].read_beep_enable()

    @pytest.mark.asyncio
    async def test_write_to_missing_chip_attribute(
        self, fake_hwmon: Path, config: HwmonConfig
    ) -> None:
        coretemp = (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[0]
        with pytest.raises(UnsupportedError):
            await coretemp.write_update_interval(timedelta(seconds=1))
        assert not (fake_hwmon / "hwmon0" / "update_interval").exists()

    @pytest.mark.asyncio
    async def test_file_system_checks_go_through_backend(
        self, fake_hwmon: Path, tmp_path: Path, config: HwmonConfig
    ) -> None:
        device = tmp_path / "devices" / "nct6775.656"
        device.mkdir(parents=True)
        os.symlink(device, fake_hwmon / "hwmon2" / "device")

        backend = RecordingAsyncBackend()
        hwmons = await AsyncHwmons.parse_path(
            fake_hwmon, ParsingMode.UNRESTRICTED, config, backend
        )
        assert "pwm1_enable" in backend.checked
        assert "temp1_max" in backend.checked
        assert "temp1_input" not in backend.checked
        assert backend.resolved.count("device") == 2

        assert hwmons[2].device_path == device.resolve()
        assert await hwmons.hwmon_by_device_path(device) is hwmons[2]


class TestAsyncSensors:
    """Tests for async sensor reads and writes."""

    @pytest.mark.asyncio
    async def test_read_temperature(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        temp = (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[0].temps()[1]
        value = await temp.read_input()
        assert value == Temperature(45000)
        assert value.degrees_celsius == pytest.approx(45.0)
        assert await temp.read_name() == "Package id 0"
        assert await temp.read_crit_alarm() is False

    @pytest.mark.asyncio
    async def test_same_values_as_sync(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        sync_fan = Hwmons.parse_unrestricted(fake_hwmon, config)[2].fans()[1]
        async_fan = (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[2].fans()[1]
        assert await async_fan.read_input() == sync_fan.read_input()
        assert await async_fan.read_div() == sync_fan.read_div()
        assert await async_fan.state() == sync_fan.state()

    @pytest.mark.asyncio
    async def test_manual_control_written_once(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        backend = RecordingAsyncBackend()
        hwmons = await AsyncHwmons.parse_path(
            fake_hwmon, ParsingMode.UNRESTRICTED, config, backend
        )
        pwm = hwmons[2].pwms()[1]
        await pwm.write_enable(PwmEnable.MANUAL_CONTROL)
        assert backend.writes == [("pwm1_enable", "1")]
        assert await pwm.read_enable() is PwmEnable.MANUAL_CONTROL

    @pytest.mark.asyncio
    async def test_out_of_range_pwm(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        backend = RecordingAsyncBackend()
        hwmons = await AsyncHwmons.parse_path(
            fake_hwmon, ParsingMode.UNRESTRICTED, config, backend
        )
        pwm = hwmons[2].pwms()[1]
        with pytest.raises(InvalidValueError):
            await pwm.write_pwm(256)
        assert backend.writes == []
        assert await pwm.read_pwm() == Pwm(128)

    @pytest.mark.asyncio
    async def test_unsupported(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        temp = (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[0].temps()[2]
        with pytest.raises(UnsupportedError):
            await temp.read_max()

    @pytest.mark.asyncio
    async def test_parse_error(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        (fake_hwmon / "hwmon0" / "temp2_input").write_text("garbage\n")
        temp = (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[0].temps()[2]
        with pytest.raises(ParseError):
            await temp.read_input()

    @pytest.mark.asyncio
    async def test_undecodable_content(self, fake_hwmon: Path, config: HwmonConfig) -> None:
        (fake_hwmon / "hwmon0" / "temp1_label").write_bytes(b"\xff\xfe\n")
        temp = (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[0].temps()[1]
        with pytest.raises(ParseError) as excinfo:
            await temp.read_label()
        assert excinfo.value.path == fake_hwmon / "hwmon0" / "temp1_label"
        with pytest.raises(ParseError):
            await temp.read_name()

    @pytest.mark.asyncio
    async def test_undecodable_chip_attribute(
        self, fake_hwmon: Path, config: HwmonConfig
    ) -> None:
        (fake_hwmon / "hwmon2" / "update_interval").write_bytes(b"1\xff00\n")
        nct = (await AsyncHwmons.parse_unrestricted(fake_hwmon, config))[2]
        with pytest.raises(ParseError):
            await nct.read_update_interval()


class TestAsyncVirtualSensor:
    """Tests for async_virtual_sensor_from_path()."""

    @pytest.mark.asyncio
    async def test_read_and_write(self, tmp_path: Path) -> None:
        path = tmp_path / "duty"
        path.write_text("10\n")
        sensor = await async_virtual_sensor_from_path(path, SensorType.PWM, writeable=True)
        assert isinstance(sensor, AsyncVirtualSensor)
        assert await sensor.read_pwm() == Pwm(10)
        await sensor.write_pwm(Pwm(30))
        assert path.read_text() == "30"

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(HwmonIOError):
            await async_virtual_sensor_from_path(tmp_path / "nope", SensorType.TEMPERATURE)
