"""Tests for unit value classes and codecs."""

from __future__ import annotations

from datetime import timedelta

import pytest

from hwmon_sensors import units
from hwmon_sensors.errors import InvalidValueError, ParseError
from hwmon_sensors.units import (
    Accuracy,
    AngularVelocity,
    Energy,
    FanDivisor,
    Humidity,
    Power,
    Pwm,
    PwmEnable,
    PwmMode,
    Temperature,
    TempType,
    Voltage,
    parse_int,
)


class TestParseInt:
    """Tests for parse_int()."""

    def test_trims_whitespace(self) -> None:
        assert parse_int(" 42\n") == 42

    def test_negative(self) -> None:
        assert parse_int("-5") == -5

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "+1", "1_000", "0x10", "4 2"])
    def test_rejects_non_decimal(self, raw: str) -> None:
        with pytest.raises(ParseError):
            parse_int(raw)

    def test_unsigned_rejects_minus(self) -> None:
        with pytest.raises(ParseError):
            parse_int("-1", signed=False)


class TestTemperature:
    """Tests for Temperature."""

    def test_decode_millidegrees(self) -> None:
        temp = units.TEMPERATURE.decode("45000\n")
        assert temp == Temperature(45000)
        assert temp.degrees_celsius == pytest.approx(45.0)
        assert temp.millidegrees_celsius == 45000

    def test_fahrenheit(self) -> None:
        assert Temperature(100000).degrees_fahrenheit == pytest.approx(212.0)
        assert Temperature.from_degrees_fahrenheit(212.0) == Temperature(100000)

    def test_from_degrees_rounds_to_millidegrees(self) -> None:
        assert Temperature.from_degrees_celsius(45.0004) == Temperature(45000)

    def test_negative_temperature(self) -> None:
        assert units.TEMPERATURE.decode("-12500").degrees_celsius == pytest.approx(-12.5)

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(InvalidValueError):
            Temperature(2**31)
        with pytest.raises(InvalidValueError):
            Temperature.from_degrees_celsius(float("nan"))

    def test_out_of_range_text_is_parse_error(self) -> None:
        with pytest.raises(ParseError):
            units.TEMPERATURE.decode(str(2**40))

    def test_str(self) -> None:
        assert str(Temperature(45000)) == "45.0°C"

    def test_ordering_and_arithmetic(self) -> None:
        assert Temperature(1000) < Temperature(2000)
        assert Temperature(1000) + Temperature(500) == Temperature(1500)
        assert Temperature(1000) * 3 == Temperature(3000)


class TestMeasurements:
    """Tests for the remaining measurement classes."""

    def test_voltage(self) -> None:
        assert Voltage(1104).volts == pytest.approx(1.104)
        assert Voltage.from_volts(12.0) == Voltage(12000)

    def test_power_is_unsigned(self) -> None:
        assert Power.from_watts(65.5).microwatts == 65_500_000
        with pytest.raises(ParseError):
            units.POWER.decode("-1")

    def test_energy_is_64_bit(self) -> None:
        assert units.ENERGY.decode(str(2**40)) == Energy(2**40)

    def test_angular_velocity(self) -> None:
        assert units.ANGULAR_VELOCITY.decode("1200").rpm == 1200
        assert str(AngularVelocity(1200)) == "1200rpm"

    def test_humidity(self) -> None:
        assert Humidity(45500).percent == pytest.approx(45.5)

    def test_accuracy_bounds(self) -> None:
        assert units.ACCURACY.decode("50") == Accuracy(50)
        with pytest.raises(ParseError):
            units.ACCURACY.decode("101")

    def test_bool_is_not_an_integer(self) -> None:
        with pytest.raises(InvalidValueError):
            Voltage(True)


class TestPwm:
    """Tests for Pwm duty cycles."""

    def test_from_percent(self) -> None:
        assert Pwm.from_percent(100) == Pwm(255)
        assert Pwm.from_percent(0) == Pwm(0)
        assert Pwm.from_percent(20) == Pwm(51)

    def test_percent_view(self) -> None:
        assert Pwm(255).percent == pytest.approx(100.0)

    @pytest.mark.parametrize("value", [-1, 256, 1000])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(InvalidValueError):
            Pwm(value)

    def test_percent_out_of_range(self) -> None:
        with pytest.raises(InvalidValueError):
            Pwm.from_percent(101)

    def test_codec_accepts_plain_int(self) -> None:
        assert units.PWM.encode(200) == "200"
        with pytest.raises(InvalidValueError):
            units.PWM.encode(300)


class TestFanDivisor:
    """Tests for FanDivisor."""

    def test_power_of_two_required(self) -> None:
        assert FanDivisor(8).raw == 8
        with pytest.raises(InvalidValueError):
            FanDivisor(6)
        with pytest.raises(InvalidValueError):
            FanDivisor(0)

    @pytest.mark.parametrize(("value", "expected"), [(0, 1), (1, 1), (3, 4), (8, 8), (9, 16)])
    def test_from_value_rounds_up(self, value: int, expected: int) -> None:
        assert FanDivisor.from_value(value) == FanDivisor(expected)

    def test_decoding_invalid_divisor(self) -> None:
        with pytest.raises(ParseError):
            units.FAN_DIVISOR.decode("3")


class TestEnums:
    """Tests for PwmEnable, PwmMode and TempType."""

    def test_pwm_enable_round_trip(self) -> None:
        for raw in ("0", "1", "2"):
            assert units.PWM_ENABLE.encode(units.PWM_ENABLE.decode(raw)) == raw

    def test_pwm_enable_driver_modes_normalise(self) -> None:
        assert units.PWM_ENABLE.decode("5") is PwmEnable.AUTOMATIC_CONTROL
        assert units.PWM_ENABLE.encode(units.PWM_ENABLE.decode("5")) == "2"

    def test_full_speed_alias(self) -> None:
        assert PwmEnable.FULL_SPEED is PwmEnable.OFF
        assert units.PWM_ENABLE.encode(PwmEnable.FULL_SPEED) == "0"

    def test_enum_encode_accepts_int(self) -> None:
        assert units.PWM_ENABLE.encode(1) == "1"

    @pytest.mark.parametrize("value", [3, -1, "1", True, 1.0, None])
    def test_enum_encode_rejects(self, value: object) -> None:
        with pytest.raises(InvalidValueError):
            units.PWM_ENABLE.encode(value)

    def test_pwm_mode(self) -> None:
        assert units.PWM_MODE.decode("0") is PwmMode.DC
        with pytest.raises(ParseError):
            units.PWM_MODE.decode("3")

    def test_temp_type(self) -> None:
        assert units.TEMP_TYPE.decode("6") is TempType.INTEL_PECI
        with pytest.raises(ParseError):
            units.TEMP_TYPE.decode("0")


class TestPlainCodecs:
    """Tests for the bool, string, integer and duration codecs."""

    def test_bool_decode(self) -> None:
        assert units.BOOL.decode("1\n") is True
        assert units.BOOL.decode("0") is False
        with pytest.raises(ParseError):
            units.BOOL.decode("2")

    def test_bool_encode(self) -> None:
        assert units.BOOL.encode(True) == "1"
        assert units.BOOL.encode(0) == "0"
        with pytest.raises(InvalidValueError):
            units.BOOL.encode(2)

    def test_duration(self) -> None:
        assert units.DURATION.decode("1500") == timedelta(milliseconds=1500)
        assert units.DURATION.encode(timedelta(seconds=2)) == "2000"
        with pytest.raises(InvalidValueError):
            units.DURATION.encode(timedelta(seconds=-1))

    def test_string_trims(self) -> None:
        assert units.STRING.decode("Core 0\n") == "Core 0"

    @pytest.mark.parametrize(
        ("codec", "raw"),
        [
            (units.TEMPERATURE, "-40000"),
            (units.VOLTAGE, "1104"),
            (units.CURRENT, "0"),
            (units.POWER, "4294967295"),
            (units.ENERGY, "18446744073709551615"),
            (units.FREQUENCY, "25000"),
            (units.PWM, "255"),
            (units.FAN_DIVISOR, "128"),
            (units.TEMP_TYPE, "3"),
            (units.ANGULAR_VELOCITY, "1200"),
            (units.HUMIDITY, "45500"),
            (units.ACCURACY, "100"),
            (units.BOOL, "1"),
            (units.BOOL, "0"),
            (units.PWM_MODE, "2"),
            (units.PWM_ENABLE, "1"),
            (units.DURATION, "1000"),
            (units.INTEGER, "-7"),
        ],
    )
    def test_round_trip_keeps_text(self, codec: units.Codec, raw: str) -> None:
        assert codec.encode(codec.decode(f"{raw}\n")) == raw
