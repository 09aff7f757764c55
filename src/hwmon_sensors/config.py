"""Runtime switches for hwmon parsing and sensor access."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

# Canonical location of the hwmon class directory.
HWMON_ROOT = Path("/sys/class/hwmon")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(name, raw)


@dataclass(frozen=True)
class HwmonConfig:
    """Switches controlling what discovery and sensors are allowed to do."""

    # Allow parsing directories other than /sys/class/hwmon (test fixtures)
    unrestricted_parsing: bool = False

    # Expose write operations on attributes the kernel marks writable
    writeable: bool = True

    # Allow sensors backed by arbitrary caller-supplied files
    virtual_sensors: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> HwmonConfig:
        """Build a config from ``HWMON_SENSORS_*`` environment variables."""
        env = os.environ if env is None else env
        return cls(
            unrestricted_parsing=_env_flag(
                env, "HWMON_SENSORS_UNRESTRICTED_PARSING", False
            ),
            writeable=_env_flag(env, "HWMON_SENSORS_WRITEABLE", True),
            virtual_sensors=_env_flag(env, "HWMON_SENSORS_VIRTUAL_SENSORS", True),
        )


_default_config: HwmonConfig | None = None


def default_config() -> HwmonConfig:
    """Return the process-wide config, read from the environment on first use."""
    global _default_config
    if _default_config is None:
        _default_config = HwmonConfig.from_env()
    return _default_config


def set_default_config(config: HwmonConfig | None) -> None:
    """Replace the process-wide config; ``None`` re-reads the environment."""
    global _default_config
    _default_config = config
