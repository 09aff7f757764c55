"""Exception hierarchy shared by discovery, sensors and the unit codec.

Callers can tell the failure kinds apart: ``HwmonIOError`` may be transient,
``ParseError`` and ``InvalidValueError`` are not, and ``UnsupportedError``
is a programming error (the sensor never had the attribute).
"""

from __future__ import annotations

from pathlib import Path


class HwmonError(Exception):
    """Base class for every error raised by this package."""


class HwmonIOError(HwmonError):
    """Opening, reading, writing or listing a sysfs path failed.

    The underlying ``OSError`` is chained as ``__cause__`` and kept in
    ``source``.
    """

    def __init__(self, path: Path | str, source: OSError) -> None:
        self.path = Path(path)
        self.source = source
        super().__init__(f"I/O error at {self.path}: {source.strerror or source}")

    @property
    def errno(self) -> int | None:
        """errno of the underlying OSError, if any."""
        return self.source.errno


class InsufficientRightsError(HwmonIOError):
    """The calling process may not read or write the path."""


class ParseError(HwmonError):
    """File content did not match the expected numeric or boolean encoding."""

    def __init__(self, raw: str, expected: str, path: Path | str | None = None) -> None:
        self.raw = raw
        self.expected = expected
        self.path = Path(path) if path is not None else None
        where = f" at {self.path}" if self.path is not None else ""
        super().__init__(f"Cannot parse {raw!r} as {expected}{where}")

    def with_path(self, path: Path | str) -> ParseError:
        """Return a copy of this error that records where the text was read."""
        return ParseError(self.raw, self.expected, path)


class InvalidValueError(HwmonError, ValueError):
    """A value to be written lies outside its type's domain or encoding."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r}: {reason}")


class PathNotAllowedError(HwmonError):
    """A path outside the canonical hwmon root was refused by the config."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Access to {self.path} is not allowed: {reason}")


class ConfigError(HwmonError, ValueError):
    """An ``HWMON_SENSORS_*`` environment variable holds an invalid value."""

    def __init__(self, variable: str, raw: str) -> None:
        self.variable = variable
        self.raw = raw
        super().__init__(f"{variable} must be a boolean flag, got {raw!r}")


class UnsupportedError(HwmonError):
    """The sensor has no such attribute, or it is not writable.

    Raised before any file is touched.
    """

    def __init__(self, sensor: str, attribute: str, *, write: bool = False) -> None:
        self.sensor = sensor
        self.attribute = attribute
        self.write = write
        access = "writing" if write else "reading"
        shown = attribute or "<value>"
        super().__init__(f"{sensor} does not support {access} {shown!r}")


def translate_os_error(exc: OSError, path: Path | str) -> HwmonIOError:
    """Wrap a raw OSError from a backend into the package's I/O error."""
    if isinstance(exc, PermissionError):
        return InsufficientRightsError(path, exc)
    return HwmonIOError(path, exc)


def translate_decode_error(exc: UnicodeDecodeError, path: Path | str) -> ParseError:
    """Turn undecodable file content into a ParseError naming the file."""
    raw = exc.object.decode("utf-8", errors="backslashreplace")
    return ParseError(raw.strip(), "utf-8 text", path)
