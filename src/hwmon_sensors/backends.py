"""File access primitives used by sensors and discovery.

Two interchangeable backends with the same contract: open the file in a
context manager (the handle is released on every exit path), read or write
the whole text, and let any ``OSError`` propagate unmodified.  Translating
those errors and decoding the text is left to the callers.
"""

from __future__ import annotations

import os
from pathlib import Path

import aiofiles
import aiofiles.os
import aiofiles.ospath

StrPath = str | os.PathLike[str]

# Not provided by aiofiles.os.path.
_realpath = aiofiles.ospath.wrap(os.path.realpath)


class SyncBackend:
    """Blocking file access on the caller's thread."""

    def read_to_string(self, path: StrPath) -> str:
        with open(path, encoding="utf-8") as f:
            return f.read()

    def write_string(self, path: StrPath, contents: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(contents)

    def list_dir(self, path: StrPath) -> list[str]:
        return os.listdir(path)

    def is_dir(self, path: StrPath) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: StrPath) -> bool:
        return Path(path).is_file()

    def access(self, path: StrPath, mode: int) -> bool:
        return os.access(path, mode)

    def realpath(self, path: StrPath) -> str:
        return os.path.realpath(path)


class AsyncBackend:
    """Awaitable file access through aiofiles.

    Each call suspends exactly once, for the underlying file operation.
    """

    async def read_to_string(self, path: StrPath) -> str:
        async with aiofiles.open(path, encoding="utf-8") as f:
            return await f.read()

    async def write_string(self, path: StrPath, contents: str) -> None:
        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(contents)

    async def list_dir(self, path: StrPath) -> list[str]:
        return await aiofiles.os.listdir(path)

    async def is_dir(self, path: StrPath) -> bool:
        return await aiofiles.os.path.isdir(path)

    async def is_file(self, path: StrPath) -> bool:
        return await aiofiles.os.path.isfile(path)

    async def access(self, path: StrPath, mode: int) -> bool:
        return await aiofiles.os.access(path, mode)

    async def realpath(self, path: StrPath) -> str:
        return await _realpath(path)
