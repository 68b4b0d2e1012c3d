"""Filesystem stat capability used by the resolver."""

import os
import stat
from typing import NamedTuple, Protocol

from returns.result import Result, safe


class StatInfo(NamedTuple):
    """The subset of stat metadata the resolver looks at."""

    is_file: bool


class FileSystem(Protocol):
    """Anything that can stat a path."""

    def stat(self, path: str) -> Result[StatInfo, Exception]: ...


@safe
def _stat(path: str) -> StatInfo:
    """Stat a path on the local filesystem.

    Raises:
        OSError: If the path does not exist or cannot be queried.
    """
    return StatInfo(is_file=stat.S_ISREG(os.stat(path).st_mode))


class LocalFileSystem:
    """Stat capability backed by the local operating system."""

    def stat(self, path: str) -> Result[StatInfo, Exception]:
        return _stat(path)
