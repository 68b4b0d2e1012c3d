"""Shared fixtures and helpers for component-resolver tests."""

from pathlib import Path
from typing import Any

import pytest
from returns.result import Failure, Result, Success

from component_resolver.filesystem import LocalFileSystem, StatInfo


# ---------------------------------------------------------------------------
# Filesystem doubles
# ---------------------------------------------------------------------------


class RecordingFileSystem(LocalFileSystem):
    """Local filesystem that records every stat query."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def stat(self, path: str) -> Result[StatInfo, Exception]:
        self.calls.append(path)
        return super().stat(path)


class FailingFileSystem:
    """Filesystem whose stat always fails with the given error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls: list[str] = []

    def stat(self, path: str) -> Result[StatInfo, Exception]:
        self.calls.append(path)
        return Failure(self.error)


class FakeFileSystem:
    """In-memory filesystem keyed by exact path strings."""

    def __init__(self, files: set[str], dirs: set[str] | None = None) -> None:
        self.files = files
        self.dirs = dirs or set()
        self.calls: list[str] = []

    def stat(self, path: str) -> Result[StatInfo, Exception]:
        self.calls.append(path)
        if path in self.files:
            return Success(StatInfo(is_file=True))
        if path in self.dirs:
            return Success(StatInfo(is_file=False))
        return Failure(FileNotFoundError(path))


class ContinuationSpy:
    """Records invocations of the success sink and the fallback."""

    def __init__(self) -> None:
        self.resolved: list[tuple[str, dict[str, Any], Any]] = []
        self.fallback_calls: list[tuple[Any, ...]] = []

    def do_resolve(self, kind: str, descriptor: dict[str, Any], callback: Any) -> str:
        self.resolved.append((kind, descriptor, callback))
        return 'resolved'

    def callback(self, *args: Any) -> str:
        self.fallback_calls.append(args)
        return 'deferred'

    @property
    def total_calls(self) -> int:
        return len(self.resolved) + len(self.fallback_calls)


# ---------------------------------------------------------------------------
# Fixture tree
# ---------------------------------------------------------------------------


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('// component\n')


@pytest.fixture()
def fixtures_dir(tmp_path: Path) -> Path:
    """Create a tree of component directories.

    Layout::

        dir_without_file/
        dir_inside_of_dir/dir_inside_of_dir.js/      (a directory)
        dir_inside_of_dir/dir_inside_of_dir.jsx/     (a directory)
        dir_with_file/dir_with_file.jsx
        dir_with_few_files/dir_with_few_files.{js,jsx,coffee}
        dir_with_file_and_component/component.js
        dir_with_node_modules/node_modules/component/component.js
    """
    root = tmp_path / '_fixtures'
    (root / 'dir_without_file').mkdir(parents=True)
    (root / 'dir_inside_of_dir' / 'dir_inside_of_dir.js').mkdir(parents=True)
    (root / 'dir_inside_of_dir' / 'dir_inside_of_dir.jsx').mkdir(parents=True)
    _touch(root / 'dir_with_file' / 'dir_with_file.jsx')
    for ext in ('js', 'jsx', 'coffee'):
        _touch(root / 'dir_with_few_files' / f'dir_with_few_files.{ext}')
    _touch(root / 'dir_with_file_and_component' / 'component.js')
    _touch(root / 'dir_with_node_modules' / 'node_modules' / 'component' / 'component.js')
    return root


@pytest.fixture()
def recording_fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture()
def spy() -> ContinuationSpy:
    return ContinuationSpy()
