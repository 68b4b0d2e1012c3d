"""Separator normalization and request splitting helpers.

All helpers take a path flavor module (``posixpath`` or ``ntpath``) so that the
platform rules can be exercised on any host. ``os.path`` is the default.
"""

import os.path
from types import ModuleType
from typing import NamedTuple

PathFlavor = ModuleType

_UNUSABLE_BASE_NAMES = frozenset({'', '.', '..'})


class ComponentTarget(NamedTuple):
    """Where to look for a component file and what it is called."""

    directory: str
    base_name: str


def normalize_separators(path: str, flavor: PathFlavor = os.path) -> str:
    """Rewrite both ``/`` and ``\\`` to the flavor's separator.

    Segments are left as they are, including ``.`` and ``..``.
    """
    unified = path.replace('\\', '/')
    if flavor.sep != '/':
        unified = unified.replace('/', flavor.sep)
    return unified


def split_segments(path: str, flavor: PathFlavor = os.path) -> list[str]:
    """Return the non-empty segments of a separator-normalized path."""
    return [segment for segment in path.split(flavor.sep) if segment]


def contains_segment(path: str, segment: str, flavor: PathFlavor = os.path) -> bool:
    """Check whether any segment of ``path`` is exactly ``segment``."""
    return segment in split_segments(path, flavor)


def split_request(base_path: str, request: str, flavor: PathFlavor = os.path) -> ComponentTarget | None:
    """Split a separator-normalized request into a target directory and base name.

    Absolute requests ignore ``base_path`` entirely. Relative requests are
    joined onto ``base_path``. Redundant separators and ``.``/``..`` segments
    are collapsed here.

    Returns:
        The target, or None when the request has no usable last segment.
    """
    request = flavor.normpath(request)
    head, base_name = flavor.split(request)
    if base_name in _UNUSABLE_BASE_NAMES:
        return None
    if flavor.isabs(request):
        return ComponentTarget(directory=head, base_name=base_name)
    if not head:
        return ComponentTarget(directory=flavor.normpath(base_path), base_name=base_name)
    return ComponentTarget(directory=flavor.normpath(flavor.join(base_path, head)), base_name=base_name)
