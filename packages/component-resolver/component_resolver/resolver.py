"""Component-directory resolution step.

Resolves requests such as ``Widget`` or ``ui/Widget`` to ``Widget/Widget.<ext>``
by probing the configured extensions in priority order. A plain file named
after the request (``ui/Widget.<ext>``) is accepted as well.
"""

import logging
import os.path
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from returns.maybe import Maybe, Nothing, Some

from component_resolver.filesystem import FileSystem, LocalFileSystem
from component_resolver.hookspecs import hookimpl
from component_resolver.models import Continuation, ResolutionRequest, ResolvedFile, continue_with
from component_resolver.paths import ComponentTarget, PathFlavor, contains_segment, normalize_separators, split_request

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = ('js', 'jsx')
DEFAULT_VENDOR_DIR = 'node_modules'


class ResolverConfigError(ValueError):
    """Raised when a resolver is constructed with an unusable configuration."""


def normalize_extensions(extensions: Iterable[str]) -> tuple[str, ...]:
    """Validate extension tokens and strip a single leading dot.

    Raises:
        ResolverConfigError: If the list is empty or contains an empty token.
    """
    normalized: list[str] = []
    for ext in extensions:
        token = ext[1:] if ext.startswith('.') else ext
        if not token:
            raise ResolverConfigError(f'Invalid extension token: {ext!r}')
        normalized.append(token)
    if not normalized:
        raise ResolverConfigError('At least one extension is required')
    return tuple(normalized)


class ComponentResolver:
    """Resolve requests following the ``Dir/Dir.<ext>`` component convention.

    The first extension in ``extensions`` for which a regular file exists wins.
    Failures to stat a candidate are never reported: the candidate is skipped,
    and a request with no match is deferred to the next pipeline step.
    """

    def __init__(
        self,
        extensions: Optional[Sequence[str]] = None,
        filesystem: Optional[FileSystem] = None,
        vendor_dir: str = DEFAULT_VENDOR_DIR,
        flavor: PathFlavor = os.path,
    ) -> None:
        """Initialize the resolver.

        Args:
            extensions: Ordered extension tokens without leading dot. Defaults
                to DEFAULT_EXTENSIONS.
            filesystem: Stat capability. Defaults to the local filesystem.
            vendor_dir: Folder name whose presence in a request disables
                component resolution.
            flavor: Path module defining separators and absolute paths.

        Raises:
            ResolverConfigError: If the extension list is unusable.
        """
        self._extensions = normalize_extensions(DEFAULT_EXTENSIONS if extensions is None else extensions)
        self._filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self._vendor_dir = vendor_dir
        self._flavor = flavor

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def _is_regular_file(self, path: str) -> bool:
        return self._filesystem.stat(path).map(lambda info: info.is_file).value_or(False)

    def _candidates(self, target: ComponentTarget) -> Iterator[tuple[str, str]]:
        """Yield (directory, filename) pairs in probing order.

        Extension priority comes first. Within one extension the file next to
        the request is tried before the one inside the component directory.
        """
        component_dir = self._flavor.join(target.directory, target.base_name)
        for ext in self._extensions:
            filename = f'{target.base_name}.{ext}'
            yield target.directory, filename
            yield component_dir, filename

    def resolve(self, request: ResolutionRequest) -> Maybe[ResolvedFile]:
        """Resolve a request to a component file.

        Args:
            request: The request to resolve.

        Returns:
            Some containing the matched file, or Nothing to defer.
        """
        if not request.request:
            logger.debug('Deferred: empty request')
            return Nothing

        requested = normalize_separators(request.request, self._flavor)
        if self._vendor_dir and contains_segment(requested, self._vendor_dir, self._flavor):
            logger.debug(f'Deferred: {requested} passes through {self._vendor_dir}')
            return Nothing

        base_path = normalize_separators(request.base_path, self._flavor)
        target = split_request(base_path, requested, self._flavor)
        if target is None:
            logger.debug(f'Deferred: {requested} has no component name')
            return Nothing

        for directory, filename in self._candidates(target):
            if self._is_regular_file(self._flavor.join(directory, filename)):
                logger.debug(f'Matched {filename} in {directory}')
                return Some(ResolvedFile(directory=directory, filename=filename, query=request.query))

        logger.debug(f'Deferred: no component file for {requested}')
        return Nothing

    def handle(self, request: ResolutionRequest, continuation: Continuation) -> Any:
        """Resolve a request and invoke exactly one continuation."""
        return continue_with(self.resolve(request), continuation)

    @hookimpl
    def resolve_request(self, request: ResolutionRequest) -> Optional[ResolvedFile]:
        return self.resolve(request).value_or(None)
