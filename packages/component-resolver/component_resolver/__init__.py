"""component-resolver: component-directory resolution step for module-resolution pipelines."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('component-resolver')
except PackageNotFoundError:
    # Fallback for development environment
    __version__ = 'unknown'
