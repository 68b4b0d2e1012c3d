"""Configuration model and loader for component-resolver."""

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from xdg_base_dirs import xdg_config_home
from returns.result import Result, Failure, safe, Success

from component_resolver.result import bind_safe
from component_resolver.resolver import DEFAULT_EXTENSIONS, DEFAULT_VENDOR_DIR, normalize_extensions


class ResolverConfig(BaseModel):
    """Top-level configuration for the component resolver."""

    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    vendor_dir: str = DEFAULT_VENDOR_DIR

    @field_validator('extensions')
    @classmethod
    def _check_extensions(cls, value: list[str]) -> list[str]:
        return list(normalize_extensions(value))


class ConfigLoadError(Exception):
    """Raised when configuration loading fails."""


_config_bind_safe = bind_safe(ConfigLoadError)


def get_config_path(path: Optional[Path]) -> Path:
    """Returns the `path` passed in the argument or the default `$XDG_CONFIG_HOME/component-resolver/config.toml`."""
    if path is not None:
        return path
    return xdg_config_home() / 'component-resolver' / 'config.toml'


def _ensure_config_file_exists(config_path: Path) -> Result[Path, ConfigLoadError]:
    if not config_path.exists():
        return Failure(ConfigLoadError(f'Config file not found: {config_path}'))
    return Success(config_path)


@safe
def _read_file(path: Path) -> bytes:
    """Read file bytes from path.

    Raises:
        OSError: If the file cannot be read.
    """
    return path.read_bytes()


@safe
def _parse_toml(raw: bytes) -> dict:
    """Parse TOML bytes to a dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the TOML syntax is invalid.
    """
    return tomllib.loads(raw.decode())


@safe
def _validate_config(data: dict) -> ResolverConfig:
    return ResolverConfig(**data)


def load_config(config_path: Path) -> Result[ResolverConfig, ConfigLoadError]:
    """Load and validate a TOML configuration file.

    Args:
        config_path: Path to the TOML configuration file.

    Returns:
        Success containing a validated ResolverConfig.
        Failure containing ConfigLoadError if the file is not found,
        cannot be read, contains invalid TOML, or fails Pydantic validation.
    """
    return (
        _ensure_config_file_exists(config_path)
        .bind(_config_bind_safe(_read_file, 'Failed to read config file'))
        .bind(_config_bind_safe(_parse_toml, 'Failed to parse TOML config'))
        .bind(_config_bind_safe(_validate_config, 'Config validation failed'))
    )


def load_config_or_default(config_path: Optional[Path]) -> Result[ResolverConfig, ConfigLoadError]:
    """Load an explicit config file, or fall back to defaults.

    An explicitly given path must exist. The default XDG path is optional:
    when it is missing the built-in defaults are used.
    """
    path = get_config_path(config_path)
    if config_path is None and not path.exists():
        return Success(ResolverConfig())
    return load_config(path)
