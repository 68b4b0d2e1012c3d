"""component-resolver check"""

from pathlib import Path

import typer
from returns.result import Failure

from component_resolver.config import get_config_path, load_config_or_default


def execute(config: Path | None):
    config_result = load_config_or_default(config)
    if isinstance(config_result, Failure):
        typer.echo(str(config_result.failure()), err=True)
        raise typer.Exit(code=1)
    cfg = config_result.unwrap()

    config_path = get_config_path(config)
    source = str(config_path) if config_path.exists() else 'built-in defaults'
    typer.echo(f'[CHECK] Config loaded: {source}')

    typer.echo(f'  vendor_dir: {cfg.vendor_dir}')
    typer.echo(f'  extensions: {len(cfg.extensions)} in priority order')
    for i, ext in enumerate(cfg.extensions, 1):
        typer.echo(f'    {i}. .{ext}')

    typer.echo('\n[SUCCESS] Configuration is valid')
