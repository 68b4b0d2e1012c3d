"""component-resolver resolve"""

import os.path
from pathlib import Path

import typer
from returns.maybe import Some
from returns.result import Failure

from component_resolver.config import load_config_or_default
from component_resolver.models import ResolutionRequest
from component_resolver.pipeline import build_pipeline
from component_resolver.resolver import ResolverConfigError


def execute(
    request: str,
    base_path: Path,
    query: str | None,
    extensions: list[str] | None,
    config: Path | None,
):
    config_result = load_config_or_default(config)
    if isinstance(config_result, Failure):
        typer.echo(str(config_result.failure()), err=True)
        raise typer.Exit(code=1)
    cfg = config_result.unwrap()

    # Command-line extensions replace the configured list
    if extensions:
        cfg = cfg.model_copy(update={'extensions': extensions})

    try:
        pipeline = build_pipeline(cfg)
    except ResolverConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    result = pipeline.resolve(ResolutionRequest(base_path=str(base_path), request=request, query=query))

    if not isinstance(result, Some):
        typer.echo(f'[DEFERRED] No component file for {request!r}')
        raise typer.Exit(code=1)

    resolved = result.unwrap()
    typer.echo(f'[FOUND] {os.path.join(resolved.directory, resolved.filename)}')
    for key, value in resolved.to_descriptor().items():
        typer.echo(f'  {key}: {value}')
