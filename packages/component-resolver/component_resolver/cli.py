"""CLI application for component-resolver."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from component_resolver.commands import check as check_command
from component_resolver.commands import resolve as resolve_command
from component_resolver.commands import utils

app = typer.Typer(no_args_is_help=True)


def help_callback(ctx: typer.Context, value: bool) -> None:
    """Display help and exit.

    Args:
        ctx: Typer context.
        value: If True, display help and exit.
    """
    if value:
        typer.echo(ctx.get_help())
        raise typer.Exit()


ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        '-c',
        '--config',
        help='Path to config file.',
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
]

VerboseOption = Annotated[
    bool,
    typer.Option(
        '-V',
        '--verbose',
        help='Enable verbose output.',
    ),
]

HelpOption = Annotated[
    bool,
    typer.Option(
        '-h',
        '--help',
        callback=help_callback,
        is_eager=True,
        help='Show this message and exit.',
    ),
]


@app.callback()
def main(
    _version: Annotated[
        bool,
        typer.Option(
            '-v',
            '--version',
            callback=utils.version_callback,
            is_eager=True,
            help='Show version and exit.',
        ),
    ] = False,
    _help: HelpOption = False,
) -> None:
    """component-resolver: resolve Dir/Dir.<ext> component requests."""


@app.command()
def resolve(
    request: Annotated[str, typer.Argument(help='Requested module path.')],
    base_path: Annotated[
        Path,
        typer.Option(
            '-b',
            '--base-path',
            help='Directory the request is made from.',
            file_okay=False,
            resolve_path=True,
        ),
    ] = Path('.'),
    query: Annotated[
        Optional[str],
        typer.Option(
            '-q',
            '--query',
            help='Opaque query string carried into the result.',
        ),
    ] = None,
    extensions: Annotated[
        Optional[list[str]],
        typer.Option(
            '-e',
            '--ext',
            help='Extension to try, in priority order. Repeatable. Overrides the config.',
        ),
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
    _help: HelpOption = False,
) -> None:
    """Resolve a request against the component convention."""
    utils.setup_logging(verbose)
    resolve_command.execute(request, base_path, query, extensions, config)


@app.command()
def check(
    config: ConfigOption = None,
    verbose: VerboseOption = False,
    _help: HelpOption = False,
) -> None:
    """Validate configuration and show the extension priority order."""
    utils.setup_logging(verbose)
    check_command.execute(config)
