"""Tests for help and version display."""

from typer.testing import CliRunner

from component_resolver import __version__
from component_resolver.cli import app

runner = CliRunner()


class TestHelpDisplay:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        # Typer with no_args_is_help may return 0 or 2 depending on version
        assert result.exit_code in (0, 2)
        assert 'Usage' in result.output or 'usage' in result.output.lower()

    def test_help_flag(self):
        result = runner.invoke(app, ['--help'])
        assert result.exit_code == 0
        assert 'Usage' in result.output

    def test_resolve_help(self):
        result = runner.invoke(app, ['resolve', '--help'])
        assert result.exit_code == 0
        assert '--base-path' in result.output
        assert '--ext' in result.output


class TestVersionDisplay:
    def test_version_flag(self):
        result = runner.invoke(app, ['--version'])
        assert result.exit_code == 0
        assert f'component-resolver version {__version__}' in result.output
