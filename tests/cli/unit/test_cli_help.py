"""CLI smoke tests."""

from click.testing import CliRunner
from flatdoc.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "flatten" in result.output
    assert "convert" in result.output
    assert "get" in result.output
    assert "generate-config" in result.output


def test_flatten_help_lists_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["flatten", "--help"])

    assert result.exit_code == 0
    assert "--ignore" in result.output
    assert "--config" in result.output
    assert "--format" in result.output
