"""Tests for the --examples flag on subcommands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from cloudcore.cli import cli


@pytest.fixture(autouse=True)
def _isolated(isolated_cwd: Path) -> None:
    """Keep example tests away from real config files."""


@pytest.mark.parametrize("command", ["flatten", "render", "size"])
def test_examples_flag(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert f"Examples for 'cloudcore {command}'" in result.output
    assert f"cloudcore {command}" in result.output


@pytest.mark.parametrize("command", ["flatten", "render", "size"])
def test_help_mentions_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
