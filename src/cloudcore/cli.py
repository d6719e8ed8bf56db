"""``cloudcore`` entry point: global flags, settings loading, subcommands."""

from __future__ import annotations

import click

from cloudcore import __version__
from cloudcore.commands import register_commands
from cloudcore.commands._base import CloudCoreGroup
from cloudcore.commands._context import AppContext
from cloudcore.config.settings import CloudCoreSettings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    "cloudcore",
    cls=CloudCoreGroup,
    invoke_without_command=True,
    context_settings=CONTEXT_SETTINGS,
)
@click.version_option(__version__, prog_name="cloudcore")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON on stdout.")
@click.option("-v", "--verbose", is_flag=True, help="Show cloudcore debug logs on stderr.")
@click.option("--log-json", is_flag=True, help="Write logs as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Read settings from this TOML file instead of cloudcore.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """cloudcore: flatten objects, fill placeholder templates, format sizes."""
    ctx.obj = AppContext(
        CloudCoreSettings.load(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
