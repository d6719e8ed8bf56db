"""Subcommand modules for the cloudcore CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every subcommand on the root group."""
    from cloudcore.commands.flatten import flatten
    from cloudcore.commands.render import render
    from cloudcore.commands.size import size

    cli.add_command(flatten)
    cli.add_command(render)
    cli.add_command(size)
