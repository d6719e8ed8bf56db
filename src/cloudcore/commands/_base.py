"""Click base classes with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints copy-pasteable invocations
and exits.  Commands opt in by passing ``examples="..."`` to the decorator.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(examples)
    ctx.exit(0)


def examples_option() -> click.Option:
    """Build the eager ``--examples`` flag; it reads the text off the command."""
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples,
        help="Show usage examples.",
    )


class CloudCoreCommand(click.Command):
    """Command carrying an optional ``examples`` text shown by ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(examples_option())


class CloudCoreGroup(click.Group):
    """Group whose subcommands default to :class:`CloudCoreCommand`."""

    command_class = CloudCoreCommand
