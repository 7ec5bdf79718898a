"""Custom Click base classes with --examples and alias support.

``TaskerCommand`` accepts an ``examples`` parameter; passing ``--examples``
prints them and exits, which keeps ``--help`` concise.

``TaskerGroup`` resolves short aliases (``a`` for ``add``) registered via
:meth:`TaskerGroup.add_alias`.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TaskerCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class TaskerGroup(click.Group):
    """Click Group with ``--examples`` and command aliases.

    Sets ``command_class = TaskerCommand`` so all subcommands accept the
    ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = TaskerCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases: dict[str, str] = {}
        if examples:
            _add_examples_option(self, examples)

    def add_alias(self, alias: str, name: str) -> None:
        """Make *alias* resolve to the registered command *name*."""
        if name not in self.commands:
            msg = f"Cannot alias unknown command: {name}"
            raise ValueError(msg)
        self.aliases[alias] = name

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        # Report the canonical name so ctx.invoked_subcommand is never an alias.
        _, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, rest

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        by_name: dict[str, list[str]] = {}
        for alias, name in sorted(self.aliases.items()):
            by_name.setdefault(name, []).append(alias)

        rows: list[tuple[str, str]] = []
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            label = ", ".join([name, *by_name.get(name, [])])
            rows.append((label, cmd.get_short_help_str(limit=formatter.width - 6 - len(label))))

        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)
