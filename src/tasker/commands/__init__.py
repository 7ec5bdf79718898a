"""Subcommand modules for tasker.

Provides register_commands() which attaches every command and its
short alias to the root group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tasker.commands._base import TaskerGroup


def register_commands(cli: TaskerGroup) -> None:
    """Register all task commands and their aliases on the root CLI group."""
    from tasker.commands.add import add
    from tasker.commands.done import done
    from tasker.commands.listing import all_cmd, finished
    from tasker.commands.remove import rm

    cli.add_command(add)
    cli.add_command(all_cmd)
    cli.add_command(done)
    cli.add_command(finished)
    cli.add_command(rm)

    cli.add_alias("a", "add")
    cli.add_alias("l", "all")
    cli.add_alias("d", "done")
    cli.add_alias("f", "finished")
