"""Commands: list all tasks, list finished tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tasker.commands._base import TaskerCommand
from tasker.services.tasks import TaskService

if TYPE_CHECKING:
    from tasker.commands._context import AppContext


@click.command(
    name="all",
    cls=TaskerCommand,
    examples="""\
  tasker all
  tasker l
  tasker --json all""",
)
@click.pass_obj
def all_cmd(app: AppContext) -> None:
    """List all tasks."""
    app.emit(TaskService(app.store).list_tasks("all"))


@click.command(
    cls=TaskerCommand,
    examples="""\
  tasker finished
  tasker f
  tasker -q finished""",
)
@click.pass_obj
def finished(app: AppContext) -> None:
    """List finished tasks."""
    app.emit(TaskService(app.store).list_tasks("finished"))
