"""Command: delete a task."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tasker.commands._base import TaskerCommand
from tasker.services.tasks import TaskService

if TYPE_CHECKING:
    from tasker.commands._context import AppContext


@click.command(
    cls=TaskerCommand,
    examples="""\
  tasker rm "buy milk"
  tasker --json rm "buy milk\"""",
)
@click.argument("title", required=False, default="")
@click.pass_obj
def rm(app: AppContext, title: str) -> None:
    """Delete the first task with a matching title."""
    app.emit(TaskService(app.store).delete_task(title))
