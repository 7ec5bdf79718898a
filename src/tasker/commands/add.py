"""Command: add a task."""

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
  tasker add "buy milk"
  tasker a "water the plants"
  tasker --json add "file taxes\"""",
)
@click.argument("title", required=False, default="")
@click.pass_obj
def add(app: AppContext, title: str) -> None:
    """Add a task to the list."""
    app.emit(TaskService(app.store).add_task(title))
