"""Root CLI group for tasker with global flags and command registration."""

from __future__ import annotations

import click

from tasker import __version__
from tasker.commands import register_commands
from tasker.commands._base import TaskerGroup
from tasker.commands._context import AppContext
from tasker.config.settings import TaskerSettings

_ROOT_EXAMPLES = """\
  tasker
  tasker add "buy milk"
  tasker done "buy milk"
  tasker finished
  tasker rm "buy milk"
  tasker --json all"""


@click.group(cls=TaskerGroup, invoke_without_command=True, examples=_ROOT_EXAMPLES)
@click.version_option(version=__version__, prog_name="tasker")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """tasker: a simple task manager.

    Without a command, lists pending tasks.
    """
    settings = TaskerSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        from tasker.services.tasks import TaskService

        app.emit(TaskService(app.store).list_tasks("pending"))


register_commands(cli)
