"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from rich.text import Text

from tasker.output.console import create_console, get_output, style_for_task

if TYPE_CHECKING:
    from rich.console import Console

    from tasker.domain.task import Task
    from tasker.services.result import ServiceResult

NO_PENDING_MESSAGE = "No tasks. Run add"
NO_TASKS_MESSAGE = "No tasks found"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    force_terminal: bool | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Styles are only emitted when *force_terminal* is set or stdout is a
    terminal, so CliRunner and piped output get plain text.
    """
    console = create_console(force_terminal=force_terminal)

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("title", "")) for item in items)

    return f"OK: {result.op}"


def render_tasks(console: Console, tasks: Iterable[Task | Mapping[str, Any]]) -> None:
    """Print ``{n}: {title}`` for each task, numbered from 1.

    Done tasks are green, pending ones sit on a red background. Callers
    handle the empty case themselves.
    """
    for index, task in enumerate(tasks, start=1):
        if isinstance(task, Mapping):
            title, done = str(task.get("title", "")), bool(task.get("done", False))
        else:
            title, done = task.title, task.done
        console.print(Text(f"{index}: {title}", style=style_for_task(done)))


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "tasker.ok"), (f"  {result.op}", "tasker.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tasker.key")
    if key == "id":
        v = Text(str(value), style="tasker.id")
    elif key == "title":
        v = Text(str(value), style="tasker.title")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "tasker.error"), (f"  {result.op}", "tasker.op"), f": {msg}")
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Task renderers ────────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/complete/delete results."""
    _status_line(console, result)
    for key in ("id", "title", "done"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        for key in ("created_at", "updated_at"):
            if key in result.data:
                _field(console, key, result.data[key])


def _render_task_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        pending = result.data.get("selector") == "pending"
        console.print(Text(NO_PENDING_MESSAGE if pending else NO_TASKS_MESSAGE, style="tasker.info"))
        return
    render_tasks(console, items)
    if verbose:
        console.print(f"\n{result.data.get('count', len(items))} tasks")


_OP_RENDERERS: dict[str, Any] = {
    "add_task": _render_mutation,
    "complete_task": _render_mutation,
    "delete_task": _render_mutation,
    "list_tasks": _render_task_list,
}
