"""Rich Console factory and theme for tasker output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

import sys
from io import StringIO

from rich.console import Console
from rich.theme import Theme

TASKER_THEME = Theme(
    {
        "tasker.ok": "bold green",
        "tasker.error": "bold red",
        "tasker.warning": "bold yellow",
        "tasker.op": "bold cyan",
        "tasker.key": "dim",
        "tasker.id": "bold blue",
        "tasker.title": "bold",
        "tasker.info": "italic",
        "tasker.done": "green",
        "tasker.pending": "white on red",
    }
)


def create_console(
    *,
    no_color: bool = False,
    width: int | None = None,
    force_terminal: bool | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
        force_terminal: Emit styles even though the buffer is not a TTY.
            Defaults to whether stdout is a terminal.
    """
    if force_terminal is None:
        force_terminal = sys.stdout.isatty()
    return Console(
        file=StringIO(),
        theme=TASKER_THEME,
        no_color=no_color,
        force_terminal=force_terminal,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_task(done: bool) -> str:
    """Return the Rich style name for a task's status."""
    return "tasker.done" if done else "tasker.pending"
