"""Filter builder: logical selectors to SQL expressions.

Every builder takes the task table it targets (default: the ``tasks``
table) and returns a boolean column expression usable in ``where()``.
No validation happens here; inputs are matched as given.
"""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import ColumnElement, Table, true

from tasker.infrastructure.database.schema import tasks

Selector = ColumnElement[bool]


def filter_all(table: Table = tasks) -> Selector:
    """Match every task."""
    return true()


def filter_pending(table: Table = tasks) -> Selector:
    """Match tasks not yet done."""
    return table.c.done.is_(False)


def filter_finished(table: Table = tasks) -> Selector:
    """Match completed tasks."""
    return table.c.done.is_(True)


def filter_by_title(title: str, table: Table = tasks) -> Selector:
    """Exact, case-sensitive title match."""
    return table.c.title == title


SELECTORS: dict[str, Callable[[Table], Selector]] = {
    "all": filter_all,
    "pending": filter_pending,
    "finished": filter_finished,
}


def selector_for(name: str, table: Table = tasks) -> Selector:
    """Resolve a named selector (``all``, ``pending``, ``finished``)."""
    try:
        builder = SELECTORS[name]
    except KeyError:
        msg = f"Unknown selector: {name!r}. Expected one of {sorted(SELECTORS)}"
        raise ValueError(msg) from None
    return builder(table)
