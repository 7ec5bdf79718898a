"""SQLAlchemy Core table definitions for the task collection.

One row per task document. Timestamps are stored as ISO-8601 text so the
rows read the same on every backend.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, MetaData, Table, Text

DEFAULT_COLLECTION = "tasks"

metadata = MetaData()


def tasks_table(name: str = DEFAULT_COLLECTION, meta: MetaData | None = None) -> Table:
    """Build the task table under *name*.

    Reuses an already-registered table of the same name on *meta*.
    """
    meta = metadata if meta is None else meta
    if name in meta.tables:
        return meta.tables[name]
    return Table(
        name,
        meta,
        Column("id", Text, primary_key=True),
        Column("created_at", Text, nullable=False),
        Column("updated_at", Text, nullable=False),
        Column("title", Text, nullable=False),
        Column("done", Boolean, nullable=False, default=False, server_default="0"),
    )


tasks = tasks_table()
