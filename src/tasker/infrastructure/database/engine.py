"""Database engine setup.

The store is addressed by a SQLAlchemy URL. The default is a SQLite file
at ``{root}/.tasker/tasker.db``; SQLite connections get WAL journaling.

SQLAlchemy Core (not ORM) is used because tasker is a short-lived CLI
process, with no benefit from session management or identity maps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import Table, create_engine, event
from sqlalchemy.engine import Engine, make_url

from tasker.infrastructure.database.schema import DEFAULT_COLLECTION, metadata, tasks_table

DATA_DIRNAME = ".tasker"
DB_FILENAME = "tasker.db"


def default_url(root: Path) -> str:
    """SQLite URL for the database under *root*."""
    return f"sqlite:///{root / DATA_DIRNAME / DB_FILENAME}"


def create_db_engine(url: str) -> Engine:
    """Create an engine for *url*; SQLite files get WAL mode.

    For file-backed SQLite URLs the parent directory is created.
    """
    parsed = make_url(url)
    is_sqlite = parsed.get_backend_name() == "sqlite"
    if is_sqlite and parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url)

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine


def init_database(
    url: str,
    *,
    collection: str = DEFAULT_COLLECTION,
) -> tuple[Engine, Table]:
    """Create the engine and the task table if missing.

    Idempotent: safe to call on an existing database.

    Returns the engine and the bound table.
    """
    engine = create_db_engine(url)
    table = tasks_table(collection)
    metadata.create_all(engine, tables=[table])
    return engine, table
