"""Task database engine and schema via SQLAlchemy Core."""

from tasker.infrastructure.database.engine import create_db_engine, default_url, init_database
from tasker.infrastructure.database.schema import DEFAULT_COLLECTION, metadata, tasks, tasks_table

__all__ = [
    "DEFAULT_COLLECTION",
    "create_db_engine",
    "default_url",
    "init_database",
    "metadata",
    "tasks",
    "tasks_table",
]
