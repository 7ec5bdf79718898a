"""TaskStore: create, find, complete and delete task documents.

Each public method is one backend round-trip (or one transaction) and
answers with a tagged outcome from :mod:`tasker.domain.outcomes`. Backend
and decode errors never escape as exceptions from the CRUD methods; they
come back as :class:`~tasker.domain.outcomes.Failure` so callers can tell
"nothing matched" from "the query failed".
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError

from tasker.domain.outcomes import Applied, Empty, Failure, Found, NotFound
from tasker.domain.task import Task
from tasker.infrastructure.database.engine import init_database
from tasker.infrastructure.database.schema import DEFAULT_COLLECTION, tasks
from tasker.infrastructure.repositories.filters import filter_by_title

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Table
    from sqlalchemy.engine import Engine

    from tasker.domain.outcomes import FindOutcome, WriteOutcome
    from tasker.infrastructure.repositories.filters import Selector

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The backend could not be reached or initialized."""


def _encode(task: Task) -> dict[str, Any]:
    return task.model_dump(mode="json")


def _decode(row: Mapping[str, Any]) -> Task:
    return Task.model_validate(dict(row))


class TaskStore:
    """Task persistence over a SQLAlchemy engine and one task table."""

    def __init__(self, engine: Engine, table: Table = tasks) -> None:
        self._engine = engine
        self._table = table

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def table(self) -> Table:
        return self._table

    def ping(self) -> None:
        """Round-trip a trivial query; raise :class:`StoreError` on failure."""
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StoreError(f"Task store unreachable: {exc}") from exc

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, task: Task) -> WriteOutcome:
        """Insert *task* as a new document."""
        try:
            with self._engine.begin() as conn:
                conn.execute(self._table.insert().values(**_encode(task)))
        except SQLAlchemyError as exc:
            return self._failure("create", exc)
        logger.debug("Created task %s", task.id)
        return Applied(task)

    def find_many(self, selector: Selector) -> FindOutcome:
        """Return every task matching *selector* in backend order."""
        stmt = select(self._table).where(selector)
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
            found = [_decode(row) for row in rows]
        except (SQLAlchemyError, ValidationError) as exc:
            return self._failure("find_many", exc)
        if not found:
            return Empty()
        return Found(found)

    def complete_one(self, title: str) -> WriteOutcome:
        """Mark the first task titled *title* as done.

        Already-done tasks still match, so repeating the call succeeds.
        """
        t = self._table
        try:
            with self._engine.begin() as conn:
                row = conn.execute(
                    select(t).where(filter_by_title(title, t)).limit(1)
                ).mappings().first()
                if row is None:
                    return NotFound(title)
                updated = _decode(row).mark_done()
                conn.execute(
                    t.update()
                    .where(t.c.id == updated.id)
                    .values(done=True, updated_at=_encode(updated)["updated_at"])
                )
        except (SQLAlchemyError, ValidationError) as exc:
            return self._failure("complete_one", exc)
        logger.debug("Completed task %s", updated.id)
        return Applied(updated)

    def delete_one(self, title: str) -> WriteOutcome:
        """Delete the first task titled *title*."""
        t = self._table
        try:
            with self._engine.begin() as conn:
                row = conn.execute(
                    select(t).where(filter_by_title(title, t)).limit(1)
                ).mappings().first()
                if row is None:
                    return NotFound(title)
                removed = _decode(row)
                res = conn.execute(t.delete().where(t.c.id == removed.id))
                if res.rowcount == 0:
                    return NotFound(title)
        except (SQLAlchemyError, ValidationError) as exc:
            return self._failure("delete_one", exc)
        logger.debug("Deleted task %s", removed.id)
        return Applied(removed)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _failure(self, op: str, exc: Exception) -> Failure:
        logger.error("Task store %s failed: %s", op, exc)
        return Failure(f"{type(exc).__name__}: {exc}")


def open_store(
    url: str,
    *,
    collection: str = DEFAULT_COLLECTION,
) -> TaskStore:
    """Initialize the database at *url* and return a pinged store.

    Raises :class:`StoreError` when the backend cannot be initialized.
    """
    try:
        engine, table = init_database(url, collection=collection)
    except (SQLAlchemyError, OSError) as exc:
        raise StoreError(f"Cannot initialize task store at {url}: {exc}") from exc
    store = TaskStore(engine, table)
    store.ping()
    return store
