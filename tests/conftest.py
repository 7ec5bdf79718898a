"""Shared pytest fixtures and test helpers for tasker tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from tasker.infrastructure.database.engine import default_url
from tasker.infrastructure.repositories.tasks import TaskStore, open_store


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TASKER_* environment out of the tests."""
    for name in [k for k in os.environ if k.startswith("TASKER_")]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store_url(tmp_path: Path) -> str:
    """SQLite URL under a temp root."""
    return default_url(tmp_path)


@pytest.fixture
def store(store_url: str) -> Iterator[TaskStore]:
    """Initialized task store on a temp SQLite file."""
    s = open_store(store_url)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI creates an isolated store.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def add_task(store: TaskStore, title: str) -> dict[str, Any]:
    """Add a task via TaskService, asserting success."""
    from tasker.services.tasks import TaskService

    result = TaskService(store).add_task(title)
    assert result.ok, result.error
    return result.data


def titles(outcome: Any) -> list[str]:
    """Titles from a Found outcome, or [] for anything else."""
    from tasker.domain.outcomes import Found

    if isinstance(outcome, Found):
        return [t.title for t in outcome.tasks]
    return []


def count_tasks(store: TaskStore, selector: Any = None) -> int:
    """Count rows in the store's table matching *selector* (default: all)."""
    from sqlalchemy import func, select

    stmt = select(func.count()).select_from(store.table)
    if selector is not None:
        stmt = stmt.where(selector)
    with store.engine.connect() as conn:
        return int(conn.execute(stmt).scalar_one())
