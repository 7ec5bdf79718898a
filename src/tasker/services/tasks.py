"""TaskService: add, list, complete and delete tasks.

Translates store outcomes into ServiceResult envelopes:

- ``Found`` / ``Empty`` both succeed; an empty list is a normal answer.
- ``NotFound`` fails with ``NOT_FOUND``.
- ``Failure`` fails with ``STORE_ERROR``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tasker.domain.outcomes import Applied, Failure, Found, NotFound
from tasker.domain.task import Task, new_task, validate_title
from tasker.infrastructure.repositories.filters import SELECTORS, selector_for
from tasker.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from tasker.domain.outcomes import WriteOutcome
    from tasker.infrastructure.repositories.tasks import TaskStore

logger = logging.getLogger(__name__)


def task_payload(task: Task) -> dict[str, Any]:
    """JSON-safe dict for one task."""
    return task.model_dump(mode="json")


class TaskService:
    """Task operations over a single :class:`TaskStore`."""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    def add_task(self, title: str) -> ServiceResult:
        """Validate *title* and insert a new pending task."""
        op = "add_task"
        vr = validate_title(title)
        if not vr.valid:
            return ServiceResult.failure(
                op, ErrorCode.VALIDATION_FAILED, "; ".join(vr.errors), field="title"
            )

        outcome = self._store.create(new_task(title))
        return self._write_result(op, outcome)

    def list_tasks(self, selector: str = "pending") -> ServiceResult:
        """List tasks matching a named selector: ``all``, ``pending`` or ``finished``."""
        op = "list_tasks"
        if selector not in SELECTORS:
            return ServiceResult.failure(
                op,
                ErrorCode.VALIDATION_FAILED,
                f"Unknown selector: {selector}",
                allowed=sorted(SELECTORS),
            )

        outcome = self._store.find_many(selector_for(selector, self._store.table))
        if isinstance(outcome, Failure):
            return ServiceResult.failure(op, ErrorCode.STORE_ERROR, outcome.reason)

        items = [task_payload(t) for t in outcome.tasks] if isinstance(outcome, Found) else []

        logger.debug("Listed %d %s tasks", len(items), selector)
        return ServiceResult.success(op, selector=selector, items=items, count=len(items))

    def complete_task(self, title: str) -> ServiceResult:
        """Mark the first task titled *title* as done."""
        return self._write_result("complete_task", self._store.complete_one(title))

    def delete_task(self, title: str) -> ServiceResult:
        """Delete the first task titled *title*."""
        return self._write_result("delete_task", self._store.delete_one(title))

    def _write_result(self, op: str, outcome: WriteOutcome) -> ServiceResult:
        if isinstance(outcome, Applied):
            return ServiceResult.success(op, **task_payload(outcome.task))
        if isinstance(outcome, NotFound):
            return ServiceResult.failure(
                op,
                ErrorCode.NOT_FOUND,
                f"No task found with title: {outcome.title!r}",
                title=outcome.title,
            )
        return ServiceResult.failure(op, ErrorCode.STORE_ERROR, outcome.reason)
