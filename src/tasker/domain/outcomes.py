"""Tagged outcomes returned by the task store.

Absence of data is a normal outcome, not a fault:

- ``Found`` / ``Empty`` answer a find-many query.
- ``Applied`` / ``NotFound`` answer a targeted write.
- ``Failure`` means the backend could not be reached, rejected the write,
  or returned something that would not decode.

Callers branch on the type with ``isinstance``, never on a sentinel
value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tasker.domain.task import Task


@dataclass(frozen=True)
class Found:
    """One or more tasks matched."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)


@dataclass(frozen=True)
class Empty:
    """The query ran and matched nothing."""


@dataclass(frozen=True)
class Applied:
    """A write went through. *task* is the affected task as it now stands
    (or as it stood, for deletes)."""

    task: Task


@dataclass(frozen=True)
class NotFound:
    """A targeted write matched no task."""

    title: str


@dataclass(frozen=True)
class Failure:
    """The backend failed; *reason* is a human-readable description."""

    reason: str


FindOutcome = Found | Empty | Failure
WriteOutcome = Applied | NotFound | Failure
