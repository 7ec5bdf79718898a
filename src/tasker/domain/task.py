"""Task entity, title validation, and the creation factory."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from pydantic import BaseModel, Field

from tasker.domain.ids import TASK_ID_PATTERN, generate_task_id


def utc_now() -> datetime:
    """Current UTC time."""
    return datetime.now(UTC)


class Task(BaseModel):
    """A single task as stored in the ``tasks`` collection."""

    model_config = {"frozen": True}

    id: str = Field(pattern=TASK_ID_PATTERN)
    created_at: datetime
    updated_at: datetime
    title: str
    done: bool = False

    def mark_done(self, at: datetime | None = None) -> Task:
        """Return a copy flagged as done with a refreshed ``updated_at``."""
        return self.model_copy(update={"done": True, "updated_at": at or utc_now()})


@dataclass
class ValidationResult:
    """Result of a task validation check."""

    valid: bool
    errors: list[str] = field(default_factory=list)


def validate_title(title: str) -> ValidationResult:
    """A title must be non-empty. Whitespace is kept as typed."""
    if not title:
        return ValidationResult(valid=False, errors=["Please enter a task"])
    return ValidationResult(valid=True)


def new_task(title: str, *, now: datetime | None = None) -> Task:
    """Build a fresh pending task. Callers validate *title* first."""
    created = now or utc_now()
    return Task(
        id=generate_task_id(created.timestamp()),
        created_at=created,
        updated_at=created,
        title=title,
        done=False,
    )
