"""Repository layer for task persistence."""

from tasker.infrastructure.repositories.filters import (
    SELECTORS,
    filter_all,
    filter_by_title,
    filter_finished,
    filter_pending,
    selector_for,
)
from tasker.infrastructure.repositories.tasks import StoreError, TaskStore, open_store

__all__ = [
    "SELECTORS",
    "StoreError",
    "TaskStore",
    "filter_all",
    "filter_by_title",
    "filter_finished",
    "filter_pending",
    "open_store",
    "selector_for",
]
