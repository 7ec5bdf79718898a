"""Task ID generation.

IDs are 24 lowercase hex characters: a 4-byte big-endian Unix timestamp
followed by 8 random bytes. They sort roughly by creation time and are
opaque to everything above the store.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import secrets
import time

TASK_ID_PATTERN = r"^[0-9a-f]{24}$"


def generate_task_id(now: float | None = None) -> str:
    """Return a new task ID stamped with *now* (default: current time)."""
    seconds = int(time.time() if now is None else now) & 0xFFFFFFFF
    return f"{seconds:08x}{secrets.token_hex(8)}"
