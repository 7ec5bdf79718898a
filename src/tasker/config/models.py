"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tasker.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from tasker.infrastructure.database.schema import DEFAULT_COLLECTION


class StoreConfig(BaseModel):
    """[store] section.

    ``url`` is a SQLAlchemy database URL. When unset, the store lives in
    ``{root}/.tasker/tasker.db``. ``echo`` logs each SQL statement on
    stderr.
    """

    model_config = {"frozen": True}

    url: str | None = None
    collection: str = DEFAULT_COLLECTION
    echo: bool = False
