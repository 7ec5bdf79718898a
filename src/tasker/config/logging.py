"""Log routing for tasker.

Every module logs through ``logging.getLogger(__name__)``. This module gives
the root logger one stderr handler whose formatter runs the records through
structlog: a console renderer by default, JSON lines with ``--log-json``.

Once a store is opened, :func:`bind_store` attaches its (password-free) URL
and collection to every later line. ``[store] echo`` turns on SQLAlchemy's
statement log through the same handler, so SQL never lands on stdout.
"""

from __future__ import annotations

import logging
import sys

import structlog
from sqlalchemy.engine import make_url

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _formatter(log_json: bool) -> logging.Formatter:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_PRE_CHAIN,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    sql_echo: bool = False,
) -> None:
    """Install the stderr handler and set tasker's logger levels.

    Args:
        verbose: ``tasker.*`` loggers at DEBUG instead of WARNING.
        log_json: Render JSON lines instead of console output.
        sql_echo: Log every SQL statement (``sqlalchemy.engine`` at INFO).

    Safe to call repeatedly; each call replaces the previous handler and
    drops any bound store context.
    """
    structlog.contextvars.clear_contextvars()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(log_json))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    levels = {
        "tasker": logging.DEBUG if verbose else logging.WARNING,
        "sqlalchemy": logging.WARNING,
        "sqlalchemy.engine": logging.INFO if sql_echo else logging.WARNING,
    }
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def bind_store(url: str, collection: str) -> None:
    """Tag later log lines with the store they concern."""
    structlog.contextvars.bind_contextvars(
        store=make_url(url).render_as_string(hide_password=True),
        collection=collection,
    )
