"""AppContext, the shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the task store handle for the lifetime of the
process and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from tasker.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tasker.config.settings import TaskerSettings
    from tasker.infrastructure.repositories.tasks import TaskStore
    from tasker.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is opened lazily on first use so ``--help`` and
    ``--version`` never touch the database.
    """

    def __init__(self, settings: TaskerSettings) -> None:
        self.settings = settings
        self._store: TaskStore | None = None

        from tasker.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            sql_echo=settings.store.echo,
        )

    @property
    def store(self) -> TaskStore:
        """The task store (opened and pinged on first access).

        Raises ``click.ClickException`` (exit 1) when the backend is
        unreachable.
        """
        if self._store is None:
            from tasker.config.logging import bind_store
            from tasker.infrastructure.repositories.tasks import StoreError, open_store

            url, collection = self.settings.store_url, self.settings.store.collection
            try:
                self._store = open_store(url, collection=collection)
            except StoreError as exc:
                logger.error("Failed to open task store: %s", exc)
                raise click.ClickException(str(exc)) from exc
            bind_store(url, collection)
            logger.debug("Opened task store")
        return self._store

    def close(self) -> None:
        """Dispose of the store's connections if it was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          An empty ``all``/``finished`` listing is a notice and goes to
          stderr; the empty pending view stays on stdout.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output, err=not settings.json_output and _is_empty_notice(result))
        else:
            click.echo(output, err=True)
            raise SystemExit(1)


def _is_empty_notice(result: ServiceResult) -> bool:
    return (
        result.op == "list_tasks"
        and not result.data.get("items")
        and result.data.get("selector") != "pending"
    )
