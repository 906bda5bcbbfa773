"""Statement commands executed on a caller-supplied connection."""

from __future__ import annotations

import logging
from typing import Any

from psycopg import AsyncConnection, Connection

from quickquery.models.parameters import ParameterSet, to_parameter_set

_LOGGER = logging.getLogger(__name__)


class _BaseCommand:
    def __init__(self, sql: str, parameters: ParameterSet | None = None) -> None:
        if not sql or not sql.strip():
            raise ValueError("SQL statement cannot be empty")
        self.sql = sql
        self.parameters = to_parameter_set(parameters)

    def _driver_params(self) -> dict[str, Any] | None:
        # No parameters means no placeholder interpolation by the driver.
        if not self.parameters:
            return None
        return dict(self.parameters)

    def _log_executed(self, affected: int) -> None:
        _LOGGER.debug(
            "Statement executed",
            extra={"sql": self.sql, "affected": affected},
        )

    def __str__(self) -> str:
        return self.sql

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sql={self.sql!r}, parameters={dict(self.parameters)!r})"


class Command(_BaseCommand):
    """A single write statement executed without a result set.

    Building a command validates its input only; nothing is sent until
    `execute_non_query()` runs it on a connection.
    """

    def execute_non_query(self, connection: Connection) -> int:
        """Run the statement once and return the affected row count."""
        with connection.cursor() as cur:
            cur.execute(self.sql, self._driver_params())
            affected = cur.rowcount
        self._log_executed(affected)
        return affected


class AsyncCommand(_BaseCommand):
    async def execute_non_query(self, connection: AsyncConnection) -> int:
        async with connection.cursor() as cur:
            await cur.execute(self.sql, self._driver_params())
            affected = cur.rowcount
        self._log_executed(affected)
        return affected


__all__ = ["AsyncCommand", "Command"]
