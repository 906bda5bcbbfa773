from __future__ import annotations

from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Any, Callable

from psycopg import Connection

from quickquery.core.database import get_pool
from quickquery.core.exceptions import UnexpectedRowCount
from quickquery.db.command import Command
from quickquery.db.connection import ConnectionProvider, PoolConnectionProvider
from quickquery.db.transaction import TransactionBoundary, transaction_boundary
from quickquery.models.policy import EXACTLY_ONE_ROW, ONE_ROW_OR_LESS, RowCountPolicy

BoundaryFactory = Callable[[Connection], AbstractContextManager[TransactionBoundary]]


class QuickQuery:
    """Run write statements, optionally asserting how many rows they touch.

    Guarded operations run inside a transaction boundary and raise
    `UnexpectedRowCount` after rolling back when the affected row count
    falls outside the requested policy.
    """

    def __init__(
        self,
        provider: ConnectionProvider | None = None,
        *,
        boundary_factory: BoundaryFactory = transaction_boundary,
    ) -> None:
        if provider is None:
            provider = PoolConnectionProvider(get_pool())
        self._provider = provider
        self._boundary_factory = boundary_factory

    @property
    def provider(self) -> ConnectionProvider:
        return self._provider

    def without_return(self, sql: str, parameters: Mapping[str, Any] | None = None) -> None:
        command = Command(sql, parameters)
        with self._provider.provide() as connection:
            command.execute_non_query(connection)

    def without_return_affecting_exactly_one_row(
        self, sql: str, parameters: Mapping[str, Any] | None = None
    ) -> None:
        self.run_with_policy(sql, EXACTLY_ONE_ROW, parameters)

    def without_return_affecting_one_row_or_less(
        self, sql: str, parameters: Mapping[str, Any] | None = None
    ) -> None:
        self.run_with_policy(sql, ONE_ROW_OR_LESS, parameters)

    def without_return_affecting_exactly_n_rows(
        self, sql: str, n: int, parameters: Mapping[str, Any] | None = None
    ) -> None:
        self.run_with_policy(sql, RowCountPolicy.exactly(n), parameters)

    def without_return_affecting_n_rows_or_less(
        self, sql: str, n: int, parameters: Mapping[str, Any] | None = None
    ) -> None:
        self.run_with_policy(sql, RowCountPolicy.at_most(n), parameters)

    def run_with_policy(
        self,
        sql: str,
        policy: RowCountPolicy,
        parameters: Mapping[str, Any] | None = None,
    ) -> None:
        command = Command(sql, parameters)
        with self._provider.provide() as connection:
            with self._boundary_factory(connection) as boundary:
                affected = command.execute_non_query(connection)
                if not policy.accepts(affected):
                    raise UnexpectedRowCount(command, affected, policy)
                boundary.complete()


__all__ = ["BoundaryFactory", "QuickQuery"]
