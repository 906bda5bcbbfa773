"""Asyncio counterpart of `QuickQuery`."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import AbstractAsyncContextManager
from typing import Any, Callable

from psycopg import AsyncConnection

from quickquery.core.database import get_async_pool
from quickquery.core.exceptions import UnexpectedRowCount
from quickquery.db.command import AsyncCommand
from quickquery.db.connection import AsyncConnectionProvider, AsyncPoolConnectionProvider
from quickquery.db.transaction import TransactionBoundary, async_transaction_boundary
from quickquery.models.policy import EXACTLY_ONE_ROW, ONE_ROW_OR_LESS, RowCountPolicy

AsyncBoundaryFactory = Callable[[AsyncConnection], AbstractAsyncContextManager[TransactionBoundary]]


class AsyncQuickQuery:
    def __init__(
        self,
        provider: AsyncConnectionProvider | None = None,
        *,
        boundary_factory: AsyncBoundaryFactory = async_transaction_boundary,
    ) -> None:
        if provider is None:
            provider = AsyncPoolConnectionProvider(get_async_pool())
        self._provider = provider
        self._boundary_factory = boundary_factory

    @property
    def provider(self) -> AsyncConnectionProvider:
        return self._provider

    async def without_return(self, sql: str, parameters: Mapping[str, Any] | None = None) -> None:
        command = AsyncCommand(sql, parameters)
        async with self._provider.provide() as connection:
            await command.execute_non_query(connection)

    async def without_return_affecting_exactly_one_row(
        self, sql: str, parameters: Mapping[str, Any] | None = None
    ) -> None:
        await self.run_with_policy(sql, EXACTLY_ONE_ROW, parameters)

    async def without_return_affecting_one_row_or_less(
        self, sql: str, parameters: Mapping[str, Any] | None = None
    ) -> None:
        await self.run_with_policy(sql, ONE_ROW_OR_LESS, parameters)

    async def without_return_affecting_exactly_n_rows(
        self, sql: str, n: int, parameters: Mapping[str, Any] | None = None
    ) -> None:
        await self.run_with_policy(sql, RowCountPolicy.exactly(n), parameters)

    async def without_return_affecting_n_rows_or_less(
        self, sql: str, n: int, parameters: Mapping[str, Any] | None = None
    ) -> None:
        await self.run_with_policy(sql, RowCountPolicy.at_most(n), parameters)

    async def run_with_policy(
        self,
        sql: str,
        policy: RowCountPolicy,
        parameters: Mapping[str, Any] | None = None,
    ) -> None:
        command = AsyncCommand(sql, parameters)
        async with self._provider.provide() as connection:
            async with self._boundary_factory(connection) as boundary:
                affected = await command.execute_non_query(connection)
                if not policy.accepts(affected):
                    raise UnexpectedRowCount(command, affected, policy)
                boundary.complete()


__all__ = ["AsyncBoundaryFactory", "AsyncQuickQuery"]
