"""Connection providers handing out scoped psycopg connections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager, AbstractContextManager, asynccontextmanager, contextmanager
from typing import Any, AsyncIterator, Iterator

import psycopg
from psycopg import AsyncConnection, Connection
from psycopg_pool import AsyncConnectionPool, ConnectionPool


class ConnectionProvider(ABC):
    @abstractmethod
    def provide(self) -> AbstractContextManager[Connection]:
        """Return a context manager yielding an open connection.

        The connection is released when the context exits, on every path.
        """
        raise NotImplementedError


class PoolConnectionProvider(ConnectionProvider):
    """Borrow connections from a psycopg pool.

    The pool commits pending work when a connection is returned without
    error and rolls it back otherwise.
    """

    def __init__(self, pool: ConnectionPool, *, timeout: float | None = None) -> None:
        self._pool = pool
        self._timeout = timeout

    @property
    def pool(self) -> ConnectionPool:
        return self._pool

    def provide(self) -> AbstractContextManager[Connection]:
        return self._pool.connection(timeout=self._timeout)


class DsnConnectionProvider(ConnectionProvider):
    """Open a dedicated connection per call and close it afterwards."""

    def __init__(self, conninfo: str, **connect_kwargs: Any) -> None:
        self._conninfo = conninfo
        self._connect_kwargs = connect_kwargs

    @contextmanager
    def provide(self) -> Iterator[Connection]:
        with psycopg.connect(self._conninfo, **self._connect_kwargs) as conn:
            yield conn


class ExistingConnectionProvider(ConnectionProvider):
    """Hand out a connection owned by the caller.

    The connection is never committed, rolled back or closed here. Guarded
    calls on a connection with a transaction in progress run in a savepoint.
    """

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    @contextmanager
    def provide(self) -> Iterator[Connection]:
        yield self._connection


class AsyncConnectionProvider(ABC):
    @abstractmethod
    def provide(self) -> AbstractAsyncContextManager[AsyncConnection]:
        raise NotImplementedError


class AsyncPoolConnectionProvider(AsyncConnectionProvider):
    def __init__(self, pool: AsyncConnectionPool, *, timeout: float | None = None) -> None:
        self._pool = pool
        self._timeout = timeout

    @property
    def pool(self) -> AsyncConnectionPool:
        return self._pool

    def provide(self) -> AbstractAsyncContextManager[AsyncConnection]:
        return self._pool.connection(timeout=self._timeout)


class AsyncDsnConnectionProvider(AsyncConnectionProvider):
    def __init__(self, conninfo: str, **connect_kwargs: Any) -> None:
        self._conninfo = conninfo
        self._connect_kwargs = connect_kwargs

    @asynccontextmanager
    async def provide(self) -> AsyncIterator[AsyncConnection]:
        async with await AsyncConnection.connect(self._conninfo, **self._connect_kwargs) as conn:
            yield conn


class AsyncExistingConnectionProvider(AsyncConnectionProvider):
    def __init__(self, connection: AsyncConnection) -> None:
        self._connection = connection

    @asynccontextmanager
    async def provide(self) -> AsyncIterator[AsyncConnection]:
        yield self._connection


__all__ = [
    "AsyncConnectionProvider",
    "AsyncDsnConnectionProvider",
    "AsyncExistingConnectionProvider",
    "AsyncPoolConnectionProvider",
    "ConnectionProvider",
    "DsnConnectionProvider",
    "ExistingConnectionProvider",
    "PoolConnectionProvider",
]
