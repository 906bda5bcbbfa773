"""Transaction boundaries that roll back unless explicitly completed."""

from __future__ import annotations

import enum
import logging
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncIterator, Iterator

import psycopg
from psycopg import AsyncConnection, Connection

from quickquery.core.exceptions import TransactionStateError

_LOGGER = logging.getLogger(__name__)


class BoundaryState(enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class TransactionBoundary:
    """Unit-of-work marker for one scope.

    Effects persist only if `complete()` was called before the scope ends
    without an exception; every other exit rolls back.
    """

    def __init__(self) -> None:
        self._state = BoundaryState.PENDING

    @property
    def state(self) -> BoundaryState:
        return self._state

    @property
    def completed(self) -> bool:
        return self._state is BoundaryState.COMPLETED

    def complete(self) -> None:
        if self._state is not BoundaryState.PENDING:
            raise TransactionStateError(
                f"Cannot complete a transaction boundary in state {self._state.value}"
            )
        self._state = BoundaryState.COMPLETED

    def _settle(self, committed: bool) -> None:
        self._state = BoundaryState.COMMITTED if committed else BoundaryState.ROLLED_BACK
        _LOGGER.debug("Transaction boundary %s", self._state.value)


@contextmanager
def transaction_boundary(connection: Connection) -> Iterator[TransactionBoundary]:
    """Open a boundary on ``connection``.

    Uses a savepoint when the connection already has a transaction in
    progress, so enclosing work is left to its owner.
    """
    boundary = TransactionBoundary()
    try:
        with connection.transaction() as transaction:
            yield boundary
            if not boundary.completed:
                raise psycopg.Rollback(transaction)
    except BaseException:
        boundary._settle(committed=False)
        raise
    boundary._settle(committed=boundary.completed)


@asynccontextmanager
async def async_transaction_boundary(connection: AsyncConnection) -> AsyncIterator[TransactionBoundary]:
    boundary = TransactionBoundary()
    try:
        async with connection.transaction() as transaction:
            yield boundary
            if not boundary.completed:
                raise psycopg.Rollback(transaction)
    except BaseException:
        boundary._settle(committed=False)
        raise
    boundary._settle(committed=boundary.completed)


__all__ = [
    "BoundaryState",
    "TransactionBoundary",
    "async_transaction_boundary",
    "transaction_boundary",
]
