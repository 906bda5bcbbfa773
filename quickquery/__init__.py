"""Write-only SQL execution with affected-row assertions."""

from quickquery.core.exceptions import (
    ParameterError,
    QuickQueryError,
    TransactionStateError,
    UnexpectedRowCount,
)
from quickquery.db.command import AsyncCommand, Command
from quickquery.db.connection import (
    AsyncConnectionProvider,
    AsyncDsnConnectionProvider,
    AsyncExistingConnectionProvider,
    AsyncPoolConnectionProvider,
    ConnectionProvider,
    DsnConnectionProvider,
    ExistingConnectionProvider,
    PoolConnectionProvider,
)
from quickquery.db.transaction import (
    BoundaryState,
    TransactionBoundary,
    async_transaction_boundary,
    transaction_boundary,
)
from quickquery.models.parameters import ParameterSet, to_parameter_set
from quickquery.models.policy import RowCountPolicy
from quickquery.services.executor import QuickQuery
from quickquery.services.executor_async import AsyncQuickQuery

__all__ = [
    "AsyncCommand",
    "AsyncConnectionProvider",
    "AsyncDsnConnectionProvider",
    "AsyncExistingConnectionProvider",
    "AsyncPoolConnectionProvider",
    "AsyncQuickQuery",
    "BoundaryState",
    "Command",
    "ConnectionProvider",
    "DsnConnectionProvider",
    "ExistingConnectionProvider",
    "ParameterError",
    "ParameterSet",
    "PoolConnectionProvider",
    "QuickQuery",
    "QuickQueryError",
    "RowCountPolicy",
    "TransactionBoundary",
    "TransactionStateError",
    "UnexpectedRowCount",
    "async_transaction_boundary",
    "to_parameter_set",
    "transaction_boundary",
]
