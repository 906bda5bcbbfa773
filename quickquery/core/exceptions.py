"""Exception hierarchy shared by the sync and async executors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from quickquery.models.policy import RowCountPolicy


class QuickQueryError(Exception):
    """Base class for errors raised by quickquery itself.

    Driver errors (``psycopg.Error``) are never wrapped and do not derive
    from this class.
    """


class ParameterError(QuickQueryError, ValueError):
    """Raised when parameters cannot be adapted into a parameter set."""


class TransactionStateError(QuickQueryError, RuntimeError):
    """Raised when a transaction boundary is used outside its pending state."""


class UnexpectedRowCount(QuickQueryError):
    """Raised when a statement affects a number of rows the policy rejects.

    The statement's effect has already been rolled back when this error
    reaches the caller.
    """

    def __init__(self, command: Any, affected: int, policy: RowCountPolicy) -> None:
        super().__init__(
            f"Statement affected {affected} row(s), expected {policy.describe()}: {command}"
        )
        self.command = command
        self.affected = affected
        self.policy = policy

    @property
    def sql(self) -> str:
        return self.command.sql


__all__ = [
    "ParameterError",
    "QuickQueryError",
    "TransactionStateError",
    "UnexpectedRowCount",
]
