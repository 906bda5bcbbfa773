from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RowCountPolicy(BaseModel):
    """Accepted affected-row count: exactly ``n``, or at most ``n``."""

    model_config = ConfigDict(frozen=True)

    n: int = Field(ge=0)
    accepts_less: bool = False

    @classmethod
    def exactly(cls, n: int) -> RowCountPolicy:
        return cls(n=n, accepts_less=False)

    @classmethod
    def at_most(cls, n: int) -> RowCountPolicy:
        return cls(n=n, accepts_less=True)

    def accepts(self, affected: int) -> bool:
        return affected == self.n or (self.accepts_less and affected < self.n)

    def describe(self) -> str:
        if self.accepts_less:
            return f"at most {self.n}"
        return f"exactly {self.n}"


EXACTLY_ONE_ROW = RowCountPolicy.exactly(1)
ONE_ROW_OR_LESS = RowCountPolicy.at_most(1)
