from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class SourcePool(Enum):
    A = "A"
    B = "B"

    @property
    def other(self) -> "SourcePool":
        return SourcePool.B if self is SourcePool.A else SourcePool.A


@dataclass(frozen=True)
class Opportunity:
    """Withdraw X from ``source_pool``; ``input_amount`` is the optimal size."""

    source_pool: SourcePool
    input_amount: float

    @property
    def deposit_pool(self) -> SourcePool:
        return self.source_pool.other


@dataclass(frozen=True)
class NoOpportunity:
    """Reserves and fees admit no profitable single trade."""


@dataclass(frozen=True)
class InvalidInput:
    """The pair could not be evaluated."""

    reason: str


ArbitrageOutcome = Union[Opportunity, NoOpportunity, InvalidInput]
