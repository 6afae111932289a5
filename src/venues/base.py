from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from arbitrage.scanner import SnapshotSource
from arbitrage.snapshot import ReserveSnapshot
from chain.client import ChainClient
from chain.errors import ContractNotFound
from core.base_types import Address, TokenAmount

from .erc20 import Token
from .errors import VenueError


@dataclass(frozen=True)
class PoolInfo:
    """Two-token pool state as read from chain, before normalization."""

    venue: str
    address: Address
    token0: Token
    token1: Token
    balance0: TokenAmount
    balance1: TokenAmount
    fee_multiplier: float
    details: dict[str, object] = field(default_factory=dict)

    def to_snapshot(self, token_x: Optional[Address] = None) -> ReserveSnapshot:
        """
        Normalize into a ReserveSnapshot.

        ``token_x`` selects which pool token is asset X; by default token0.
        """
        if token_x is None or token_x == self.token0.address:
            reserve_x, reserve_y = self.balance0, self.balance1
        elif token_x == self.token1.address:
            reserve_x, reserve_y = self.balance1, self.balance0
        else:
            raise VenueError(f"token {token_x} not in {self.venue} pool {self.address}")
        return ReserveSnapshot(
            reserve_x=reserve_x.as_float(),
            reserve_y=reserve_y.as_float(),
            fee_multiplier=self.fee_multiplier,
        )


class VenueAdapter(SnapshotSource, Protocol):
    """One adapter per venue family; the solver never sees which one."""

    def fetch_info(self) -> PoolInfo:
        ...


def verify_contract(client: ChainClient, address: Address) -> int:
    """Raise ContractNotFound unless code is deployed; return the code size."""
    code = client.get_code(address)
    if not code:
        raise ContractNotFound(address.checksum)
    return len(code)
