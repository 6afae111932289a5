"""Balancer pool adapter: swap fee plus per-token balance lookup."""

from __future__ import annotations

import logging
from typing import Optional

from arbitrage.errors import InvalidInputError
from arbitrage.snapshot import ReserveSnapshot
from chain.client import ChainClient
from chain.contract import call_single
from core.base_types import Address

from .base import PoolInfo, verify_contract
from .erc20 import load_token
from .errors import VenueError

logger = logging.getLogger(__name__)

# getSwapFee() is an 18-decimal fixed-point fraction.
ONE = 10**18


def swap_fee_to_multiplier(swap_fee: int) -> float:
    if swap_fee < 0 or swap_fee >= ONE:
        raise InvalidInputError(f"swap fee out of range: {swap_fee}")
    return 1 - swap_fee / ONE


class BalancerPoolAdapter:
    """Reads a two-token Balancer (or BCoW) pool as two effective reserves."""

    venue = "balancer"

    def __init__(
        self,
        client: ChainClient,
        pool_address: Address,
        token_x: Optional[Address] = None,
    ):
        self._client = client
        self._address = pool_address
        self._token_x = token_x

    @property
    def address(self) -> Address:
        return self._address

    def fetch_tokens(self) -> list[Address]:
        tokens = call_single(self._client, self._address, "getFinalTokens()", "address[]")
        return [Address(token) for token in tokens]

    def fetch_info(self) -> PoolInfo:
        code_size = verify_contract(self._client, self._address)
        logger.info("balancer pool %s code size %d bytes", self._address, code_size)

        token_addresses = self.fetch_tokens()
        if len(token_addresses) != 2:
            raise VenueError(
                f"balancer pool {self._address} has {len(token_addresses)} tokens, expected 2"
            )
        swap_fee = int(call_single(self._client, self._address, "getSwapFee()", "uint256"))

        tokens = [load_token(self._client, address) for address in token_addresses]
        balances = [
            token.amount(
                call_single(
                    self._client,
                    self._address,
                    "getBalance(address)",
                    "uint256",
                    ["address"],
                    [token.address.checksum],
                )
            )
            for token in tokens
        ]

        return PoolInfo(
            venue=self.venue,
            address=self._address,
            token0=tokens[0],
            token1=tokens[1],
            balance0=balances[0],
            balance1=balances[1],
            fee_multiplier=swap_fee_to_multiplier(swap_fee),
            details={"swap_fee": swap_fee},
        )

    def fetch_snapshot(self) -> ReserveSnapshot:
        return self.fetch_info().to_snapshot(self._token_x)
